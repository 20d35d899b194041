import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from lingodeck.api.v1.dependencies import get_sentence_service, get_translation_service
from lingodeck.core.config import Settings
from lingodeck.core.database import create_db_engine, init_db
from lingodeck.core.exceptions import UpstreamUnavailableError
from lingodeck.main import create_app


class StubSentenceService:
    """Sentence generator returning canned sentences and recording its calls."""

    def __init__(self):
        self.calls = []
        self.fail = False
        self.next_sentence = None

    def generate_sentence(self, language, word):
        self.calls.append((language, word))
        if self.fail:
            raise UpstreamUnavailableError("Gemini API request failed: 503")
        if self.next_sentence is not None:
            return self.next_sentence
        return f"Una frase nueva con {word}."

    def generate_scenario_sentence(self, language, word, scenario, proficiency_level):
        self.calls.append((language, word, scenario.value, proficiency_level.value))
        if self.fail:
            raise UpstreamUnavailableError("Gemini API request failed: 503")
        return f"{scenario.value.capitalize()}: {word} ({proficiency_level.value})."


class StubTranslationService:
    """Translator backed by a dictionary; unknown texts get a marker prefix."""

    def __init__(self):
        self.words = {"dog": "perro", "house": "casa"}
        self.fail = False

    def translate_text(self, text, target_language, source_language=None):
        if self.fail:
            raise UpstreamUnavailableError("Translation API request failed: 500")
        if text in self.words:
            return self.words[text]
        return f"[{target_language}] {text}"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        google_gemini_api_key="test-gemini-key",
        google_translate_api_key="test-translate-key",
        environment="test",
        text_service_timeout=5,
    )


@pytest.fixture
def sentence_stub():
    return StubSentenceService()


@pytest.fixture
def translation_stub():
    return StubTranslationService()


@pytest.fixture
def app(settings, sentence_stub, translation_stub):
    app = create_app(settings)
    app.dependency_overrides[get_sentence_service] = lambda: sentence_stub
    app.dependency_overrides[get_translation_service] = lambda: translation_stub
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_session(app, client):
    """Session on the application's database, for arranging and inspecting rows."""
    with Session(app.state.engine) as session:
        yield session


@pytest.fixture
def db_session():
    """Session on a fresh in-memory database, for service-level tests."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()
