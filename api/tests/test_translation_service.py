import pytest
import requests

from lingodeck.core.config import Settings
from lingodeck.core.exceptions import UpstreamUnavailableError
from lingodeck.services import translation_service as translation_module
from lingodeck.services.translation_service import TranslationService
from lingodeck.utils.language_utils import get_language_code, get_language_name


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return self.payload


@pytest.fixture
def service():
    return TranslationService(Settings(database_url="sqlite://", google_translate_api_key="key"))


def test_language_helpers():
    assert get_language_code("Spanish") == "es"
    assert get_language_code("jp") == "ja"
    assert get_language_code("FR") == "fr"
    assert get_language_name("es") == "Spanish"
    assert get_language_name("Klingon") == "Klingon"


def test_translates_with_mapped_codes(service, monkeypatch):
    calls = []

    def fake_post(url, params=None, timeout=None):
        calls.append(params)
        return FakeResponse({"data": {"translations": [{"translatedText": "perro"}]}})

    monkeypatch.setattr(translation_module.requests, "post", fake_post)

    assert service.translate_text("dog", target_language="Spanish", source_language="English") == "perro"
    assert calls[0]["target"] == "es"
    assert calls[0]["source"] == "en"
    assert calls[0]["q"] == "dog"


def test_unescapes_html_entities(service, monkeypatch):
    monkeypatch.setattr(
        translation_module.requests, "post",
        lambda url, params=None, timeout=None: FakeResponse(
            {"data": {"translations": [{"translatedText": "It&#39;s a dog"}]}}
        )
    )

    assert service.translate_text("Es un perro", "en", "es") == "It's a dog"


def test_same_language_returns_text_without_request(service, monkeypatch):
    def fail_post(*args, **kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(translation_module.requests, "post", fail_post)

    assert service.translate_text("perro", "es", "Spanish") == "perro"


def test_request_failure_is_upstream_error(service, monkeypatch):
    def failing_post(*args, **kwargs):
        raise requests.exceptions.ConnectionError("connection refused")

    monkeypatch.setattr(translation_module.requests, "post", failing_post)

    with pytest.raises(UpstreamUnavailableError):
        service.translate_text("dog", "es", "en")


def test_unexpected_payload_is_upstream_error(service, monkeypatch):
    monkeypatch.setattr(
        translation_module.requests, "post",
        lambda url, params=None, timeout=None: FakeResponse({"data": {}})
    )

    with pytest.raises(UpstreamUnavailableError):
        service.translate_text("dog", "es", "en")
