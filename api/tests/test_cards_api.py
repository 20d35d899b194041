from datetime import datetime, timedelta

import pytest

from lingodeck.models.models import Card, UserPreferences

API = "/api/v1"


@pytest.fixture
def deck_id(client):
    response = client.post(f"{API}/decks", json={
        "user_id": "owner",
        "deck_name": "Animals",
        "description": "Spanish animals",
        "tags": [],
        "cards": [{"word": "perro", "language": "es", "sentence": "El perro corre.", "answer_word": "dog"}],
    })
    return response.json()["id"]


@pytest.fixture
def card_id(client, deck_id):
    cards = client.get(f"{API}/decks/{deck_id}/cards", params={"user_id": "owner"}).json()["cards"]
    return cards[0]["id"]


def parse(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestReview:

    def test_review_advances_card(self, client, card_id, sentence_stub):
        response = client.post(f"{API}/cards/{card_id}/review", json={"user_id": "owner"})

        assert response.status_code == 200
        card = response.json()
        assert card["level"] == 2
        assert card["sentence"] == "Una frase nueva con perro."
        assert card["word"] == "perro"
        assert card["answer_word"] == "dog"
        assert parse(card["next_review_at"]) - parse(card["last_reviewed_at"]) == timedelta(days=1)
        assert parse(card["next_review_at"]).tzinfo is not None
        assert sentence_stub.calls == [("es", "perro")]

    def test_upstream_failure_returns_503_and_keeps_card(self, client, card_id, sentence_stub):
        sentence_stub.fail = True

        response = client.post(f"{API}/cards/{card_id}/review", json={"user_id": "owner"})

        assert response.status_code == 503
        assert response.json()["type"] == "UpstreamUnavailableError"
        card = client.get(f"{API}/cards/{card_id}", params={"user_id": "owner"}).json()
        assert card["level"] == 1
        assert card["sentence"] == "El perro corre."

    def test_empty_generated_sentence_is_stored(self, client, card_id, sentence_stub):
        sentence_stub.next_sentence = ""

        card = client.post(f"{API}/cards/{card_id}/review", json={"user_id": "owner"}).json()

        assert card["level"] == 2
        assert card["sentence"] == ""

    def test_invalid_stored_level_is_bad_request(self, client, card_id, app_session):
        card = app_session.get(Card, card_id)
        card.level = 0
        app_session.add(card)
        app_session.commit()

        response = client.post(f"{API}/cards/{card_id}/review", json={"user_id": "owner"})

        assert response.status_code == 400
        assert response.json()["type"] == "InvalidLevelError"

    def test_review_by_stranger_is_forbidden(self, client, card_id):
        response = client.post(f"{API}/cards/{card_id}/review", json={"user_id": "stranger"})

        assert response.status_code == 403

    def test_review_missing_card(self, client):
        response = client.post(f"{API}/cards/12345/review", json={"user_id": "owner"})

        assert response.status_code == 404


class TestAddCard:

    def test_generates_card_per_scenario(self, client, deck_id, sentence_stub):
        response = client.post(f"{API}/decks/{deck_id}/cards", json={
            "user_id": "owner",
            "answer_word": "dog",
            "language": "es",
        })

        assert response.status_code == 201
        cards = response.json()["cards"]
        assert [card["scenario"] for card in cards] == ["basic", "daily", "social", "question", "response"]
        assert all(card["word"] == "perro" and card["level"] == 1 for card in cards)
        assert {call[3] for call in sentence_stub.calls} == {"beginner"}

        deck = client.get(f"{API}/decks/{deck_id}", params={"user_id": "owner"}).json()
        assert deck["card_count"] == 6

    def test_uses_saved_proficiency_level(self, client, deck_id, sentence_stub, app_session):
        app_session.add(UserPreferences(user_id="owner", proficiency_level="intermediate"))
        app_session.commit()

        client.post(f"{API}/decks/{deck_id}/cards", json={
            "user_id": "owner",
            "answer_word": "dog",
            "language": "es",
        })

        assert {call[3] for call in sentence_stub.calls} == {"intermediate"}

    def test_translation_failure_returns_503(self, client, deck_id, translation_stub):
        translation_stub.fail = True

        response = client.post(f"{API}/decks/{deck_id}/cards", json={
            "user_id": "owner",
            "answer_word": "dog",
            "language": "es",
        })

        assert response.status_code == 503

    def test_view_only_user_cannot_add(self, client, deck_id):
        client.post(f"{API}/shared-decks", json={
            "deck_id": deck_id,
            "shared_by_user_id": "owner",
            "shared_to_user_ids": ["friend"],
        })

        response = client.post(f"{API}/decks/{deck_id}/cards", json={
            "user_id": "friend",
            "answer_word": "dog",
            "language": "es",
        })

        assert response.status_code == 403


def test_due_cards(client, deck_id, card_id, app_session):
    assert client.get(f"{API}/decks/{deck_id}/cards/due", params={"user_id": "owner"}).json()["cards"] == []

    card = app_session.get(Card, card_id)
    card.next_review_at = card.next_review_at - timedelta(days=2)
    app_session.add(card)
    app_session.commit()

    due = client.get(f"{API}/decks/{deck_id}/cards/due", params={"user_id": "owner"}).json()["cards"]
    assert [c["id"] for c in due] == [card_id]


def test_schedule(client):
    schedule = client.get(f"{API}/cards/schedule", params={"max_level": 6}).json()["schedule"]

    assert [entry["interval_days"] for entry in schedule] == [1, 7, 16, 35, 70, 140]


def test_schedule_rejects_out_of_range_level(client):
    assert client.get(f"{API}/cards/schedule", params={"max_level": 0}).status_code == 422


def test_card_stays_reviewable_past_level_twenty(client, card_id, app_session):
    card = app_session.get(Card, card_id)
    card.level = 20
    app_session.add(card)
    app_session.commit()

    for expected_level in (21, 22, 23):
        response = client.post(f"{API}/cards/{card_id}/review", json={"user_id": "owner"})
        assert response.status_code == 200
        assert response.json()["level"] == expected_level

    assert parse(response.json()["next_review_at"]).year == 9999
