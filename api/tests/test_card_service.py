from datetime import timedelta

import pytest
from sqlalchemy import update

from lingodeck.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    UpstreamUnavailableError,
)
from lingodeck.models.models import AccessLevel, Card, Deck, SharedDeck
from lingodeck.services import card_service
from lingodeck.services.srs_service import MAX_NEXT_REVIEW_AT
from lingodeck.utils.time_utils import as_utc, utc_now


@pytest.fixture
def deck(db_session):
    deck = Deck(user_id="owner", deck_name="Animals", description="Spanish animals", tags=["es"])
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


@pytest.fixture
def card(db_session, deck):
    card = Card.create(
        deck_id=deck.id,
        word="perro",
        language="es",
        sentence="El perro corre.",
        answer_word="dog",
        sentence_translation="The dog runs.",
    )
    db_session.add(card)
    db_session.commit()
    db_session.refresh(card)
    return card


def fresh_sentence(language, word):
    return f"Mi {word} es grande."


class TestReviewCard:

    def test_review_persists_new_state(self, db_session, card):
        before = utc_now()

        reviewed = card_service.review_card(db_session, card.id, "owner", fresh_sentence)

        db_session.expire_all()
        stored = db_session.get(Card, card.id)
        assert reviewed.id == card.id
        assert stored.level == 2
        assert stored.sentence == "Mi perro es grande."
        assert stored.sentence_translation is None
        assert stored.answer_word == "dog"
        assert as_utc(stored.last_reviewed_at) >= before - timedelta(seconds=1)
        delta = as_utc(stored.next_review_at) - as_utc(stored.last_reviewed_at)
        assert delta == timedelta(days=1)

    def test_second_review_uses_level_two_interval(self, db_session, card):
        card_service.review_card(db_session, card.id, "owner", fresh_sentence)
        reviewed = card_service.review_card(db_session, card.id, "owner", fresh_sentence)

        assert reviewed.level == 3
        delta = as_utc(reviewed.next_review_at) - as_utc(reviewed.last_reviewed_at)
        assert delta == timedelta(days=7)

    def test_failed_generation_leaves_row_unchanged(self, db_session, card):
        def unavailable(language, word):
            raise UpstreamUnavailableError("Gemini API request timed out")

        with pytest.raises(UpstreamUnavailableError):
            card_service.review_card(db_session, card.id, "owner", unavailable)

        db_session.expire_all()
        stored = db_session.get(Card, card.id)
        assert stored.level == 1
        assert stored.sentence == "El perro corre."
        assert stored.sentence_translation == "The dog runs."

    def test_concurrent_review_is_a_conflict(self, db_session, card):
        def racing_generator(language, word):
            # Another review lands while the sentence is being generated
            db_session.connection().execute(
                update(Card).where(Card.id == card.id).values(level=2)
            )
            return "Otra frase."

        with pytest.raises(ConflictError):
            card_service.review_card(db_session, card.id, "owner", racing_generator)

        db_session.expire_all()
        assert db_session.get(Card, card.id).level == 1

    def test_missing_card(self, db_session):
        with pytest.raises(NotFoundError):
            card_service.review_card(db_session, 999, "owner", fresh_sentence)

    def test_other_user_cannot_review(self, db_session, card):
        with pytest.raises(AuthorizationError):
            card_service.review_card(db_session, card.id, "stranger", fresh_sentence)

    def test_view_share_cannot_review(self, db_session, deck, card):
        db_session.add(SharedDeck(
            deck_id=deck.id,
            shared_by_user_id="owner",
            shared_to_user_ids=["friend"],
            access_level=AccessLevel.VIEW,
        ))
        db_session.commit()

        with pytest.raises(AuthorizationError):
            card_service.review_card(db_session, card.id, "friend", fresh_sentence)

    def test_edit_share_can_review(self, db_session, deck, card):
        db_session.add(SharedDeck(
            deck_id=deck.id,
            shared_by_user_id="owner",
            shared_to_user_ids=["friend"],
            access_level=AccessLevel.EDIT,
        ))
        db_session.commit()

        reviewed = card_service.review_card(db_session, card.id, "friend", fresh_sentence)

        assert reviewed.level == 2


class TestDueCards:

    def test_only_due_cards_most_overdue_first(self, db_session, deck):
        now = utc_now()
        due_later = Card.create(deck_id=deck.id, word="gato", language="es", sentence="El gato.")
        due_later.next_review_at = now - timedelta(hours=1)
        due_first = Card.create(deck_id=deck.id, word="pez", language="es", sentence="El pez.")
        due_first.next_review_at = now - timedelta(days=3)
        not_due = Card.create(deck_id=deck.id, word="ave", language="es", sentence="El ave.")
        db_session.add_all([due_later, due_first, not_due])
        db_session.commit()

        due = card_service.list_due_cards(db_session, deck.id, now=now)

        assert [c.word for c in due] == ["pez", "gato"]


class TestProgress:

    def test_record_and_read_progress(self, db_session, deck, card):
        card_service.record_progress(db_session, "owner", deck.id, card.id, True)
        card_service.record_progress(db_session, "owner", deck.id, card.id, False)

        records = card_service.get_progress(db_session, "owner", deck.id)

        assert [r.correct for r in records] == [True, False]

    def test_card_from_another_deck(self, db_session, deck, card):
        other = Deck(user_id="owner", deck_name="Food", description="Comida")
        db_session.add(other)
        db_session.commit()

        with pytest.raises(NotFoundError):
            card_service.record_progress(db_session, "owner", other.id, card.id, True)


class TestHighLevelReview:

    @pytest.mark.parametrize("level", [21, 30])
    def test_review_at_high_level_persists(self, db_session, card, level):
        card.level = level
        db_session.add(card)
        db_session.commit()

        reviewed = card_service.review_card(db_session, card.id, "owner", fresh_sentence)

        db_session.expire_all()
        stored = db_session.get(Card, card.id)
        assert reviewed.level == level + 1
        assert stored.level == level + 1
        assert as_utc(stored.next_review_at) == MAX_NEXT_REVIEW_AT
