"""
Card service: persistence side of card creation and review.

The review transition itself lives in srs_service; this module loads the card,
checks access, and writes the reviewed state back only if no other review of
the same card was committed in the meantime.
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy import update
from sqlmodel import Session, select

from lingodeck.core.exceptions import ConflictError, NotFoundError
from lingodeck.models.models import Card, Deck, DeckProgress
from lingodeck.services.deck_service import get_deck_for_user
from lingodeck.services.practice_card_service import PracticeCardDraft
from lingodeck.services.srs_service import SentenceGenerator, apply_review
from lingodeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def get_card(session: Session, card_id: int) -> Card:
    """
    Load a card by ID.

    Raises:
        NotFoundError: If the card does not exist
    """
    card = session.get(Card, card_id)
    if not card:
        raise NotFoundError(f"Card {card_id} not found")
    return card


def list_cards(session: Session, deck_id: str) -> List[Card]:
    """All cards of a deck in creation order."""
    return list(session.exec(
        select(Card).where(Card.deck_id == deck_id).order_by(Card.created_at, Card.id)  # type: ignore
    ).all())


def list_due_cards(session: Session, deck_id: str, now: Optional[datetime] = None) -> List[Card]:
    """Cards of a deck whose next review time has passed, most overdue first."""
    if now is None:
        now = utc_now()
    return list(session.exec(
        select(Card)
        .where(Card.deck_id == deck_id, Card.next_review_at <= now)
        .order_by(Card.next_review_at, Card.id)  # type: ignore
    ).all())


def add_practice_cards(
    session: Session,
    deck: Deck,
    language: str,
    drafts: List[PracticeCardDraft]
) -> List[Card]:
    """
    Persist generated practice cards in a deck.

    Args:
        session: Database session
        deck: Deck the cards belong to (access already checked)
        language: Language the sentences are written in
        drafts: Generated card content

    Returns:
        The created cards
    """
    cards = [
        Card.create(
            deck_id=deck.id,
            word=draft.word,
            language=language,
            sentence=draft.sentence,
            answer_word=draft.answer_word,
            sentence_translation=draft.sentence_translation,
            scenario=draft.scenario.value,
        )
        for draft in drafts
    ]
    for card in cards:
        session.add(card)

    deck.updated_at = utc_now()
    session.add(deck)
    session.commit()

    for card in cards:
        session.refresh(card)

    logger.info(f"Added {len(cards)} card(s) to deck {deck.id}")
    return cards


def review_card(
    session: Session,
    card_id: int,
    user_id: str,
    regenerate_sentence: SentenceGenerator
) -> Card:
    """
    Record a successful review of a card and persist its new schedule.

    The row is updated only while it still has the level that was read, so two
    concurrent reviews of one card cannot both be applied.

    Args:
        session: Database session
        card_id: Card being reviewed
        user_id: Reviewing user (needs write access to the deck)
        regenerate_sentence: Sentence generator passed to apply_review

    Returns:
        The persisted card after the review

    Raises:
        NotFoundError: If the card or its deck does not exist
        AuthorizationError: If the user may not modify the deck
        UpstreamUnavailableError: If the sentence could not be regenerated (nothing is written)
        ConflictError: If the card was reviewed concurrently
    """
    card = get_card(session, card_id)
    get_deck_for_user(session, card.deck_id, user_id, write=True)

    previous_level = card.level
    reviewed = apply_review(card, regenerate_sentence)

    statement = (
        update(Card)
        .where(Card.id == card.id, Card.level == previous_level)
        .values(
            level=reviewed.level,
            sentence=reviewed.sentence,
            sentence_translation=reviewed.sentence_translation,
            last_reviewed_at=reviewed.last_reviewed_at,
            next_review_at=reviewed.next_review_at,
        )
    )
    result = session.connection().execute(statement)
    if result.rowcount != 1:
        session.rollback()
        logger.warning(f"Concurrent review detected for card {card_id} at level {previous_level}")
        raise ConflictError(f"Card {card_id} was reviewed concurrently, please retry")

    session.commit()
    session.refresh(card)
    return card


def record_progress(
    session: Session,
    user_id: str,
    deck_id: str,
    card_id: int,
    correct: bool
) -> DeckProgress:
    """
    Record the answer a user gave for a card of a deck.

    Raises:
        NotFoundError: If the deck or card does not exist, or the card is in another deck
        AuthorizationError: If the user may not read the deck
    """
    get_deck_for_user(session, deck_id, user_id)
    card = get_card(session, card_id)
    if card.deck_id != deck_id:
        raise NotFoundError(f"Card {card_id} not found in deck {deck_id}")

    progress = DeckProgress(
        user_id=user_id,
        deck_id=deck_id,
        card_id=card_id,
        correct=correct,
    )
    session.add(progress)
    session.commit()
    session.refresh(progress)
    return progress


def get_progress(session: Session, user_id: str, deck_id: str) -> List[DeckProgress]:
    """Answers recorded by a user for a deck, oldest first."""
    return list(session.exec(
        select(DeckProgress)
        .where(DeckProgress.user_id == user_id, DeckProgress.deck_id == deck_id)
        .order_by(DeckProgress.timestamp, DeckProgress.id)  # type: ignore
    ).all())
