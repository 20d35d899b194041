"""
Deck service for business logic related to decks and their access rules.
"""
import logging
from typing import List
from sqlmodel import Session, select, func

from lingodeck.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from lingodeck.models.models import AccessLevel, Card, Deck, DeckProgress, SharedDeck
from lingodeck.schemas.deck import CreateDeckRequest, DeckResponse
from lingodeck.schemas.sharing import ShareDeckRequest
from lingodeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def _shares_for_user(session: Session, deck_id: str, user_id: str) -> List[SharedDeck]:
    shares = session.exec(
        select(SharedDeck).where(SharedDeck.deck_id == deck_id)
    ).all()
    return [share for share in shares if user_id in (share.shared_to_user_ids or [])]


def get_deck_for_user(
    session: Session,
    deck_id: str,
    user_id: str,
    write: bool = False
) -> Deck:
    """
    Load a deck the user may access.

    The owner has full access. Users the deck was shared with may read it, and
    may modify it when shared with 'edit' access.

    Args:
        session: Database session
        deck_id: Deck ID
        user_id: Requesting user
        write: True when the caller is going to modify the deck or its cards

    Returns:
        The deck

    Raises:
        NotFoundError: If the deck does not exist
        AuthorizationError: If the user may not access the deck
    """
    deck = session.get(Deck, deck_id)
    if not deck:
        raise NotFoundError(f"Deck {deck_id} not found")

    if deck.user_id == user_id:
        return deck

    for share in _shares_for_user(session, deck_id, user_id):
        if not write or share.access_level == AccessLevel.EDIT:
            return deck

    logger.warning(f"User {user_id} denied {'write' if write else 'read'} access to deck {deck_id}")
    raise AuthorizationError("No permission to access this deck")


def to_deck_response(session: Session, deck: Deck) -> DeckResponse:
    card_count = session.exec(
        select(func.count()).select_from(Card).where(Card.deck_id == deck.id)
    ).one()
    return DeckResponse(
        id=deck.id,
        user_id=deck.user_id,
        deck_name=deck.deck_name,
        description=deck.description,
        tags=deck.tags or [],
        is_shared=deck.is_shared,
        shared_with=deck.shared_with or [],
        is_ai_generated=deck.is_ai_generated,
        created_at=deck.created_at,
        updated_at=deck.updated_at,
        card_count=card_count
    )


def init_deck(session: Session, user_id: str) -> Deck:
    """Create an empty default deck for a user."""
    deck = Deck(
        user_id=user_id,
        deck_name="",
        description="Default Description",
        tags=["default"],
    )
    session.add(deck)
    session.commit()
    session.refresh(deck)
    logger.info(f"Deck initialized with ID: {deck.id} for user {user_id}")
    return deck


def create_deck(session: Session, request: CreateDeckRequest) -> Deck:
    """
    Create a deck, together with any cards supplied in the request.

    Raises:
        ValidationError: If deck_name or description is blank
    """
    if not request.deck_name.strip() or not request.description.strip():
        raise ValidationError("Missing or invalid required fields: 'deck_name' or 'description'")

    now = utc_now()
    deck = Deck(
        user_id=request.user_id,
        deck_name=request.deck_name.strip(),
        description=request.description.strip(),
        tags=request.tags,
        is_shared=request.is_shared,
        shared_with=request.shared_with,
        is_ai_generated=request.is_ai_generated,
        created_at=now,
        updated_at=now,
    )
    session.add(deck)
    session.flush()  # Flush to get the deck ID

    for card_data in request.cards:
        session.add(Card.create(
            deck_id=deck.id,
            word=card_data.word,
            language=card_data.language,
            sentence=card_data.sentence,
            answer_word=card_data.answer_word,
            sentence_translation=card_data.sentence_translation,
        ))

    session.commit()
    session.refresh(deck)
    logger.info(f"Deck created with ID: {deck.id} ({len(request.cards)} card(s)) for user {request.user_id}")
    return deck


def list_decks(session: Session, user_id: str) -> List[Deck]:
    """Decks owned by a user, most recent first."""
    return list(session.exec(
        select(Deck).where(Deck.user_id == user_id).order_by(Deck.created_at.desc())  # type: ignore
    ).all())


def delete_deck(session: Session, deck_id: str, user_id: str) -> int:
    """
    Delete a deck with its cards, progress records and shares. Owner only.

    Returns:
        Number of cards deleted
    """
    deck = session.get(Deck, deck_id)
    if not deck:
        raise NotFoundError(f"Deck {deck_id} not found")
    if deck.user_id != user_id:
        raise AuthorizationError("Only the owner can delete a deck")

    for progress in session.exec(select(DeckProgress).where(DeckProgress.deck_id == deck_id)).all():
        session.delete(progress)
    for share in session.exec(select(SharedDeck).where(SharedDeck.deck_id == deck_id)).all():
        session.delete(share)
    session.flush()

    cards = session.exec(select(Card).where(Card.deck_id == deck_id)).all()
    for card in cards:
        session.delete(card)
    session.flush()

    session.delete(deck)
    session.commit()

    logger.info(f"Deleted deck {deck_id} with {len(cards)} card(s)")
    return len(cards)


def share_deck(session: Session, request: ShareDeckRequest) -> SharedDeck:
    """
    Share a deck with other users.

    Raises:
        NotFoundError: If the deck does not exist
        AuthorizationError: If the sharing user does not own the deck
    """
    deck = session.get(Deck, request.deck_id)
    if not deck:
        raise NotFoundError(f"Deck {request.deck_id} not found")
    if deck.user_id != request.shared_by_user_id:
        raise AuthorizationError("Only the owner can share a deck")

    shared_deck = SharedDeck(
        deck_id=request.deck_id,
        shared_by_user_id=request.shared_by_user_id,
        shared_to_user_ids=request.shared_to_user_ids,
        access_level=request.access_level.value,
    )
    session.add(shared_deck)

    # Reassign rather than mutate so the JSON column is marked dirty
    shared_with = list(deck.shared_with or [])
    for user_id in request.shared_to_user_ids:
        if user_id not in shared_with:
            shared_with.append(user_id)
    deck.shared_with = shared_with
    deck.is_shared = True
    deck.updated_at = utc_now()
    session.add(deck)

    session.commit()
    session.refresh(shared_deck)
    logger.info(f"Deck {request.deck_id} shared with {len(request.shared_to_user_ids)} user(s) ({request.access_level.value})")
    return shared_deck


def list_decks_shared_with(session: Session, user_id: str) -> List[SharedDeck]:
    """Share records that include a user."""
    shares = session.exec(select(SharedDeck).order_by(SharedDeck.shared_at.desc())).all()  # type: ignore
    return [share for share in shares if user_id in (share.shared_to_user_ids or [])]
