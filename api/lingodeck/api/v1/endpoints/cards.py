"""
Card endpoints: listing, practice card generation and reviews.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import Optional
import logging

from lingodeck.api.v1.dependencies import get_sentence_service, get_translation_service
from lingodeck.core.database import get_session
from lingodeck.models.models import ProficiencyLevel, UserPreferences
from lingodeck.schemas.card import (
    AddCardRequest,
    AddCardResponse,
    CardResponse,
    CardsResponse,
    ReviewCardRequest,
    ScheduleEntry,
    ScheduleResponse,
)
from lingodeck.services import card_service
from lingodeck.services.deck_service import get_deck_for_user
from lingodeck.services.practice_card_service import generate_practice_cards
from lingodeck.services.sentence_service import SentenceService
from lingodeck.services.srs_service import interval_days
from lingodeck.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cards"])


def _resolve_proficiency(
    session: Session,
    user_id: str,
    requested: Optional[ProficiencyLevel]
) -> ProficiencyLevel:
    """Requested level, else the level saved in the user's preferences, else beginner."""
    if requested is not None:
        return requested

    preferences = session.get(UserPreferences, user_id)
    if preferences and preferences.proficiency_level:
        try:
            return ProficiencyLevel(preferences.proficiency_level)
        except ValueError:
            logger.warning(f"Ignoring unknown proficiency level '{preferences.proficiency_level}' for user {user_id}")
    return ProficiencyLevel.BEGINNER


@router.get("/decks/{deck_id}/cards", response_model=CardsResponse)
async def get_cards(
    deck_id: str,
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get all cards of a deck the user can read."""
    get_deck_for_user(session, deck_id, user_id)
    cards = card_service.list_cards(session, deck_id)
    return CardsResponse(cards=[CardResponse.model_validate(card) for card in cards])


@router.get("/decks/{deck_id}/cards/due", response_model=CardsResponse)
async def get_due_cards(
    deck_id: str,
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get the cards of a deck that are due for review, most overdue first."""
    get_deck_for_user(session, deck_id, user_id)
    cards = card_service.list_due_cards(session, deck_id)
    return CardsResponse(cards=[CardResponse.model_validate(card) for card in cards])


@router.post("/decks/{deck_id}/cards", response_model=AddCardResponse, status_code=status.HTTP_201_CREATED)
def add_card(
    deck_id: str,
    request: AddCardRequest,
    session: Session = Depends(get_session),
    sentence_service: SentenceService = Depends(get_sentence_service),
    translation_service: TranslationService = Depends(get_translation_service)
):
    """
    Generate practice cards for a native-language word and add them to a deck.

    The word is translated into the study language and one card is created
    per practice scenario (basic, daily, social, question, response).
    """
    deck = get_deck_for_user(session, deck_id, request.user_id, write=True)
    proficiency_level = _resolve_proficiency(session, request.user_id, request.proficiency_level)

    drafts = generate_practice_cards(
        sentence_service,
        translation_service,
        answer_word=request.answer_word.strip(),
        language=request.language.strip(),
        proficiency_level=proficiency_level
    )
    cards = card_service.add_practice_cards(session, deck, request.language.strip(), drafts)

    return AddCardResponse(
        message="Practice cards added successfully.",
        cards=[CardResponse.model_validate(card) for card in cards]
    )


@router.get("/cards/schedule", response_model=ScheduleResponse)
async def get_schedule(max_level: int = Query(8, ge=1, le=30)):
    """Review interval in days for levels 1..max_level."""
    return ScheduleResponse(schedule=[
        ScheduleEntry(level=level, interval_days=interval_days(level))
        for level in range(1, max_level + 1)
    ])


@router.get("/cards/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: int,
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get a single card."""
    card = card_service.get_card(session, card_id)
    get_deck_for_user(session, card.deck_id, user_id)
    return CardResponse.model_validate(card)


@router.post("/cards/{card_id}/review", response_model=CardResponse)
def review_card(
    card_id: int,
    request: ReviewCardRequest,
    session: Session = Depends(get_session),
    sentence_service: SentenceService = Depends(get_sentence_service)
):
    """
    Record a successful review of a card.

    The card moves up one level, is rescheduled, and gets a newly generated
    example sentence. If the sentence cannot be generated the card is left
    unchanged and 503 is returned.
    """
    card = card_service.review_card(
        session,
        card_id,
        request.user_id,
        sentence_service.generate_sentence
    )
    return CardResponse.model_validate(card)
