"""
Deck endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from lingodeck.core.database import get_session
from lingodeck.schemas.deck import (
    CreateDeckRequest,
    CreateDeckResponse,
    DeckResponse,
    DecksResponse,
    InitDeckRequest,
    InitDeckResponse,
)
from lingodeck.services import deck_service

router = APIRouter(prefix="/decks", tags=["decks"])


@router.post("/init", response_model=InitDeckResponse, status_code=status.HTTP_201_CREATED)
async def init_deck(
    request: InitDeckRequest,
    session: Session = Depends(get_session)
):
    """Initialize an empty deck for the user."""
    deck = deck_service.init_deck(session, request.user_id)
    return InitDeckResponse(success=True, deck_id=deck.id)


@router.post("", response_model=CreateDeckResponse, status_code=status.HTTP_201_CREATED)
async def create_deck(
    request: CreateDeckRequest,
    session: Session = Depends(get_session)
):
    """Create a deck, optionally with an initial set of cards."""
    deck = deck_service.create_deck(session, request)
    return CreateDeckResponse(id=deck.id)


@router.get("", response_model=DecksResponse)
async def get_decks(
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get all decks owned by a user, most recent first."""
    decks = deck_service.list_decks(session, user_id)
    return DecksResponse(
        decks=[deck_service.to_deck_response(session, deck) for deck in decks]
    )


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck(
    deck_id: str,
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get one deck the user owns or was shared."""
    deck = deck_service.get_deck_for_user(session, deck_id, user_id)
    return deck_service.to_deck_response(session, deck)


@router.delete("/{deck_id}")
async def delete_deck(
    deck_id: str,
    user_id: str,
    session: Session = Depends(get_session)
):
    """Delete a deck and all of its cards."""
    cards_deleted = deck_service.delete_deck(session, deck_id, user_id)
    return {
        "message": f"Deck {deck_id} deleted",
        "cards_deleted": cards_deleted
    }
