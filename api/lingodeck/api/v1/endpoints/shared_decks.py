"""
Deck sharing endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from lingodeck.core.database import get_session
from lingodeck.schemas.sharing import (
    ShareDeckRequest,
    SharedDeckResponse,
    SharedDecksResponse,
)
from lingodeck.services import deck_service

router = APIRouter(prefix="/shared-decks", tags=["shared-decks"])


@router.post("", response_model=SharedDeckResponse, status_code=status.HTTP_201_CREATED)
async def add_shared_deck(
    request: ShareDeckRequest,
    session: Session = Depends(get_session)
):
    """Share a deck with other users. Only the deck owner may share it."""
    shared_deck = deck_service.share_deck(session, request)
    return SharedDeckResponse.model_validate(shared_deck)


@router.get("", response_model=SharedDecksResponse)
async def get_shared_decks(
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get the decks shared with a user."""
    shares = deck_service.list_decks_shared_with(session, user_id)
    return SharedDecksResponse(
        shared_decks=[SharedDeckResponse.model_validate(share) for share in shares]
    )
