"""
Deck progress endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from lingodeck.core.database import get_session
from lingodeck.schemas.progress import (
    DeckProgressData,
    DeckProgressResponse,
    ProgressResult,
    SaveProgressRequest,
)
from lingodeck.services import card_service

router = APIRouter(prefix="/progress", tags=["progress"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def save_deck_progress(
    request: SaveProgressRequest,
    session: Session = Depends(get_session)
):
    """Record whether the user answered a card correctly."""
    card_service.record_progress(
        session,
        user_id=request.user_id,
        deck_id=request.deck_id,
        card_id=request.card_id,
        correct=request.correct
    )
    return {"success": True, "message": "Progress saved successfully."}


@router.get("/{deck_id}", response_model=DeckProgressResponse)
async def get_deck_progress(
    deck_id: str,
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get the answers a user recorded for a deck."""
    records = card_service.get_progress(session, user_id, deck_id)
    if not records:
        return DeckProgressResponse(success=False, message="No progress found for this deck.")

    results = [
        ProgressResult(card_id=record.card_id, correct=record.correct, timestamp=record.timestamp)
        for record in records
    ]
    total_correct = sum(1 for result in results if result.correct)
    return DeckProgressResponse(
        success=True,
        progress=DeckProgressData(
            user_id=user_id,
            deck_id=deck_id,
            results=results,
            total_correct=total_correct,
            total_incorrect=len(results) - total_correct,
            created_at=results[0].timestamp,
            last_updated=results[-1].timestamp
        )
    )
