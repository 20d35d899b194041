"""
Deck progress schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class SaveProgressRequest(BaseModel):
    """Request to record the answer given for a card."""
    user_id: str = Field(..., min_length=1)
    deck_id: str = Field(..., min_length=1)
    card_id: int
    correct: bool


class ProgressResult(BaseModel):
    """One recorded answer."""
    card_id: int
    correct: bool
    timestamp: datetime


class DeckProgressData(BaseModel):
    """All answers recorded by a user for a deck."""
    user_id: str
    deck_id: str
    results: List[ProgressResult]
    total_correct: int
    total_incorrect: int
    created_at: datetime
    last_updated: datetime


class DeckProgressResponse(BaseModel):
    """Response for deck progress lookup."""
    success: bool
    message: Optional[str] = None
    progress: Optional[DeckProgressData] = None
