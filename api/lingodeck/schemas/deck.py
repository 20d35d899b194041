"""
Deck schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from lingodeck.schemas.card import CreateCardRequest


class DeckResponse(BaseModel):
    """Deck response schema."""
    id: str
    user_id: str
    deck_name: str
    description: str
    tags: List[str] = []
    is_shared: bool = False
    shared_with: List[str] = []
    is_ai_generated: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
    card_count: int = 0


class DecksResponse(BaseModel):
    """Response schema for decks list."""
    decks: List[DeckResponse]


class InitDeckRequest(BaseModel):
    """Request to initialize an empty deck."""
    user_id: str = Field(..., min_length=1)


class InitDeckResponse(BaseModel):
    """Response from deck initialization."""
    success: bool
    deck_id: str


class CreateDeckRequest(BaseModel):
    """Request schema for creating a deck."""
    user_id: str = Field(..., min_length=1)
    deck_name: str
    description: str
    tags: List[str]
    is_shared: bool = False
    shared_with: List[str] = []
    is_ai_generated: bool = False
    cards: List[CreateCardRequest] = []


class CreateDeckResponse(BaseModel):
    """Response from deck creation."""
    id: str
