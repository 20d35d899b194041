"""
Deck sharing schemas.
"""
from pydantic import BaseModel, Field
from typing import List
from datetime import datetime

from lingodeck.models.enums import AccessLevel


class ShareDeckRequest(BaseModel):
    """Request to share a deck with other users."""
    deck_id: str = Field(..., min_length=1)
    shared_by_user_id: str = Field(..., min_length=1)
    shared_to_user_ids: List[str] = Field(..., min_length=1)
    access_level: AccessLevel = AccessLevel.VIEW


class SharedDeckResponse(BaseModel):
    """Shared deck response schema."""
    id: int
    deck_id: str
    shared_by_user_id: str
    shared_to_user_ids: List[str]
    access_level: AccessLevel
    shared_at: datetime

    class Config:
        from_attributes = True


class SharedDecksResponse(BaseModel):
    """Response schema for shared decks list."""
    shared_decks: List[SharedDeckResponse]
