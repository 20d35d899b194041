"""
DeckProgress model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from lingodeck.utils.time_utils import utc_now


class DeckProgress(SQLModel, table=True):
    """DeckProgress table - one answer recorded by a user for a card of a deck."""
    __tablename__ = "deck_progress"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    deck_id: str = Field(foreign_key="deck.id", index=True)
    card_id: int = Field(foreign_key="card.id")
    correct: bool
    timestamp: datetime = Field(default_factory=utc_now)
