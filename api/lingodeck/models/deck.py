"""
Deck model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, JSON
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
import uuid

from lingodeck.utils.time_utils import utc_now

if TYPE_CHECKING:
    from lingodeck.models.card import Card


def generate_deck_id() -> str:
    return uuid.uuid4().hex


class Deck(SQLModel, table=True):
    """Deck table - a named collection of cards owned by one user."""
    __tablename__ = "deck"

    id: str = Field(default_factory=generate_deck_id, primary_key=True)
    user_id: str = Field(index=True)  # Owner
    deck_name: str = ""
    description: str = ""
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_shared: bool = Field(default=False)
    shared_with: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_ai_generated: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    # Relationships
    cards: List["Card"] = Relationship(back_populates="deck")
