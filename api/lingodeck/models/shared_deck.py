"""
SharedDeck model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON, String as SAString
from typing import Optional, List
from datetime import datetime

from lingodeck.models.enums import AccessLevel
from lingodeck.utils.time_utils import utc_now


class SharedDeck(SQLModel, table=True):
    """SharedDeck table - records a deck being shared with other users."""
    __tablename__ = "shared_deck"

    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: str = Field(foreign_key="deck.id", index=True)
    shared_by_user_id: str
    shared_to_user_ids: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    access_level: AccessLevel = Field(
        default=AccessLevel.VIEW,
        sa_column=Column(SAString, default=AccessLevel.VIEW.value)
    )  # 'view' or 'edit' - stored as string, converted to enum
    shared_at: datetime = Field(default_factory=utc_now)
