"""
StudySession model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional, List, Dict, Any
from datetime import datetime

from lingodeck.utils.time_utils import utc_now


class StudySession(SQLModel, table=True):
    """StudySession table - a logged study session over one deck."""
    __tablename__ = "study_session"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    deck_id: str = Field(index=True)  # Kept after the deck is deleted
    start_time: datetime
    end_time: datetime
    cards_reviewed: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    total_correct: int = Field(default=0)
    total_incorrect: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
