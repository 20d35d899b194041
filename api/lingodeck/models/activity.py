"""
Activity models: AI generation requests, notifications and analytics payloads.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional, List, Dict, Any
from datetime import datetime

from lingodeck.utils.time_utils import utc_now


class AIRequest(SQLModel, table=True):
    """AIRequest table - tracks AI deck generation requests."""
    __tablename__ = "ai_request"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    input_word: str
    generated_deck_id: str
    status: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Notification(SQLModel, table=True):
    """Notification table - messages scheduled for a user."""
    __tablename__ = "notification"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    type: str
    message: str
    is_read: bool = Field(default=False)
    scheduled_for: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)


class Analytics(SQLModel, table=True):
    """Analytics table - opaque client analytics events."""
    __tablename__ = "analytics"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    data: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
