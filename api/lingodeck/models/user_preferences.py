"""
UserPreferences model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from lingodeck.utils.time_utils import utc_now


class UserPreferences(SQLModel, table=True):
    """UserPreferences table - learning preferences, one row per user."""
    __tablename__ = "user_preferences"

    user_id: str = Field(primary_key=True)
    motivation: Optional[str] = None
    proficiency_level: Optional[str] = None
    learning_style: Optional[str] = None
    study_pattern: Optional[str] = None
    notifications: Optional[bool] = None
    updated_at: datetime = Field(default_factory=utc_now)
