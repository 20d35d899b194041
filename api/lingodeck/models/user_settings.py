"""
UserSettings model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from lingodeck.utils.time_utils import utc_now


class UserSettings(SQLModel, table=True):
    """UserSettings table - app settings such as the selected study language."""
    __tablename__ = "user_settings"

    user_id: str = Field(primary_key=True)
    selected_language: Optional[str] = None
    updated_at: datetime = Field(default_factory=utc_now)
