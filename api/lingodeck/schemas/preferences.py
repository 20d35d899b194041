"""
User preference and settings schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from lingodeck.models.enums import ProficiencyLevel


class PreferencesData(BaseModel):
    """Learning preferences. Fields left out of a request are not changed."""
    motivation: Optional[str] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    learning_style: Optional[str] = None
    study_pattern: Optional[str] = None
    notifications: Optional[bool] = None


class PreferencesResponse(BaseModel):
    """Response for preferences lookup."""
    exists: bool
    preferences: Optional[PreferencesData] = None
    message: Optional[str] = None


class SaveLanguageRequest(BaseModel):
    """Request to store the user's selected study language."""
    language: str = Field(..., min_length=1)


class SelectedLanguageResponse(BaseModel):
    """Selected study language (None when never set)."""
    selected_language: Optional[str] = None
    updated_at: Optional[datetime] = None
