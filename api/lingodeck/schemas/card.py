"""
Card schemas.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from lingodeck.models.enums import ProficiencyLevel
from lingodeck.utils.time_utils import as_utc


class CardResponse(BaseModel):
    """Card response schema."""
    id: int
    deck_id: str
    word: str
    sentence: str
    language: str
    level: int
    created_at: datetime
    last_reviewed_at: datetime
    next_review_at: datetime
    answer_word: Optional[str] = None
    sentence_translation: Optional[str] = None
    scenario: Optional[str] = None

    @field_validator("created_at", "last_reviewed_at", "next_review_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    class Config:
        from_attributes = True


class CardsResponse(BaseModel):
    """Response schema for a list of cards."""
    cards: List[CardResponse]


class CreateCardRequest(BaseModel):
    """A card supplied with its content, e.g. when creating a deck."""
    word: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    sentence: str = Field(..., min_length=1)
    answer_word: Optional[str] = None
    sentence_translation: Optional[str] = None


class AddCardRequest(BaseModel):
    """Request to generate practice cards for a word and add them to a deck."""
    user_id: str = Field(..., min_length=1)
    answer_word: str = Field(..., min_length=1, description="Word in the learner's native language")
    language: str = Field(..., min_length=1, description="Language being studied")
    proficiency_level: Optional[ProficiencyLevel] = Field(
        None, description="Overrides the level stored in the user's preferences"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "uid-123",
                "answer_word": "dog",
                "language": "Spanish",
                "proficiency_level": "beginner"
            }
        }


class AddCardResponse(BaseModel):
    """Response from practice card generation."""
    message: str
    cards: List[CardResponse]


class ReviewCardRequest(BaseModel):
    """Request to record a successful review of a card."""
    user_id: str = Field(..., min_length=1)


class ScheduleEntry(BaseModel):
    """Review interval for one level."""
    level: int
    interval_days: int


class ScheduleResponse(BaseModel):
    """Review intervals for a range of levels."""
    schedule: List[ScheduleEntry]
