"""
Study session schemas.
"""
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import datetime


class ReviewedCard(BaseModel):
    """A card reviewed during a study session."""
    card_id: int
    correct: bool
    timestamp: Optional[datetime] = None


class CreateStudySessionRequest(BaseModel):
    """Request to log a study session."""
    user_id: str = Field(..., min_length=1)
    deck_id: str = Field(..., min_length=1)
    start_time: datetime
    end_time: datetime
    cards_reviewed: List[ReviewedCard]
    total_correct: int = Field(0, ge=0)
    total_incorrect: int = Field(0, ge=0)

    @model_validator(mode="after")
    def check_times(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class StudySessionResponse(BaseModel):
    """Study session response schema."""
    id: int
    user_id: str
    deck_id: str
    start_time: datetime
    end_time: datetime
    cards_reviewed: List[ReviewedCard]
    total_correct: int
    total_incorrect: int
    created_at: datetime

    class Config:
        from_attributes = True


class StudySessionsResponse(BaseModel):
    """Response schema for study sessions list."""
    sessions: List[StudySessionResponse]
