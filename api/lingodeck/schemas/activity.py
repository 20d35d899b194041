"""
AI request, notification and analytics schemas.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime


class CreateAIRequestRequest(BaseModel):
    """Request to record an AI deck generation request."""
    user_id: str = Field(..., min_length=1)
    input_word: str = Field(..., min_length=1)
    generated_deck_id: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)


class CreateNotificationRequest(BaseModel):
    """Request to create a notification."""
    user_id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    is_read: bool = False
    scheduled_for: Optional[datetime] = None


class NotificationResponse(BaseModel):
    """Notification response schema."""
    id: int
    user_id: str
    type: str
    message: str
    is_read: bool
    scheduled_for: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class NotificationsResponse(BaseModel):
    """Response schema for notifications list."""
    notifications: List[NotificationResponse]


class CreateAnalyticsRequest(BaseModel):
    """Request to store analytics events."""
    user_id: str = Field(..., min_length=1)
    data: List[Dict[str, Any]]


class CreatedResponse(BaseModel):
    """Response carrying the ID of a created record."""
    id: int
    message: str
