"""
AI request, notification and analytics endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session, select

from lingodeck.core.database import get_session
from lingodeck.models.models import AIRequest, Analytics, Notification
from lingodeck.schemas.activity import (
    CreateAIRequestRequest,
    CreateAnalyticsRequest,
    CreateNotificationRequest,
    CreatedResponse,
    NotificationResponse,
    NotificationsResponse,
)

router = APIRouter(tags=["activity"])


@router.post("/ai-requests", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_ai_request(
    request: CreateAIRequestRequest,
    session: Session = Depends(get_session)
):
    """Record an AI deck generation request."""
    ai_request = AIRequest(**request.model_dump())
    session.add(ai_request)
    session.commit()
    session.refresh(ai_request)
    return CreatedResponse(id=ai_request.id, message=f"AI request created with ID: {ai_request.id}")


@router.post("/notifications", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_notification(
    request: CreateNotificationRequest,
    session: Session = Depends(get_session)
):
    """Create a notification for a user."""
    notification = Notification(**request.model_dump())
    session.add(notification)
    session.commit()
    session.refresh(notification)
    return CreatedResponse(id=notification.id, message=f"Notification created with ID: {notification.id}")


@router.get("/notifications", response_model=NotificationsResponse)
async def get_notifications(
    user_id: str,
    unread_only: bool = False,
    session: Session = Depends(get_session)
):
    """Get a user's notifications, most recent first."""
    query = select(Notification).where(Notification.user_id == user_id)
    if unread_only:
        query = query.where(Notification.is_read == False)  # noqa: E712
    notifications = session.exec(
        query.order_by(Notification.created_at.desc(), Notification.id.desc())  # type: ignore
    ).all()
    return NotificationsResponse(
        notifications=[NotificationResponse.model_validate(n) for n in notifications]
    )


@router.post("/analytics", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_analytics(
    request: CreateAnalyticsRequest,
    session: Session = Depends(get_session)
):
    """Store a batch of client analytics events."""
    analytics = Analytics(user_id=request.user_id, data=request.data)
    session.add(analytics)
    session.commit()
    session.refresh(analytics)
    return CreatedResponse(id=analytics.id, message=f"Analytics data created: {analytics.id}")
