"""
Study session endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session, select

from lingodeck.core.database import get_session
from lingodeck.models.models import StudySession
from lingodeck.schemas.study_session import (
    CreateStudySessionRequest,
    StudySessionResponse,
    StudySessionsResponse,
)
from lingodeck.utils.time_utils import utc_now

router = APIRouter(prefix="/study-sessions", tags=["study-sessions"])


@router.post("", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED)
async def add_study_session(
    request: CreateStudySessionRequest,
    session: Session = Depends(get_session)
):
    """Log a study session. Reviewed cards without a timestamp are stamped with the current time."""
    now = utc_now()
    cards_reviewed = [
        {**card.model_dump(mode="json"), "timestamp": (card.timestamp or now).isoformat()}
        for card in request.cards_reviewed
    ]

    study_session = StudySession(
        user_id=request.user_id,
        deck_id=request.deck_id,
        start_time=request.start_time,
        end_time=request.end_time,
        cards_reviewed=cards_reviewed,
        total_correct=request.total_correct,
        total_incorrect=request.total_incorrect,
        created_at=now
    )
    session.add(study_session)
    session.commit()
    session.refresh(study_session)

    return StudySessionResponse.model_validate(study_session)


@router.get("", response_model=StudySessionsResponse)
async def get_study_sessions(
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get a user's study sessions, most recent first."""
    study_sessions = session.exec(
        select(StudySession)
        .where(StudySession.user_id == user_id)
        .order_by(StudySession.start_time.desc())  # type: ignore
    ).all()
    return StudySessionsResponse(
        sessions=[StudySessionResponse.model_validate(s) for s in study_sessions]
    )
