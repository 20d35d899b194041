"""
User preferences and settings endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
import logging

from lingodeck.core.database import get_session
from lingodeck.models.models import UserPreferences, UserSettings
from lingodeck.schemas.preferences import (
    PreferencesData,
    PreferencesResponse,
    SaveLanguageRequest,
    SelectedLanguageResponse,
)
from lingodeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(tags=["preferences"])


@router.put("/preferences/{user_id}", response_model=PreferencesResponse)
async def save_or_update_preferences(
    user_id: str,
    request: PreferencesData,
    session: Session = Depends(get_session)
):
    """Create or merge the user's learning preferences. Omitted fields keep their value."""
    preferences = session.get(UserPreferences, user_id)
    if not preferences:
        preferences = UserPreferences(user_id=user_id)

    for field, value in request.model_dump(exclude_unset=True, mode="json").items():
        setattr(preferences, field, value)
    preferences.updated_at = utc_now()

    session.add(preferences)
    session.commit()
    session.refresh(preferences)
    logger.info(f"Saved preferences for user {user_id}")

    return PreferencesResponse(
        exists=True,
        preferences=PreferencesData.model_validate(preferences, from_attributes=True),
        message="Preferences saved or updated successfully."
    )


@router.get("/preferences/{user_id}", response_model=PreferencesResponse)
async def check_preferences(
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get the user's learning preferences, if any were saved."""
    preferences = session.get(UserPreferences, user_id)
    if not preferences:
        return PreferencesResponse(exists=False, message="No preferences set.")

    return PreferencesResponse(
        exists=True,
        preferences=PreferencesData.model_validate(preferences, from_attributes=True)
    )


@router.put("/settings/{user_id}/language", response_model=SelectedLanguageResponse)
async def save_selected_language(
    user_id: str,
    request: SaveLanguageRequest,
    session: Session = Depends(get_session)
):
    """Store the language the user is currently studying."""
    user_settings = session.get(UserSettings, user_id)
    if not user_settings:
        user_settings = UserSettings(user_id=user_id)

    user_settings.selected_language = request.language.strip()
    user_settings.updated_at = utc_now()
    session.add(user_settings)
    session.commit()
    session.refresh(user_settings)

    return SelectedLanguageResponse(
        selected_language=user_settings.selected_language,
        updated_at=user_settings.updated_at
    )


@router.get("/settings/{user_id}/language", response_model=SelectedLanguageResponse)
async def get_selected_language(
    user_id: str,
    session: Session = Depends(get_session)
):
    """Get the language the user is currently studying (null when never set)."""
    user_settings = session.get(UserSettings, user_id)
    if not user_settings:
        return SelectedLanguageResponse(selected_language=None)

    return SelectedLanguageResponse(
        selected_language=user_settings.selected_language,
        updated_at=user_settings.updated_at
    )
