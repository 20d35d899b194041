"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from lingodeck.api.v1.endpoints import (
    decks, cards, progress, preferences, study_sessions, shared_decks, activity, text
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(decks.router)
api_router.include_router(cards.router)
api_router.include_router(progress.router)
api_router.include_router(preferences.router)
api_router.include_router(study_sessions.router)
api_router.include_router(shared_decks.router)
api_router.include_router(activity.router)
api_router.include_router(text.router)
