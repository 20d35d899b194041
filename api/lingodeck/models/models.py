"""
Models module - re-exports all models.

Importing this module registers every table with SQLModel's metadata, so
endpoints, services and Alembic import models from here:
    from lingodeck.models.models import Card, Deck
"""
from lingodeck.models.enums import AccessLevel, ProficiencyLevel, Scenario
from lingodeck.models.deck import Deck
from lingodeck.models.card import Card
from lingodeck.models.shared_deck import SharedDeck
from lingodeck.models.deck_progress import DeckProgress
from lingodeck.models.study_session import StudySession
from lingodeck.models.user_preferences import UserPreferences
from lingodeck.models.user_settings import UserSettings
from lingodeck.models.activity import AIRequest, Notification, Analytics

__all__ = [
    'AccessLevel',
    'ProficiencyLevel',
    'Scenario',
    'Deck',
    'Card',
    'SharedDeck',
    'DeckProgress',
    'StudySession',
    'UserPreferences',
    'UserSettings',
    'AIRequest',
    'Notification',
    'Analytics',
]
