"""
Model enums.
"""
from enum import Enum


class AccessLevel(str, Enum):
    """Access granted to users a deck is shared with."""
    VIEW = "view"
    EDIT = "edit"


class ProficiencyLevel(str, Enum):
    """Learner proficiency used when prompting for practice sentences."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Scenario(str, Enum):
    """Kind of practice sentence a card was generated for."""
    BASIC = "basic"
    DAILY = "daily"
    SOCIAL = "social"
    QUESTION = "question"
    RESPONSE = "response"
