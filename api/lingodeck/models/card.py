"""
Card model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime, timedelta

from lingodeck.utils.time_utils import utc_now

if TYPE_CHECKING:
    from lingodeck.models.deck import Deck


class Card(SQLModel, table=True):
    """Card table - one word/sentence pair of a deck and its review state."""
    __tablename__ = "card"

    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: str = Field(foreign_key="deck.id", index=True)
    word: str  # Target-language word being learned
    sentence: str  # Example sentence containing the word, in `language`
    language: str
    level: int = Field(default=1)  # Mastery level, starts at 1 and only grows
    created_at: datetime
    last_reviewed_at: datetime
    next_review_at: datetime = Field(index=True)

    # Generated content
    answer_word: Optional[str] = None  # Meaning of the word in the learner's native language
    sentence_translation: Optional[str] = None
    scenario: Optional[str] = None  # Scenario the sentence was generated for

    # Relationships
    deck: Optional["Deck"] = Relationship(back_populates="cards")

    @classmethod
    def create(
        cls,
        deck_id: str,
        word: str,
        language: str,
        sentence: str,
        answer_word: Optional[str] = None,
        sentence_translation: Optional[str] = None,
        scenario: Optional[str] = None,
    ) -> "Card":
        """
        Build a new card at level 1, due one day after creation.

        Input validation belongs to the caller; nothing is persisted here.
        """
        now = utc_now()
        return cls(
            deck_id=deck_id,
            word=word,
            sentence=sentence,
            language=language,
            level=1,
            created_at=now,
            last_reviewed_at=now,
            next_review_at=now + timedelta(days=1),
            answer_word=answer_word,
            sentence_translation=sentence_translation,
            scenario=scenario,
        )
