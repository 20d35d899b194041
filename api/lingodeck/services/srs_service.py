"""
SRS (Spaced Repetition System) service implementing level-based review intervals.

A card's level maps to the number of days until its next review. Reviewing a
card moves it up exactly one level, reschedules it and replaces its example
sentence with a freshly generated one.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict

from lingodeck.core.exceptions import InvalidLevelError, UpstreamUnavailableError
from lingodeck.models.card import Card
from lingodeck.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


# Review intervals in days for the first levels
# Level 1 = 1 day, Level 2 = 7 days, Level 3 = 16 days, Level 4 = 35 days
LEVEL_INTERVALS: Dict[int, int] = {1: 1, 2: 7, 3: 16, 4: 35}
LAST_FIXED_LEVEL = 4
MIN_LEVEL = 1

# Latest representable review time; long intervals past this are clamped to it.
# Stays a day clear of datetime.max so timezone shifts on read-back cannot overflow.
MAX_NEXT_REVIEW_AT = datetime(9999, 12, 30, tzinfo=timezone.utc)

# (language, word) -> new example sentence
SentenceGenerator = Callable[[str, str], str]


def interval_days(level: int) -> int:
    """
    Calculate the review interval in days for a card level.

    Levels 1-4 use the fixed table above. Every level past 4 doubles the
    previous interval: Level 5 = 70, Level 6 = 140, Level 7 = 280, etc.

    Args:
        level: Current card level (1-based, minimum 1)

    Returns:
        Interval in days (always >= 1)

    Raises:
        InvalidLevelError: If level is not an integer >= 1
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(f"Card level must be an integer, got {level!r}")
    if level < MIN_LEVEL:
        raise InvalidLevelError(f"Card level must be >= {MIN_LEVEL}, got {level}")

    if level <= LAST_FIXED_LEVEL:
        return LEVEL_INTERVALS[level]

    return LEVEL_INTERVALS[LAST_FIXED_LEVEL] * 2 ** (level - LAST_FIXED_LEVEL)


def next_review_time(reviewed_at: datetime, days: int) -> datetime:
    """
    Time of the next review, `days` after `reviewed_at`.

    Intervals grow without bound, so results beyond MAX_NEXT_REVIEW_AT are
    clamped to it; the card stays reviewable at any level.
    """
    if days >= (MAX_NEXT_REVIEW_AT - reviewed_at).days:
        return MAX_NEXT_REVIEW_AT
    return reviewed_at + timedelta(days=days)


def apply_review(card: Card, regenerate_sentence: SentenceGenerator) -> Card:
    """
    Compute the state of a card after a successful review.

    The schedule is computed before the sentence is regenerated, and the new
    card is built only when regeneration succeeds, so a failed review never
    yields a card with an incremented level. The interval is taken from the
    level the card had before the review; very high levels are scheduled at
    MAX_NEXT_REVIEW_AT.

    Args:
        card: Card being reviewed (not modified)
        regenerate_sentence: Callable producing a new sentence for (language, word).
            An empty string is accepted as a sentence.

    Returns:
        A new Card with level + 1, refreshed timestamps and the new sentence.
        deck_id, word, language and created_at are carried over unchanged.

    Raises:
        InvalidLevelError: If the card's level is invalid
        UpstreamUnavailableError: If the sentence could not be regenerated
    """
    days = interval_days(card.level)
    now = utc_now()
    next_review_at = next_review_time(now, days)

    try:
        sentence = regenerate_sentence(card.language, card.word)
    except UpstreamUnavailableError:
        raise
    except Exception as e:
        logger.error(f"Sentence regeneration failed for card {card.id} ('{card.word}', {card.language}): {e}")
        raise UpstreamUnavailableError(f"Sentence regeneration failed: {e}") from e

    reviewed = Card(
        id=card.id,
        deck_id=card.deck_id,
        word=card.word,
        sentence=sentence,
        language=card.language,
        level=card.level + 1,
        created_at=card.created_at,
        last_reviewed_at=now,
        next_review_at=next_review_at,
        answer_word=card.answer_word,
        sentence_translation=None,  # Described the replaced sentence
        scenario=card.scenario,
    )

    logger.info(
        f"Reviewed card {card.id}: level {card.level} -> {reviewed.level}, "
        f"next_review_at={reviewed.next_review_at} (interval={days} days)"
    )
    return reviewed
