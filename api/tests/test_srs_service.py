"""
Tests for the review scheduler.

Covers the level -> interval table, the doubling past level 4, input
contract violations, and the review transition including its atomicity when
the sentence cannot be regenerated.
"""
from datetime import timedelta

import pytest

from lingodeck.core.exceptions import InvalidLevelError, UpstreamUnavailableError
from lingodeck.models.card import Card
from lingodeck.services.srs_service import (
    MAX_NEXT_REVIEW_AT,
    apply_review,
    interval_days,
    next_review_time,
)
from lingodeck.utils.time_utils import utc_now


class TestIntervalDays:
    """Level to interval mapping."""

    @pytest.mark.parametrize("level,expected", [(1, 1), (2, 7), (3, 16), (4, 35)])
    def test_fixed_levels(self, level, expected):
        assert interval_days(level) == expected

    @pytest.mark.parametrize("level,expected", [(5, 70), (6, 140), (7, 280)])
    def test_doubles_after_level_four(self, level, expected):
        assert interval_days(level) == expected

    def test_matches_closed_form_from_level_four(self):
        for level in range(4, 20):
            assert interval_days(level) == 35 * 2 ** (level - 4)

    def test_each_level_past_four_doubles_previous(self):
        for level in range(5, 15):
            assert interval_days(level) == 2 * interval_days(level - 1)

    def test_is_deterministic(self):
        assert interval_days(6) == interval_days(6)

    @pytest.mark.parametrize("level", [0, -1, -35])
    def test_rejects_levels_below_one(self, level):
        with pytest.raises(InvalidLevelError):
            interval_days(level)

    @pytest.mark.parametrize("level", [1.5, "2", None, True])
    def test_rejects_non_integers(self, level):
        with pytest.raises(InvalidLevelError):
            interval_days(level)

    def test_invalid_level_is_a_value_error(self):
        with pytest.raises(ValueError):
            interval_days(0)


class TestApplyReview:
    """Review transition."""

    def make_card(self, level=1):
        card = Card.create("deck1", "perro", "Spanish", "El perro corre.")
        card.id = 42
        card.level = level
        return card

    def test_end_to_end_first_review(self):
        card = Card.create("deck1", "perro", "Spanish", "El perro corre.")
        assert card.level == 1

        reviewed = apply_review(card, lambda language, word: "El perro duerme.")

        assert reviewed.level == 2
        assert reviewed.sentence == "El perro duerme."
        assert reviewed.next_review_at - reviewed.last_reviewed_at == timedelta(days=1)

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_interval_uses_level_before_review(self, level):
        reviewed = apply_review(self.make_card(level), lambda language, word: "s")

        assert reviewed.level == level + 1
        assert reviewed.next_review_at - reviewed.last_reviewed_at == timedelta(days=interval_days(level))

    def test_preserves_identity_fields(self):
        card = self.make_card(3)
        card.answer_word = "dog"
        card.scenario = "daily"

        reviewed = apply_review(card, lambda language, word: "Otra frase.")

        assert reviewed.id == card.id
        assert reviewed.deck_id == card.deck_id
        assert reviewed.word == card.word
        assert reviewed.language == card.language
        assert reviewed.created_at == card.created_at
        assert reviewed.answer_word == "dog"
        assert reviewed.scenario == "daily"

    def test_last_reviewed_at_never_moves_backwards(self):
        card = self.make_card()
        reviewed = apply_review(card, lambda language, word: "s")
        assert reviewed.last_reviewed_at >= card.last_reviewed_at

    def test_does_not_mutate_input_card(self):
        card = self.make_card(2)
        previous_sentence = card.sentence
        previous_next_review = card.next_review_at

        apply_review(card, lambda language, word: "Nueva.")

        assert card.level == 2
        assert card.sentence == previous_sentence
        assert card.next_review_at == previous_next_review

    def test_passes_language_and_word_to_generator(self):
        calls = []

        def generator(language, word):
            calls.append((language, word))
            return "El perro ladra."

        apply_review(self.make_card(), generator)

        assert calls == [("Spanish", "perro")]

    def test_empty_sentence_is_accepted(self):
        reviewed = apply_review(self.make_card(), lambda language, word: "")
        assert reviewed.sentence == ""
        assert reviewed.level == 2

    def test_clears_stale_sentence_translation(self):
        card = self.make_card()
        card.sentence_translation = "The dog runs."
        reviewed = apply_review(card, lambda language, word: "El perro duerme.")
        assert reviewed.sentence_translation is None

    def test_upstream_failure_propagates_without_a_card(self):
        card = self.make_card(2)

        def failing(language, word):
            raise UpstreamUnavailableError("timeout")

        with pytest.raises(UpstreamUnavailableError):
            apply_review(card, failing)
        assert card.level == 2

    def test_unexpected_generator_error_becomes_upstream_unavailable(self):
        card = self.make_card()

        def failing(language, word):
            raise TimeoutError("read timed out")

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            apply_review(card, failing)
        assert isinstance(exc_info.value.__cause__, TimeoutError)
        assert card.level == 1

    def test_invalid_level_fails_before_generating(self):
        card = self.make_card()
        card.level = 0
        calls = []

        with pytest.raises(InvalidLevelError):
            apply_review(card, lambda language, word: calls.append(word) or "s")
        assert calls == []

    def test_repeated_reviews_climb_one_level_each(self):
        card = self.make_card()
        for expected_level in range(2, 7):
            card = apply_review(card, lambda language, word: "s")
            assert card.level == expected_level

    @pytest.mark.parametrize("level", [20, 21, 25, 29, 30, 60])
    def test_high_levels_stay_reviewable(self, level):
        reviewed = apply_review(self.make_card(level), lambda language, word: "s")

        assert reviewed.level == level + 1
        assert reviewed.last_reviewed_at < reviewed.next_review_at <= MAX_NEXT_REVIEW_AT

    def test_level_21_is_scheduled_at_the_ceiling(self):
        reviewed = apply_review(self.make_card(21), lambda language, word: "s")

        assert interval_days(21) == 35 * 2 ** 17
        assert reviewed.next_review_at == MAX_NEXT_REVIEW_AT


class TestNextReviewTime:

    def test_adds_interval(self):
        now = utc_now()

        assert next_review_time(now, 35) == now + timedelta(days=35)

    def test_clamps_past_the_ceiling(self):
        now = utc_now()

        assert next_review_time(now, interval_days(30)) == MAX_NEXT_REVIEW_AT
        assert next_review_time(now, 10 ** 12) == MAX_NEXT_REVIEW_AT
