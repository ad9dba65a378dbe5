"""
Tests for the sentence scheduler.
"""

import pytest

from core.clock import MS_PER_DAY
from core.schemas import Progress
from core.srs import Quality, is_due, process_review, round_half_up

NOW = 1_700_000_000_000


class TestRoundHalfUp:

    def test_rounds_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(6.5) == 7

    def test_rounds_below_half_down(self):
        assert round_half_up(1.49) == 1


class TestFirstReview:
    """A never-reviewed item always gets a one-day interval."""

    @pytest.mark.parametrize("quality", [Quality.PERFECT, Quality.GOOD, Quality.HARD, Quality.MISS])
    def test_first_interval_is_one_day(self, quality):
        progress = process_review(Progress(), quality, NOW)
        assert progress.interval_days == 1
        assert progress.due_at == NOW + MS_PER_DAY
        assert progress.reps == 1
        assert progress.last_seen_at == NOW

    def test_good_counters(self):
        progress = process_review(Progress(), Quality.GOOD, NOW)
        assert progress.ease == pytest.approx(2.2)
        assert progress.correct_streak == 1
        assert progress.best_streak == 1
        assert progress.last_attempt_was_correct is True
        assert progress.lapses == 0


class TestIntervalGrowth:

    def test_good_multiplies_by_2_2(self):
        progress = Progress(interval_days=1, reps=1, due_at=NOW)
        process_review(progress, Quality.GOOD, NOW)
        assert progress.interval_days == 2
        process_review(progress, Quality.GOOD, NOW)
        assert progress.interval_days == 4

    def test_hard_multiplies_by_1_3_and_lowers_ease(self):
        progress = Progress(interval_days=5, reps=3, due_at=NOW)
        process_review(progress, Quality.HARD, NOW)
        assert progress.interval_days == 7
        assert progress.ease == pytest.approx(2.15)

    def test_hard_never_below_one_day(self):
        progress = Progress(interval_days=1, reps=1, due_at=NOW)
        process_review(progress, Quality.HARD, NOW)
        assert progress.interval_days == 1

    def test_perfect_scales_by_ease(self):
        progress = Progress(interval_days=1, reps=1, due_at=NOW, ease=2.23)
        process_review(progress, Quality.PERFECT, NOW)
        assert progress.ease == pytest.approx(2.26)
        # 1 * 2.6 * 2.26 / 2.2 = 2.67
        assert progress.interval_days == 3

    def test_due_at_uses_new_interval(self):
        progress = Progress(interval_days=2, reps=2, due_at=NOW)
        process_review(progress, Quality.GOOD, NOW)
        assert progress.due_at == NOW + 4 * MS_PER_DAY


class TestMiss:

    def test_miss_resets_streak_and_interval(self):
        progress = Progress(interval_days=10, reps=4, due_at=NOW, correct_streak=4, best_streak=4)
        process_review(progress, Quality.MISS, NOW)
        assert progress.interval_days == 1
        assert progress.correct_streak == 0
        assert progress.best_streak == 4
        assert progress.lapses == 1
        assert progress.reps == 5
        assert progress.ease == pytest.approx(2.0)
        assert progress.last_attempt_was_correct is False


class TestEaseBounds:

    def test_ease_floor(self):
        progress = Progress(ease=1.35, interval_days=1, reps=1, due_at=NOW)
        process_review(progress, Quality.MISS, NOW)
        assert progress.ease == pytest.approx(1.3)

    def test_ease_ceiling(self):
        progress = Progress(ease=2.99, interval_days=1, reps=1, due_at=NOW)
        process_review(progress, Quality.PERFECT, NOW)
        assert progress.ease == pytest.approx(3.0)


class TestDueAtMonotonic:
    """Every review pushes due_at past the review time."""

    def test_due_at_strictly_increases(self):
        progress = Progress()
        now = NOW
        previous_due = 0
        for quality in [Quality.GOOD, Quality.HARD, Quality.MISS, Quality.PERFECT, Quality.GOOD]:
            process_review(progress, quality, now)
            assert progress.due_at > now
            assert progress.due_at > previous_due
            assert progress.interval_days >= 1
            previous_due = progress.due_at
            now = progress.due_at


class TestIsDue:

    def test_unscheduled_is_not_due(self):
        assert not is_due(Progress(), NOW)

    def test_past_due(self):
        assert is_due(Progress(reps=1, due_at=NOW - 1), NOW)
        assert is_due(Progress(reps=1, due_at=NOW), NOW)

    def test_future(self):
        assert not is_due(Progress(reps=1, due_at=NOW + 1), NOW)
