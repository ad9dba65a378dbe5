"""
Tests for XP, streak, goal and level bookkeeping.
"""

from datetime import date, timedelta

from core.motivation import (
    LEVELS,
    award_xp,
    bump_streak_if_needed,
    coerce_daily_goal,
    compute_stats,
    current_level,
    daily_goal_just_completed,
    mastery_state,
    maybe_level_up,
    next_level,
    reset_daily_if_needed,
    set_daily_goal,
    start_session,
    xp_for_quality,
)
from core.schemas import MasteryState, Progress, VocabularyMetadata
from core.srs import Quality
from tests.conftest import make_item, make_state

TODAY = date(2024, 3, 10)


class TestStreak:

    def test_first_study_day(self):
        meta = VocabularyMetadata()
        change = bump_streak_if_needed(meta, TODAY)
        assert change.changed and not change.broke
        assert meta.streak == 1
        assert meta.last_study_date == TODAY

    def test_date_regression_restarts(self):
        meta = VocabularyMetadata(streak=4, last_study_date=TODAY)
        earlier = TODAY - timedelta(days=1)
        change = bump_streak_if_needed(meta, earlier)
        assert change.changed and change.broke
        assert meta.streak == 1
        assert meta.last_study_date == earlier

    def test_same_day_is_unchanged(self):
        meta = VocabularyMetadata(streak=3, last_study_date=TODAY)
        change = bump_streak_if_needed(meta, TODAY)
        assert not change.changed
        assert meta.streak == 3

    def test_consecutive_day_increments(self):
        meta = VocabularyMetadata(streak=3, last_study_date=TODAY - timedelta(days=1))
        change = bump_streak_if_needed(meta, TODAY)
        assert change.changed and not change.broke
        assert meta.streak == 4

    def test_gap_restarts(self):
        meta = VocabularyMetadata(streak=5, last_study_date=TODAY - timedelta(days=3))
        change = bump_streak_if_needed(meta, TODAY)
        assert change.broke
        assert meta.streak == 1
        assert meta.last_study_date == TODAY


class TestAwardXp:

    def test_adds_to_all_counters(self):
        meta = VocabularyMetadata(daily_xp_date=TODAY, daily_xp=10, total_xp=100, session_xp=5)
        award_xp(meta, 12, TODAY)
        assert meta.daily_xp == 22
        assert meta.total_xp == 112
        assert meta.session_xp == 17

    def test_daily_reset_on_new_date(self):
        meta = VocabularyMetadata(daily_xp_date=TODAY - timedelta(days=1), daily_xp=50, total_xp=50)
        award_xp(meta, 10, TODAY)
        assert meta.daily_xp == 10
        assert meta.daily_xp_date == TODAY
        assert meta.total_xp == 60

    def test_daily_reset_after_several_days(self):
        meta = VocabularyMetadata(daily_xp_date=TODAY - timedelta(days=9), daily_xp=120, total_xp=500)
        award_xp(meta, 8, TODAY)
        assert meta.daily_xp == 8
        assert meta.daily_xp_date == TODAY
        assert meta.total_xp == 508

    def test_session_goal_moves_up_in_steps_of_20(self):
        meta = VocabularyMetadata(session_xp=35)
        award_xp(meta, 10, TODAY)
        assert meta.session_goal_xp == 60

    def test_session_goal_stays_when_reached_exactly(self):
        meta = VocabularyMetadata()
        award_xp(meta, 40, TODAY)
        assert meta.session_goal_xp == 40

    def test_start_session_resets(self):
        meta = VocabularyMetadata(session_xp=70, session_goal_xp=80)
        start_session(meta)
        assert meta.session_xp == 0
        assert meta.session_goal_xp == 40

    def test_reset_daily_only_once(self):
        meta = VocabularyMetadata(daily_xp=30, daily_xp_date=TODAY - timedelta(days=1))
        assert reset_daily_if_needed(meta, TODAY)
        assert not reset_daily_if_needed(meta, TODAY)
        assert meta.daily_xp == 0


class TestXpTable:

    def test_values(self):
        assert xp_for_quality(Quality.PERFECT) == 12
        assert xp_for_quality(Quality.GOOD) == 10
        assert xp_for_quality(Quality.HARD) == 8
        assert xp_for_quality(Quality.MISS) == 0


class TestDailyGoal:

    def test_coerce(self):
        assert coerce_daily_goal("120") == 120
        assert coerce_daily_goal("12.7") == 12
        assert coerce_daily_goal(-5) == 0
        assert coerce_daily_goal("abc") == 0
        assert coerce_daily_goal(None) == 0
        assert coerce_daily_goal(float("inf")) == 0

    def test_set_daily_goal(self):
        meta = VocabularyMetadata()
        assert set_daily_goal(meta, "0") == 0
        assert meta.daily_goal_xp == 0

    def test_just_completed(self):
        meta = VocabularyMetadata(daily_goal_xp=80, daily_xp=84)
        assert daily_goal_just_completed(meta, 12)

    def test_already_completed(self):
        meta = VocabularyMetadata(daily_goal_xp=80, daily_xp=100)
        assert not daily_goal_just_completed(meta, 10)

    def test_goal_off(self):
        meta = VocabularyMetadata(daily_goal_xp=0, daily_xp=100)
        assert not daily_goal_just_completed(meta, 100)


class TestMastery:

    def test_states(self):
        assert mastery_state(Progress()) == MasteryState.NEW
        assert mastery_state(Progress(reps=1, due_at=1)) == MasteryState.SEEN
        assert mastery_state(Progress(reps=1, due_at=1, correct_streak=1)) == MasteryState.LEARNED
        assert mastery_state(Progress(reps=3, due_at=1, correct_streak=3)) == MasteryState.MASTERED

    def test_compute_stats(self):
        now = 1_700_000_000_000
        state = make_state([
            make_item(0),
            make_item(1, reps=1, due_at=now - 1),
            make_item(2, reps=1, due_at=now + 1, correct_streak=1),
            make_item(3, reps=4, due_at=now + 1, correct_streak=4),
        ])
        stats = compute_stats(state, now)
        assert (stats.new_count, stats.seen_count, stats.learned_count, stats.mastered_count) == (1, 1, 1, 1)
        assert stats.due == 1
        assert stats.learned_total == 2
        assert stats.learned_pct == 50
        assert stats.mastered_pct == 25


class TestLevels:

    def test_thresholds(self):
        assert [level.name for level in LEVELS] == ["A0", "A1", "B1", "B2", "C1", "C2"]
        assert current_level(249).name == "A0"
        assert current_level(250).name == "A1"
        assert current_level(40000).name == "C2"

    def test_next_level(self):
        assert next_level(0).name == "A1"
        assert next_level(40000) is None

    def test_level_up_reported_once(self):
        meta = VocabularyMetadata()
        assert maybe_level_up(meta, 250) == "A1"
        assert meta.last_level == "A1"
        assert maybe_level_up(meta, 251) is None

    def test_drop_to_lowest_level_is_silent(self):
        meta = VocabularyMetadata(last_level="A1")
        assert maybe_level_up(meta, 10) is None
        assert meta.last_level == "A0"
