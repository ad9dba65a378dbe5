"""
Motivation bookkeeping: XP, daily goal, streaks, mastery and levels.

All functions take the state (or its metadata) explicitly and the current
date/time as arguments; nothing here reads the wall clock.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from core.schemas import (
    DEFAULT_SESSION_GOAL_XP,
    MasteryState,
    Progress,
    TrainerState,
    VocabularyMetadata,
)
from core.srs import is_due, round_half_up
from core.srs.constants import Quality


# ---- XP tuning ----

XP_BY_QUALITY = {
    Quality.PERFECT: 12,
    Quality.GOOD: 10,
    Quality.HARD: 8,
    Quality.MISS: 0,
}
DEFAULT_XP = 8

SESSION_GOAL_FLOOR = DEFAULT_SESSION_GOAL_XP
SESSION_GOAL_STEP = 20

MASTERED_STREAK = 3
LEARNED_STREAK = 1


# ---- Levels ----

@dataclass(frozen=True)
class Level:
    """A level reached once `learned` sentences are learned or mastered."""
    name: str
    learned: int


LEVELS: list[Level] = [
    Level("A0", 0),
    Level("A1", 250),
    Level("B1", 1000),
    Level("B2", 10000),
    Level("C1", 20000),
    Level("C2", 40000),
]


@dataclass(frozen=True)
class StreakChange:
    changed: bool
    broke: bool


@dataclass(frozen=True)
class ProgressStats:
    """Corpus-wide counts by mastery state."""
    total: int
    due: int
    new_count: int
    seen_count: int
    learned_count: int
    mastered_count: int

    @property
    def learned_total(self) -> int:
        return self.learned_count + self.mastered_count

    @property
    def learned_pct(self) -> int:
        return percent(self.learned_total, self.total)

    @property
    def mastered_pct(self) -> int:
        return percent(self.mastered_count, self.total)


def percent(part: float, whole: float) -> int:
    """Rounded percentage, 0 when whole is 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)


# ---- Daily XP and streak ----

def reset_daily_if_needed(meta: VocabularyMetadata, today: date) -> bool:
    """
    Zero daily XP when the calendar date has changed.

    Returns:
        True if a reset happened
    """
    if meta.daily_xp_date != today:
        meta.daily_xp_date = today
        meta.daily_xp = 0
        return True
    return False


def bump_streak_if_needed(meta: VocabularyMetadata, today: date) -> StreakChange:
    """
    Count today as a study day.

    - First ever study day: streak = 1
    - Already counted today: no change
    - Exactly one day after the last study day: streak + 1
    - Any other gap (or a date earlier than the last one): streak = 1, broke
    """
    if meta.last_study_date is None:
        meta.streak = 1
        meta.last_study_date = today
        return StreakChange(changed=True, broke=False)

    if meta.last_study_date == today:
        return StreakChange(changed=False, broke=False)

    diff = (today - meta.last_study_date).days
    meta.last_study_date = today
    if diff == 1:
        meta.streak += 1
        return StreakChange(changed=True, broke=False)

    meta.streak = 1
    return StreakChange(changed=True, broke=True)


def xp_for_quality(quality: Quality) -> int:
    return XP_BY_QUALITY.get(Quality(quality), DEFAULT_XP)


def award_xp(meta: VocabularyMetadata, amount: int, today: date) -> None:
    """
    Add XP to the session, daily and lifetime totals.

    The session goal never drops below 40 and, once exceeded, moves up to the
    next multiple of 20 at or above the session XP.
    """
    reset_daily_if_needed(meta, today)
    meta.session_xp += amount
    meta.daily_xp += amount
    meta.total_xp += amount

    if meta.session_goal_xp < SESSION_GOAL_FLOOR:
        meta.session_goal_xp = SESSION_GOAL_FLOOR
    if meta.session_xp > meta.session_goal_xp:
        meta.session_goal_xp = math.ceil(meta.session_xp / SESSION_GOAL_STEP) * SESSION_GOAL_STEP


def start_session(meta: VocabularyMetadata) -> None:
    """Reset per-lesson counters."""
    meta.session_xp = 0
    meta.session_goal_xp = SESSION_GOAL_FLOOR


def daily_goal_just_completed(meta: VocabularyMetadata, xp_earned: int) -> bool:
    """True when the last award pushed daily XP across the goal."""
    goal = meta.daily_goal_xp
    if goal <= 0:
        return False
    before = percent(meta.daily_xp - xp_earned, goal)
    after = percent(meta.daily_xp, goal)
    return before < 100 <= after


def coerce_daily_goal(value: Any) -> int:
    """Parse a user-entered goal; anything non-numeric becomes 0 (goal off)."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, math.floor(number))


def set_daily_goal(meta: VocabularyMetadata, value: Any) -> int:
    meta.daily_goal_xp = coerce_daily_goal(value)
    return meta.daily_goal_xp


# ---- Mastery and levels ----

def mastery_state(progress: Progress) -> MasteryState:
    """
    Classify an item from its review history.

    A miss resets the correct streak, so learned/mastered items fall back to
    seen, never to new.
    """
    if progress.reps == 0:
        return MasteryState.NEW
    if progress.correct_streak >= MASTERED_STREAK:
        return MasteryState.MASTERED
    if progress.correct_streak >= LEARNED_STREAK:
        return MasteryState.LEARNED
    return MasteryState.SEEN


def compute_stats(state: TrainerState, now_ms: int) -> ProgressStats:
    """Count items per mastery state, plus how many are due now."""
    counts = {ms: 0 for ms in MasteryState}
    due = 0
    for item in state.items.values():
        if is_due(item.progress, now_ms):
            due += 1
        counts[mastery_state(item.progress)] += 1

    return ProgressStats(
        total=len(state.items),
        due=due,
        new_count=counts[MasteryState.NEW],
        seen_count=counts[MasteryState.SEEN],
        learned_count=counts[MasteryState.LEARNED],
        mastered_count=counts[MasteryState.MASTERED],
    )


def current_level(learned_total: int) -> Level:
    """Highest level whose threshold does not exceed learned_total."""
    level = LEVELS[0]
    for candidate in LEVELS:
        if learned_total >= candidate.learned:
            level = candidate
    return level


def next_level(learned_total: int) -> Optional[Level]:
    """First level not yet reached, or None at the top."""
    for candidate in LEVELS:
        if learned_total < candidate.learned:
            return candidate
    return None


def maybe_level_up(meta: VocabularyMetadata, learned_total: int) -> Optional[str]:
    """
    Record the current level and report a celebratory transition.

    Returns:
        The new level name when it differs from the stored one and is not the
        lowest level, else None
    """
    level = current_level(learned_total)
    if meta.last_level != level.name:
        meta.last_level = level.name
        if level.name != LEVELS[0].name:
            return level.name
    return None
