"""
Scheduler - SRS Algorithm Logic

Pure scheduling updates (no database calls).

Main workflow:
1. Grade the attempt (grader's responsibility)
2. Apply the quality to the item's Progress record
3. Persist the state (caller's responsibility)

The quality is never re-derived here; the scheduler trusts the grader.
"""

from __future__ import annotations

import math

from core.clock import days_to_ms
from core.schemas import Progress
from core.srs.constants import (
    EASE_DELTA,
    EASE_INITIAL,
    EASE_MAX,
    EASE_MIN,
    FIRST_INTERVAL_DAYS,
    INTERVAL_MULTIPLIER,
    MIN_INTERVAL_DAYS,
    Quality,
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def process_review(progress: Progress, quality: Quality, now_ms: int) -> Progress:
    """
    Apply a graded attempt to a progress record.

    Modifies the record in place and returns it.

    Rules:
    - PERFECT: ease up, interval x 2.6 x ease / 2.2
    - GOOD: ease unchanged, interval x 2.2
    - HARD: ease down, interval x 1.3
    - MISS: lapse, ease down hard, streak reset, interval back to 1 day

    A never-reviewed record (interval_days == 0) always gets a 1-day interval
    on success.

    Args:
        progress: Progress record to update
        quality: Grade of the attempt
        now_ms: Review time as epoch milliseconds

    Returns:
        The same Progress instance, updated
    """
    quality = Quality(quality)
    progress.last_seen_at = now_ms
    progress.reps += 1

    if quality == Quality.MISS:
        _apply_miss(progress)
    else:
        _apply_success(progress, quality)

    progress.due_at = now_ms + days_to_ms(progress.interval_days)
    return progress


def _apply_success(progress: Progress, quality: Quality) -> None:
    """Apply PERFECT/GOOD/HARD updates (modifies in place)."""
    progress.ease = _clamp_ease(progress.ease + EASE_DELTA[quality])
    progress.correct_streak += 1
    progress.best_streak = max(progress.best_streak, progress.correct_streak)
    progress.last_attempt_was_correct = True
    progress.interval_days = next_interval_days(progress.interval_days, quality, progress.ease)


def _apply_miss(progress: Progress) -> None:
    """Apply MISS updates (modifies in place)."""
    progress.lapses += 1
    progress.ease = _clamp_ease(progress.ease + EASE_DELTA[Quality.MISS])
    progress.correct_streak = 0
    progress.last_attempt_was_correct = False
    progress.interval_days = FIRST_INTERVAL_DAYS


def next_interval_days(interval_days: int, quality: Quality, ease: float) -> int:
    """
    Compute the next interval for a successful review.

    Args:
        interval_days: Current interval (0 = never successfully reviewed)
        quality: PERFECT, GOOD or HARD
        ease: Ease after this review's adjustment

    Returns:
        New interval in whole days (>= 1)
    """
    if interval_days == 0:
        return FIRST_INTERVAL_DAYS

    grown = interval_days * INTERVAL_MULTIPLIER[quality]
    if quality == Quality.PERFECT:
        grown = grown * ease / EASE_INITIAL
    return max(MIN_INTERVAL_DAYS, round_half_up(grown))


def _clamp_ease(ease: float) -> float:
    return max(EASE_MIN, min(EASE_MAX, ease))
