"""
SRS - Sentence Spaced Repetition

Main scheduling API for the sentence trainer.

Quick start:
    from core import srs

    # Apply a graded attempt (algorithm only, no DB calls)
    srs.process_review(item.progress, srs.Quality.GOOD, clock.now_ms())

    # Check whether an item is due
    srs.is_due(item.progress, clock.now_ms())
"""

from core.srs.constants import (
    Quality,
    EASE_INITIAL,
    EASE_MIN,
    EASE_MAX,
    EASE_DELTA,
    INTERVAL_MULTIPLIER,
)
from core.srs.scheduler import (
    process_review,
    next_interval_days,
    round_half_up,
)
from core.schemas import Progress


def is_due(progress: Progress, now_ms: int) -> bool:
    """True when the item was scheduled and its due time has passed."""
    return 0 < progress.due_at <= now_ms


__all__ = [
    # Core algorithm
    "process_review",
    "next_interval_days",
    "round_half_up",
    "is_due",

    # Enums
    "Quality",

    # Parameters
    "EASE_INITIAL",
    "EASE_MIN",
    "EASE_MAX",
    "EASE_DELTA",
    "INTERVAL_MULTIPLIER",
]
