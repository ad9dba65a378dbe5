"""
Constants for progress analytics.
"""

from __future__ import annotations

from typing import Final

from core.schemas import MasteryState


MASTERY_ORDER: Final[list[MasteryState]] = [
    MasteryState.NEW,
    MasteryState.SEEN,
    MasteryState.LEARNED,
    MasteryState.MASTERED,
]

MASTERY_LABELS: Final[dict[str, str]] = {
    MasteryState.NEW.value: "New",
    MasteryState.SEEN.value: "Seen",
    MasteryState.LEARNED.value: "Learned",
    MasteryState.MASTERED.value: "Mastered",
}

FORECAST_DAYS: Final[int] = 14
HARDEST_LIMIT: Final[int] = 10

ITEM_COLUMNS: Final[list[str]] = [
    "id",
    "source_text",
    "target_text",
    "reps",
    "lapses",
    "ease",
    "interval_days",
    "correct_streak",
    "best_streak",
    "due_at",
    "last_seen_at",
    "mastery",
    "due_date",
    "last_seen_date",
]
