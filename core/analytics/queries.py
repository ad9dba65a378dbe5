"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional

import pandas as pd

from core.analytics.constants import ITEM_COLUMNS
from core.clock import MS_PER_DAY, Clock
from core.motivation import mastery_state
from core.schemas import TrainerState

# Latest epoch-ms pandas can hold, minus a day of slack for the zone shift
MAX_TIMESTAMP_MS = pd.Timestamp.max.value // 1_000_000 - MS_PER_DAY


def _representable_ms(epoch_ms: int) -> Optional[int]:
    """epoch_ms when it is set and fits a pandas Timestamp, else None."""
    if 0 < epoch_ms <= MAX_TIMESTAMP_MS:
        return epoch_ms
    return None


def _local_days(epoch_ms: pd.Series, tz: Optional[tzinfo]) -> pd.Series:
    """Local calendar days (naive midnights) of epoch-ms values; NaT for missing."""
    stamps = pd.to_datetime(epoch_ms, unit="ms", utc=True, errors="coerce")
    if tz is not None:
        stamps = stamps.dt.tz_convert(tz)
    return stamps.dt.tz_localize(None).dt.normalize()


def load_items_df(state: TrainerState, clock: Clock) -> pd.DataFrame:
    """
    Flatten the corpus into one row per item, in import order.

    due_date / last_seen_date are local calendar days. They are NaT when
    unset, and also when the time lies beyond what pandas can represent
    (long intervals keep growing without limit).
    """
    rows = []
    for item in state.ordered_items():
        progress = item.progress
        rows.append({
            "id": item.id,
            "source_text": item.source_text,
            "target_text": item.target_text,
            "reps": progress.reps,
            "lapses": progress.lapses,
            "ease": progress.ease,
            "interval_days": progress.interval_days,
            "correct_streak": progress.correct_streak,
            "best_streak": progress.best_streak,
            "due_at": progress.due_at,
            "last_seen_at": progress.last_seen_at,
            "mastery": mastery_state(progress).value,
            "due_date": _representable_ms(progress.due_at),
            "last_seen_date": _representable_ms(progress.last_seen_at),
        })

    if not rows:
        return pd.DataFrame(columns=ITEM_COLUMNS)

    df = pd.DataFrame(rows, columns=ITEM_COLUMNS)
    tz = clock.now().tzinfo
    df["due_date"] = _local_days(df["due_date"].astype("float64"), tz)
    df["last_seen_date"] = _local_days(df["last_seen_date"].astype("float64"), tz)
    return df
