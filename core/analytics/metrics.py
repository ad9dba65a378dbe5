"""
Metric computations for the progress dashboard.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from core.analytics.constants import MASTERY_ORDER


def build_day_index(start: date, days: int) -> pd.DatetimeIndex:
    """
    Dense day index of `days` calendar days starting at `start`.
    """
    if days <= 0:
        return pd.DatetimeIndex([])
    return pd.date_range(start=pd.Timestamp(start), periods=days, freq="D")


def compute_mastery_breakdown(items_df: pd.DataFrame) -> pd.Series:
    """
    Item counts per mastery state, always in new/seen/learned/mastered order.
    """
    order = [state.value for state in MASTERY_ORDER]
    if items_df.empty:
        return pd.Series(0, index=order, dtype="int64")
    return items_df["mastery"].value_counts().reindex(order, fill_value=0).astype("int64")


def compute_due_forecast(items_df: pd.DataFrame, today: date, days: int) -> pd.Series:
    """
    Scheduled items per day for the next `days` days.

    Anything already overdue is counted on today.
    """
    day_index = build_day_index(today, days)
    if items_df.empty or len(day_index) == 0:
        return pd.Series(0, index=day_index, dtype="int64")

    scheduled = items_df["due_date"].dropna()
    if scheduled.empty:
        return pd.Series(0, index=day_index, dtype="int64")

    today_ts = pd.Timestamp(today)
    scheduled = scheduled.where(scheduled >= today_ts, today_ts)
    counts = scheduled.value_counts()
    return counts.reindex(day_index, fill_value=0).astype("int64")


def compute_reviewed_by_day(items_df: pd.DataFrame) -> pd.Series:
    """
    Number of items whose most recent review fell on each day.
    """
    if items_df.empty:
        return pd.Series(dtype="int64")
    seen = items_df["last_seen_date"].dropna()
    if seen.empty:
        return pd.Series(dtype="int64")
    counts = seen.value_counts().sort_index()
    day_index = pd.date_range(start=counts.index.min(), end=counts.index.max(), freq="D")
    return counts.reindex(day_index, fill_value=0).astype("int64")


def compute_hardest_items(items_df: pd.DataFrame, limit: int) -> pd.DataFrame:
    """
    Sentences with the most lapses (ties broken by lower ease).
    """
    columns = ["source_text", "target_text", "lapses", "ease", "mastery"]
    if items_df.empty:
        return pd.DataFrame(columns=columns)
    lapsed = items_df[items_df["lapses"] > 0]
    ranked = lapsed.sort_values(["lapses", "ease"], ascending=[False, True])
    return ranked[columns].head(limit).reset_index(drop=True)
