"""
Types for the progress dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class ProgressDashboardData:
    """
    Precomputed metrics and series for the progress page.
    """
    total_items: int
    due_now: int
    learned_total: int
    mastered_count: int
    mastery_breakdown: pd.Series
    due_forecast: pd.Series
    reviewed_by_day: pd.Series
    hardest_items: pd.DataFrame
