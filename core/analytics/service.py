"""
Service layer to assemble the progress dashboard.
"""

from __future__ import annotations

from core.analytics.constants import FORECAST_DAYS, HARDEST_LIMIT
from core.analytics.metrics import (
    compute_due_forecast,
    compute_hardest_items,
    compute_mastery_breakdown,
    compute_reviewed_by_day,
)
from core.analytics.queries import load_items_df
from core.analytics.types import ProgressDashboardData
from core.clock import Clock
from core.motivation import compute_stats
from core.schemas import TrainerState


def build_progress_dashboard(
    state: TrainerState,
    clock: Clock,
    forecast_days: int = FORECAST_DAYS
) -> ProgressDashboardData:
    """
    Build all KPI values and series needed by the progress page.
    """
    items_df = load_items_df(state, clock)
    stats = compute_stats(state, clock.now_ms())

    return ProgressDashboardData(
        total_items=stats.total,
        due_now=stats.due,
        learned_total=stats.learned_total,
        mastered_count=stats.mastered_count,
        mastery_breakdown=compute_mastery_breakdown(items_df),
        due_forecast=compute_due_forecast(items_df, clock.today(), forecast_days),
        reviewed_by_day=compute_reviewed_by_day(items_df),
        hardest_items=compute_hardest_items(items_df, HARDEST_LIMIT),
    )
