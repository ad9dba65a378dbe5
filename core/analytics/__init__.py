"""
Analytics package exports.
"""

from core.analytics.constants import FORECAST_DAYS, MASTERY_LABELS
from core.analytics.queries import load_items_df
from core.analytics.service import build_progress_dashboard
from core.analytics.types import ProgressDashboardData

__all__ = [
    "FORECAST_DAYS",
    "MASTERY_LABELS",
    "load_items_df",
    "build_progress_dashboard",
    "ProgressDashboardData",
]
