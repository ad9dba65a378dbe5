"""
Progress page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_lesson_session
from core.analytics import FORECAST_DAYS, MASTERY_LABELS, build_progress_dashboard


def render_progress_page() -> None:
    session = get_lesson_session()
    dashboard = build_progress_dashboard(session.state, session.clock)

    st.subheader("Learning Progress")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Sentences", f"{dashboard.total_items:,}")
    with col2:
        st.metric("Learned", f"{dashboard.learned_total:,}", help="Learned or mastered (at least one correct in a row)")
    with col3:
        st.metric("Due Now", f"{dashboard.due_now:,}")

    st.markdown("### Mastery")
    if dashboard.total_items == 0:
        st.info("No sentences yet. Import some on the Data tab.")
        return
    breakdown = dashboard.mastery_breakdown.rename(index=MASTERY_LABELS).rename("sentences")
    st.bar_chart(breakdown.to_frame())

    st.markdown(f"### Due in the next {FORECAST_DAYS} days")
    if dashboard.due_forecast.sum() == 0:
        st.info("Nothing scheduled yet.")
    else:
        st.bar_chart(dashboard.due_forecast.rename("due").to_frame())

    st.markdown("### Recent activity")
    if dashboard.reviewed_by_day.empty:
        st.info("No reviews yet.")
    else:
        st.caption("Sentences by day of their latest review")
        st.bar_chart(dashboard.reviewed_by_day.rename("reviewed").to_frame())

    st.markdown("### Hardest sentences")
    if dashboard.hardest_items.empty:
        st.info("No misses so far.")
    else:
        st.dataframe(dashboard.hardest_items, hide_index=True, use_container_width=True)
