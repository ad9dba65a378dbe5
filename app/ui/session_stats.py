"""
Session Statistics UI

Renders the header HUD and the progress panel.
"""

import streamlit as st

from core.views import HudView, StatsView


def render_hud(hud: HudView) -> None:
    """
    Render level, streak, XP and the daily goal.
    """
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Level", hud.level_name, help=hud.subtitle)
        st.caption(hud.subtitle)

    with col2:
        st.metric("🔥 Streak", hud.streak)

    with col3:
        st.metric("Total XP", hud.total_xp)

    with col4:
        st.metric("Due", hud.due)

    if hud.goal_enabled:
        st.progress(min(hud.ring_pct, 100) / 100, text=f"Daily goal {hud.daily_xp} / {hud.daily_goal_xp} XP · {hud.ring_label}")
    else:
        st.caption(hud.ring_label)

    st.divider()


def render_lesson_progress(position: int, total: int) -> bool:
    """
    Render lesson position and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    col1, col2 = st.columns([6, 1])

    with col1:
        st.progress(position / total if total else 0.0, text=f"Sentence {position}/{total}")

    with col2:
        if st.button("❌", help="Quit lesson", use_container_width=True):
            return True

    return False


def render_stats_panel(stats: StatsView) -> None:
    """Render mastery breakdown, session XP and level target."""
    st.caption(stats.breakdown_line)
    st.caption(stats.progress_line)
    st.progress(min(stats.learned_pct, 100) / 100, text="Learned")
    st.progress(min(stats.mastered_pct, 100) / 100, text="Mastered")
    st.caption(stats.session_line)
    st.progress(min(stats.session_pct, 100) / 100)
    st.caption(stats.level_line)
