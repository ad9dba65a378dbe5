"""
Data page rendering: corpus import, daily goal and reset.
"""

from __future__ import annotations

import streamlit as st
from sqlalchemy.engine import make_url

from app.session_controller import import_corpus, load_sample, reset_progress, set_daily_goal
from app.state import get_lesson_session

from core import store


def render_data_page() -> None:
    session = get_lesson_session()

    st.subheader("Sentences")
    st.caption("One pair per line: English = Russian (a leading line number is ignored).")
    st.text_area("Corpus", key="corpus_text", height=220, label_visibility="collapsed")

    col1, col2 = st.columns(2)
    with col1:
        st.button("Import Sentences", type="primary", on_click=import_corpus, use_container_width=True)
    with col2:
        st.button("Load Sample", on_click=load_sample, use_container_width=True)

    if st.session_state.import_status:
        st.info(st.session_state.import_status)

    st.subheader("Daily goal")
    st.number_input(
        "Daily goal (XP, 0 turns it off)",
        min_value=0,
        step=10,
        value=session.state.meta.daily_goal_xp,
        key="daily_goal_input",
    )
    st.button("Set Goal", on_click=set_daily_goal)

    st.subheader("Reset")
    confirm = st.checkbox("I understand this deletes all sentences and progress")
    st.button("Reset Progress", on_click=reset_progress, disabled=not confirm)

    st.caption(f"Database: {make_url(store.get_database_url())}")
