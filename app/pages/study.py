"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    clear_tiles,
    end_lesson,
    next_exercise,
    speak_current,
    start_lesson,
    submit_answer,
    undo_tile,
)
from app.state import get_lesson_session
from app.ui import (
    render_answer_line,
    render_feedback,
    render_flashcard,
    render_lesson_progress,
    render_stats_panel,
    render_word_bank,
)
from app.ui.flashcard_style import ANSWER_STYLE
from core.session_builders.lesson_builder import MAX_LESSON_SIZE, MIN_LESSON_SIZE


def render_study_page() -> None:
    """
    Render the study flow (lesson settings or active exercise).
    """
    session = get_lesson_session()
    if session.current is None:
        _render_intro_screen()
    else:
        _render_active_exercise()

    st.markdown("### Progress")
    render_stats_panel(session.stats())


def _render_intro_screen() -> None:
    session = get_lesson_session()
    request = st.session_state.lesson_request

    st.markdown("### 📚 Start a lesson")
    col1, col2 = st.columns(2)
    with col1:
        lesson_size = st.number_input(
            "Lesson size",
            min_value=MIN_LESSON_SIZE,
            max_value=MAX_LESSON_SIZE,
            value=request.lesson_size,
            step=1,
        )
    with col2:
        new_per_lesson = st.number_input(
            "New per lesson",
            min_value=0,
            max_value=MAX_LESSON_SIZE,
            value=request.new_per_lesson,
            step=1,
        )

    st.button(
        "Start Lesson",
        type="primary",
        use_container_width=True,
        on_click=start_lesson,
        args=(int(lesson_size), int(new_per_lesson)),
    )

    if session.status:
        st.info(session.status)


def _render_active_exercise() -> None:
    session = get_lesson_session()
    exercise = session.current
    outcome = st.session_state.last_outcome

    if render_lesson_progress(session.position, session.total):
        end_lesson()
        st.rerun()

    render_flashcard(
        main_text=exercise.prompt,
        subtitle="Build the Russian sentence",
        corner_text=f"{session.position} / {session.total}",
    )
    st.markdown("<br>", unsafe_allow_html=True)

    key_prefix = f"ex_{session.index}_{exercise.item.id}"
    render_answer_line(exercise, key_prefix)
    render_word_bank(exercise, key_prefix)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.button("Undo", on_click=undo_tile, disabled=exercise.submitted, use_container_width=True)
    with col2:
        st.button("Clear", on_click=clear_tiles, disabled=exercise.submitted, use_container_width=True)
    with col3:
        st.button("🔊 Speak", on_click=speak_current, use_container_width=True)
    with col4:
        if exercise.submitted:
            st.button("Next", type="primary", on_click=next_exercise, use_container_width=True)
        else:
            st.button("Submit", type="primary", on_click=submit_answer, use_container_width=True)

    if exercise.submitted and outcome is not None:
        st.markdown("<br>", unsafe_allow_html=True)
        render_feedback(outcome)
        if outcome.grade.ok:
            render_flashcard(main_text=exercise.canonical_text, style=ANSWER_STYLE)
