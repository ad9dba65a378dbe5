"""
Session lifecycle helpers for the Streamlit app.

Each function is a button callback: it forwards the click to the
LessonSession and stashes whatever the next render should show (feedback,
toasts, speech, sound cue) in st.session_state.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_lesson_session
from core.sample_corpus import SAMPLE_CORPUS
from core.session_requests import LessonRequest, normalize_lesson_request


def start_lesson(lesson_size: int, new_per_lesson: int) -> None:
    """
    Start a new lesson with the chosen settings.
    """
    request = normalize_lesson_request(
        LessonRequest(lesson_size=lesson_size, new_per_lesson=new_per_lesson)
    )
    st.session_state.lesson_request = request
    st.session_state.last_outcome = None
    get_lesson_session().start(request)


def choose_tile(bank_index: int) -> None:
    session = get_lesson_session()
    if session.current is not None and session.choose_tile(bank_index):
        st.session_state.pending_sound = "tap"


def remove_tile(index: int) -> None:
    session = get_lesson_session()
    if session.current is not None and session.remove_tile(index) is not None:
        st.session_state.pending_sound = "tap"


def undo_tile() -> None:
    session = get_lesson_session()
    if session.current is not None and session.undo() is not None:
        st.session_state.pending_sound = "tap"


def clear_tiles() -> None:
    session = get_lesson_session()
    if session.current is not None:
        session.clear()
        st.session_state.pending_sound = "tap"


def submit_answer() -> None:
    """
    Grade the current answer and queue its feedback.
    """
    session = get_lesson_session()
    if session.current is None:
        return
    outcome = session.submit()
    st.session_state.last_outcome = outcome
    st.session_state.pending_toasts = list(outcome.toasts)
    st.session_state.pending_speech = outcome.speak_text
    st.session_state.pending_sound = outcome.sound


def next_exercise() -> None:
    st.session_state.last_outcome = None
    get_lesson_session().advance()


def speak_current() -> None:
    st.session_state.pending_speech = get_lesson_session().speak_text()


def end_lesson() -> None:
    """Quit the current lesson (progress is already saved)."""
    session = get_lesson_session()
    session.items = []
    session.exercise = None
    session.status = ""
    st.session_state.last_outcome = None


def load_sample() -> None:
    st.session_state.corpus_text = SAMPLE_CORPUS
    st.session_state.import_status = "Sample set loaded. Click Import Sentences."


def import_corpus() -> None:
    summary = get_lesson_session().import_corpus(st.session_state.corpus_text)
    status = summary.message
    if summary.skipped:
        status += f" Skipped {summary.skipped} malformed lines."
    st.session_state.import_status = status


def set_daily_goal() -> None:
    message = get_lesson_session().set_daily_goal(st.session_state.daily_goal_input)
    st.session_state.pending_toasts = [message]


def reset_progress() -> None:
    st.session_state.import_status = get_lesson_session().reset()
    st.session_state.last_outcome = None
