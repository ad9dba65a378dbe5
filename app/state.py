"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import store
from core.lesson_session import LessonSession
from core.session_requests import default_lesson_request


def init_database() -> None:
    """
    Initialize database schema (cached per Streamlit process).
    """
    @st.cache_resource
    def _init_database() -> None:
        store.init_db()

    _init_database()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.

    Call init_database() first; the state store skips its own schema check.
    """
    if "lesson_session" not in st.session_state:
        st.session_state.lesson_session = LessonSession(store.SqlStateStore(init_schema=False))
    if "lesson_request" not in st.session_state:
        st.session_state.lesson_request = default_lesson_request()
    if "last_outcome" not in st.session_state:
        st.session_state.last_outcome = None
    if "import_status" not in st.session_state:
        st.session_state.import_status = ""
    if "pending_toasts" not in st.session_state:
        st.session_state.pending_toasts = []
    if "pending_speech" not in st.session_state:
        st.session_state.pending_speech = None
    if "pending_sound" not in st.session_state:
        st.session_state.pending_sound = None
    if "corpus_text" not in st.session_state:
        st.session_state.corpus_text = ""


def get_lesson_session() -> LessonSession:
    return st.session_state.lesson_session
