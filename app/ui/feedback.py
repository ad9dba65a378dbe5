"""
Feedback UI

Renders the result of a submission.
"""

from __future__ import annotations

import html

import streamlit as st

from app.ui.flashcard_style import TONE_COLORS
from core.lesson_session import SubmissionOutcome


def render_feedback(outcome: SubmissionOutcome) -> None:
    """
    Render the feedback lines in a box colored by tone.
    """
    body = "<br>".join(html.escape(line) for line in outcome.feedback_lines)
    st.markdown(
        f'<div style="background: {TONE_COLORS[outcome.tone]}; border-radius: 10px; '
        f'padding: 0.8rem 1rem; line-height: 1.6;">{body}</div>',
        unsafe_allow_html=True,
    )
