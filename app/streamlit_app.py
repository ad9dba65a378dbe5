"""
Russian Sentence Trainer - Main App

Streamlit UI for the word-ordering sentence trainer.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging

import streamlit as st
from dotenv import load_dotenv

from app.router import PAGES
from app.state import ensure_session_state, get_lesson_session, init_database
from app.ui import play_pending_audio, render_hud
from core import store

load_dotenv()
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# ---- Page Setup ----

st.set_page_config(
    page_title="Russian Sentence Trainer",
    page_icon="🇷🇺",
    layout="centered"
)


# ---- Initialization ----

init_database()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("🇷🇺 Russian Sentence Trainer")
    if store.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using the test_ database (set TEST_MODE=false in .env for production)")

    for message in st.session_state.pending_toasts:
        st.toast(message)
    st.session_state.pending_toasts = []

    render_hud(get_lesson_session().hud())

    tabs = st.tabs([page.label for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()

    play_pending_audio()


if __name__ == "__main__":
    main()
