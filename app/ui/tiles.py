"""
Word Bank UI

Renders the answer line and the tile bank as buttons.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import choose_tile, remove_tile
from core.exercise import Exercise

TILES_PER_ROW = 5


def render_answer_line(exercise: Exercise, key_prefix: str) -> None:
    """
    Render placed tiles; clicking one takes it back off the line.
    """
    st.caption("Your answer")
    if not exercise.chosen:
        st.markdown("<div style='min-height: 2.4rem; color: #999;'>Tap words below…</div>", unsafe_allow_html=True)
        return

    for start in range(0, len(exercise.chosen), TILES_PER_ROW):
        row = exercise.chosen[start:start + TILES_PER_ROW]
        cols = st.columns(TILES_PER_ROW)
        for offset, tile in enumerate(row):
            index = start + offset
            with cols[offset]:
                st.button(
                    tile,
                    key=f"{key_prefix}_answer_{index}",
                    on_click=remove_tile,
                    args=(index,),
                    disabled=exercise.submitted,
                    use_container_width=True,
                )


def render_word_bank(exercise: Exercise, key_prefix: str) -> None:
    """
    Render bank tiles; used-up required tiles are disabled.
    """
    st.caption("Word bank")
    tiles = exercise.tile_states()
    for start in range(0, len(tiles), TILES_PER_ROW):
        row = tiles[start:start + TILES_PER_ROW]
        cols = st.columns(TILES_PER_ROW)
        for offset, tile in enumerate(row):
            with cols[offset]:
                st.button(
                    tile.text,
                    key=f"{key_prefix}_bank_{tile.index}",
                    on_click=choose_tile,
                    args=(tile.index,),
                    disabled=exercise.submitted or tile.used_up,
                    type="secondary",
                    use_container_width=True,
                )
