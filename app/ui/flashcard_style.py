"""
Card and tile style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "28px 24px"
CARD_MIN_HEIGHT = "140px"
PROMPT_BG_COLOR = "#f0f2f6"
ANSWER_BG_COLOR = "#e8f4f8"


# ---- Feedback Colors ----

TONE_COLORS = {
    "good": "#e7f6ec",
    "warn": "#fff6e0",
    "bad": "#fdecec",
}


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for cards.
    """
    main_font_size: str = "1.6em"
    main_color: str = "#1f1f1f"
    subtitle_font_size: str = "1.0em"
    subtitle_color: str = "#666"
    corner_font_size: str = "0.85em"
    corner_color: str = "#666"
    bg_color: str = PROMPT_BG_COLOR


PROMPT_STYLE = FlashcardStyle()

ANSWER_STYLE = FlashcardStyle(
    main_font_size="1.4em",
    bg_color=ANSWER_BG_COLOR,
)
