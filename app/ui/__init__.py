"""UI Components for the Sentence Trainer"""

from app.ui.audio import play_pending_audio
from app.ui.feedback import render_feedback
from app.ui.flashcard import render_flashcard
from app.ui.session_stats import render_hud, render_lesson_progress, render_stats_panel
from app.ui.tiles import render_answer_line, render_word_bank

__all__ = [
    "play_pending_audio",
    "render_feedback",
    "render_flashcard",
    "render_hud",
    "render_lesson_progress",
    "render_stats_panel",
    "render_answer_line",
    "render_word_bank",
]
