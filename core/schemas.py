"""
Pydantic models for the sentence trainer state.

The whole trainer state is persisted as one JSON document:
{items: {id: Item}, order: [id, ...], meta: VocabularyMetadata}.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# Configuration
DEFAULT_EASE = 2.2
DEFAULT_DAILY_GOAL_XP = 80
DEFAULT_SESSION_GOAL_XP = 40
LOWEST_LEVEL_NAME = "A0"


class MasteryState(str, Enum):
    """Derived classification of an item (never stored)."""
    NEW = "new"
    SEEN = "seen"
    LEARNED = "learned"
    MASTERED = "mastered"


# ---- Per-item scheduling ----

class Progress(BaseModel):
    """Scheduling record for one sentence."""
    ease: float = Field(default=DEFAULT_EASE, ge=1.3, le=3.0)
    interval_days: int = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0, description="Total graded attempts")
    lapses: int = Field(default=0, ge=0, description="Failed attempts")
    due_at: int = Field(default=0, ge=0, description="Epoch ms, 0 = not scheduled")
    last_seen_at: int = Field(default=0, ge=0, description="Epoch ms of last review")

    correct_streak: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)
    last_attempt_was_correct: bool = False


class Item(BaseModel):
    """
    A bilingual sentence pair with its progress.

    Content (texts, tokens) is refreshed on re-import; progress is not.
    """
    id: str
    source_text: str = Field(..., description="English prompt")
    target_text: str = Field(..., description="Russian answer as imported")
    target_tokens: list[str] = Field(default_factory=list, description="Normalized answer tokens")
    progress: Progress = Field(default_factory=Progress)


# ---- Global metadata ----

class VocabularyMetadata(BaseModel):
    """Motivation counters shared by the whole corpus."""
    imported_at: int = 0

    # motivation
    streak: int = Field(default=0, ge=0)
    last_study_date: Optional[date] = None
    daily_xp: int = Field(default=0, ge=0)
    daily_xp_date: Optional[date] = None
    daily_goal_xp: int = Field(default=DEFAULT_DAILY_GOAL_XP, ge=0, description="0 disables the goal")
    total_xp: int = Field(default=0, ge=0)
    last_level: str = LOWEST_LEVEL_NAME

    # session
    session_xp: int = Field(default=0, ge=0)
    session_goal_xp: int = Field(default=DEFAULT_SESSION_GOAL_XP, ge=0)


class TrainerState(BaseModel):
    """The single persisted document."""
    items: dict[str, Item] = Field(default_factory=dict)
    order: list[str] = Field(default_factory=list)
    meta: VocabularyMetadata = Field(default_factory=VocabularyMetadata)

    def ordered_items(self) -> list[Item]:
        """Items in import order, skipping dangling ids."""
        return [self.items[item_id] for item_id in self.order if item_id in self.items]


def default_state() -> TrainerState:
    """Fresh, empty trainer state."""
    return TrainerState()
