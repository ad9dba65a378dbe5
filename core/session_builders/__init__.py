"""Lesson builder modules."""

from core.session_builders.lesson_builder import (
    build_lesson_pool_state,
    choose_lesson_items,
    create_lesson,
)
from core.session_builders.pool_types import PoolState

__all__ = [
    "build_lesson_pool_state",
    "choose_lesson_items",
    "create_lesson",
    "PoolState",
]
