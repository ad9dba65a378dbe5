"""
Lesson settings requests used to build a lesson.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.session_builders.lesson_builder import (
    DEFAULT_LESSON_SIZE,
    DEFAULT_NEW_PER_LESSON,
    MAX_LESSON_SIZE,
    MIN_LESSON_SIZE,
)
from core.session_builders.pool_utils import clamp_int, coerce_int


@dataclass(frozen=True)
class LessonRequest:
    """
    User-chosen lesson settings.
    """
    lesson_size: int = DEFAULT_LESSON_SIZE
    new_per_lesson: int = DEFAULT_NEW_PER_LESSON


def normalize_lesson_request(request: object | None) -> LessonRequest:
    """
    Normalize request objects (or raw form values) to a valid LessonRequest.

    Non-numeric values fall back to the defaults; lesson_size is clamped to
    5-50 and new_per_lesson to 0-lesson_size.
    """
    if request is None:
        return default_lesson_request()

    lesson_size = clamp_int(
        coerce_int(getattr(request, "lesson_size", DEFAULT_LESSON_SIZE), DEFAULT_LESSON_SIZE),
        MIN_LESSON_SIZE,
        MAX_LESSON_SIZE,
    )
    new_per_lesson = clamp_int(
        coerce_int(getattr(request, "new_per_lesson", DEFAULT_NEW_PER_LESSON), DEFAULT_NEW_PER_LESSON),
        0,
        lesson_size,
    )
    return LessonRequest(lesson_size=lesson_size, new_per_lesson=new_per_lesson)


def default_lesson_request() -> LessonRequest:
    return LessonRequest()
