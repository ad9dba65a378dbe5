"""
Lesson Builder - Three-Pool Lesson Creation

Creates lessons from three distinct pools:
1. Due pool: sentences whose due time has passed (most overdue first)
2. New pool: sentences never graded (import order)
3. Near-due pool: graded sentences not yet due (soonest first)

Lesson Logic:
- Fill due up to lesson_size - new_per_lesson
- Top up with new, at most new_per_lesson
- Top up with near-due until the lesson is full
- Shuffle
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from core.schemas import Item, TrainerState
from core.session_builders.pool_types import POOL_ORDER, PoolState
from core.session_builders.pool_utils import cap_pools, clamp_int, coerce_int, fill_in_order, unique_by

logger = logging.getLogger(__name__)

# ---- Lesson Configuration ----
MIN_LESSON_SIZE = 5
MAX_LESSON_SIZE = 50
DEFAULT_LESSON_SIZE = 20
DEFAULT_NEW_PER_LESSON = 10


def build_lesson_pool_state(state: TrainerState, now_ms: int) -> PoolState:
    """
    Split the corpus into due/new/near-due pools at a point in time.

    An item that was graded and is overdue is "due"; one that was graded and
    is still in the future is "near_due"; one never graded is "new".
    """
    items = state.ordered_items()

    due = [
        item for item in items
        if item.progress.due_at > 0 and item.progress.due_at <= now_ms
    ]
    due.sort(key=lambda item: item.progress.due_at)

    new = [item for item in items if item.progress.reps == 0]

    near_due = [
        item for item in items
        if item.progress.reps > 0 and item.progress.due_at > now_ms
    ]
    near_due.sort(key=lambda item: item.progress.due_at)

    return PoolState(due=due, new=new, near_due=near_due)


def create_lesson(
    pool_state: PoolState,
    lesson_size: int,
    new_per_lesson: int,
    rng: Optional[random.Random] = None
) -> list[Item]:
    """
    Create a lesson using three-pool logic.

    Args:
        pool_state: Pools computed by build_lesson_pool_state
        lesson_size: Requested lesson length (coerced to int, clamped to 5-50)
        new_per_lesson: Maximum new sentences (coerced to int, clamped to
            0-lesson_size)
        rng: Random source used for the final shuffle

    Returns:
        Shuffled list of at most lesson_size distinct items (may be empty)
    """
    rng = rng or random.Random()
    lesson_size = clamp_int(
        coerce_int(lesson_size, DEFAULT_LESSON_SIZE), MIN_LESSON_SIZE, MAX_LESSON_SIZE
    )
    new_per_lesson = clamp_int(
        coerce_int(new_per_lesson, DEFAULT_NEW_PER_LESSON), 0, lesson_size
    )

    if pool_state.is_empty():
        logger.debug("Lesson built: no eligible items")
        return []

    pools = cap_pools(
        pool_state.as_dict(),
        {"due": lesson_size - new_per_lesson, "new": new_per_lesson},
    )
    chosen = fill_in_order(pools, POOL_ORDER, lesson_size)

    # Pools are disjoint, but a hand-edited order list may repeat an id
    lesson = unique_by(chosen, lambda item: item.id)

    rng.shuffle(lesson)
    lesson = lesson[:lesson_size]

    logger.debug(
        "Lesson built: %d items (due pool %d, new pool %d, near-due pool %d)",
        len(lesson), len(pool_state.due), len(pool_state.new), len(pool_state.near_due)
    )
    return lesson


def choose_lesson_items(
    state: TrainerState,
    lesson_size: int,
    new_per_lesson: int,
    now_ms: int,
    rng: Optional[random.Random] = None
) -> list[Item]:
    """Build pools and a lesson in one call."""
    pool_state = build_lesson_pool_state(state, now_ms)
    return create_lesson(pool_state, lesson_size, new_per_lesson, rng)
