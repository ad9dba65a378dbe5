"""
Pool utilities for lesson building.

Small generic helpers: coercing settings, capping pools, walking them in priority order and
dropping repeats. The scheduling policy itself lives in lesson_builder.
"""

from __future__ import annotations

from typing import Callable, Hashable, TypeVar


T = TypeVar("T")


def coerce_int(value: object, default: int) -> int:
    """int(value) for ints, floats and numeric strings; default otherwise."""
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


def clamp_int(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def cap_pools(pools: dict[str, list[T]], caps: dict[str, int]) -> dict[str, list[T]]:
    """
    Truncate selected pools to a per-pool cap (pools without a cap are kept whole).
    """
    return {
        name: items[:max(0, caps[name])] if name in caps else list(items)
        for name, items in pools.items()
    }


def fill_in_order(
    pools: dict[str, list[T]],
    order: list[str],
    target_size: int
) -> list[T]:
    """
    Fill a lesson by walking pools in order until target_size is reached.
    """
    lesson: list[T] = []
    for name in order:
        for item in pools.get(name, []):
            if len(lesson) >= target_size:
                return lesson
            lesson.append(item)
    return lesson


def unique_by(items: list[T], key: Callable[[T], Hashable]) -> list[T]:
    """Keep the first occurrence of each key, preserving order."""
    seen: dict[Hashable, T] = {}
    for item in items:
        seen.setdefault(key(item), item)
    return list(seen.values())
