"""
SRS Constants and Parameters

All tunable values of the sentence scheduler in one place.
"""

from enum import Enum


# ---- Review Quality ----

class Quality(str, Enum):
    """Outcome of a graded attempt, decided by the grader."""
    PERFECT = "perfect"   # Exact canonical order
    GOOD = "good"         # Only movable adverbs out of place
    HARD = "hard"         # Right words, different order
    MISS = "miss"         # Wrong words or wrong count


# ---- Ease Bounds ----

EASE_INITIAL = 2.2
EASE_MIN = 1.3
EASE_MAX = 3.0


# ---- Ease Adjustment by Quality ----

EASE_DELTA = {
    Quality.PERFECT: +0.03,
    Quality.GOOD: 0.0,
    Quality.HARD: -0.05,
    Quality.MISS: -0.20,
}


# ---- Interval Growth by Quality ----
# Multiplier applied to the previous interval on success.
# PERFECT additionally scales by ease / EASE_INITIAL.

INTERVAL_MULTIPLIER = {
    Quality.PERFECT: 2.6,
    Quality.GOOD: 2.2,
    Quality.HARD: 1.3,
}

FIRST_INTERVAL_DAYS = 1   # First success, and every miss
MIN_INTERVAL_DAYS = 1
