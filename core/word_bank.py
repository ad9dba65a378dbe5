"""
Word bank construction.

The word bank is the shuffled set of tiles offered for one exercise: every
answer token plus a handful of distractors drawn from the rest of the corpus.
"""

from __future__ import annotations

import random
from typing import Optional

from core.schemas import TrainerState


MAX_DISTRACTORS = 6


def global_distractor_pool(state: TrainerState) -> list[str]:
    """
    All distinct tokens across the corpus, in first-seen order.
    """
    seen: dict[str, None] = {}
    for item in state.ordered_items():
        for token in item.target_tokens:
            if token:
                seen.setdefault(token, None)
    return list(seen)


def build_word_bank(
    required_tiles: list[str],
    distractor_pool: list[str],
    max_distractors: int = MAX_DISTRACTORS,
    rng: Optional[random.Random] = None
) -> list[str]:
    """
    Build the shuffled tile set for one exercise.

    Candidates are pool tokens not in set(required_tiles): a token equal to
    any required tile is never a distractor, however many times it is
    required. Distractors are sampled without replacement.

    Args:
        required_tiles: Canonical answer tokens (duplicates kept)
        distractor_pool: Corpus-wide token pool
        max_distractors: Upper bound on distractors
        rng: Random source for sampling and shuffling

    Returns:
        Required tiles plus distractors, shuffled
    """
    rng = rng or random.Random()
    required_set = set(required_tiles)
    candidates = list(dict.fromkeys(t for t in distractor_pool if t not in required_set))

    sample_size = min(max(0, max_distractors), len(candidates))
    distractors = rng.sample(candidates, sample_size)

    tiles = list(required_tiles) + distractors
    rng.shuffle(tiles)
    return tiles
