"""
Order-flexible grading of word-ordering answers.

Russian word order is free enough that a learner's reordering is often still
correct. The grader accepts any arrangement of the right words and uses a
small heuristic table to decide how good the order was:

- PERFECT: exact canonical order
- GOOD: identical once movable adverbs are ignored
- HARD: any other arrangement; the note names the first pair that should
  stay together (negation + word, preposition + word, fixed expressions)

Known limits (kept on purpose, this is not a grammar checker):
- A required pair only has to appear somewhere contiguous in the answer, not
  in a position consistent with the rest of the sentence.
- Movable adverbs are removed everywhere before comparing, so a repeated
  adverb can mask an ordering difference elsewhere.

The adverb table goes through the same normalization as the tokens, so
"ещё" is stored as "еще" and an answer spelled either way counts as movable.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

from core.srs.constants import Quality
from core.text import normalize_for_match


# ---- Heuristic tables ----

MOVABLE_ADVERBS = frozenset(
    normalize_for_match(word) for word in (
        "вообще-то", "действительно", "просто", "уже", "ещё",
        "всегда", "никогда", "сейчас", "потом", "теперь",
    )
)

NEGATION_PARTICLE = "не"

PREPOSITIONS = frozenset({
    "в", "на", "с", "со", "к", "ко", "из", "у", "по", "о", "об", "обо", "за", "для",
    "про", "при", "без", "над", "под", "перед", "после", "до", "от", "через", "между",
})

FIXED_EXPRESSIONS = frozenset({
    ("только", "что"),
})


# ---- Messages ----

REASON_WRONG_COUNT = "Wrong number of words."
REASON_WRONG_WORDS = "Wrong words used."
NOTE_EXACT = "Exact order."
NOTE_ADVERBS_MOVED = "Order ok (only adverbs moved)."
NOTE_DIFFERENT_ORDER = "Correct (different order accepted)."


@dataclass(frozen=True)
class GradeResult:
    """
    Outcome of grading one submission.

    A failed result (ok=False) carries a reason and no quality; the caller
    schedules it as a miss.
    """
    ok: bool
    quality: Optional[Quality] = None
    note: str = ""
    reason: str = ""
    required_pair: Optional[tuple[str, str]] = None

    @classmethod
    def fail(cls, reason: str) -> GradeResult:
        return cls(ok=False, reason=reason)

    @property
    def schedule_quality(self) -> Quality:
        """Quality to feed the scheduler (MISS for failures)."""
        return self.quality if self.ok else Quality.MISS


def required_adjacent_pairs(canonical: Sequence[str]) -> list[tuple[str, str]]:
    """
    Canonical bigrams that must stay together, in sentence order.
    """
    pairs = []
    for first, second in zip(canonical, canonical[1:]):
        if first == NEGATION_PARTICLE:
            pairs.append((first, second))
        if first in PREPOSITIONS:
            pairs.append((first, second))
        if (first, second) in FIXED_EXPRESSIONS:
            pairs.append((first, second))
    return pairs


def contains_bigram(tokens: Sequence[str], pair: tuple[str, str]) -> bool:
    """True if pair occurs as two contiguous tokens anywhere in tokens."""
    return any(
        (first, second) == pair
        for first, second in zip(tokens, tokens[1:])
    )


def grade_order_flexible(
    user_tiles: Sequence[str],
    canonical_tokens: Sequence[str]
) -> GradeResult:
    """
    Grade a submitted tile sequence against the canonical tokens.

    Pure function: no state is read or written.

    Args:
        user_tiles: Tiles in the order the user placed them
        canonical_tokens: Normalized target tokens

    Returns:
        GradeResult (ok=False with a reason, or ok=True with quality and note)
    """
    user = list(user_tiles)
    canon = list(canonical_tokens)

    if len(user) != len(canon):
        return GradeResult.fail(REASON_WRONG_COUNT)

    if Counter(user) != Counter(canon):
        return GradeResult.fail(REASON_WRONG_WORDS)

    if user == canon:
        return GradeResult(ok=True, quality=Quality.PERFECT, note=NOTE_EXACT)

    user_fixed = [t for t in user if t not in MOVABLE_ADVERBS]
    canon_fixed = [t for t in canon if t not in MOVABLE_ADVERBS]
    if user_fixed == canon_fixed:
        return GradeResult(ok=True, quality=Quality.GOOD, note=NOTE_ADVERBS_MOVED)

    for pair in required_adjacent_pairs(canon):
        if not contains_bigram(user, pair):
            return GradeResult(
                ok=True,
                quality=Quality.HARD,
                note=f'Correct, but keep "{pair[0]} {pair[1]}" together.',
                required_pair=pair,
            )

    return GradeResult(ok=True, quality=Quality.HARD, note=NOTE_DIFFERENT_ORDER)
