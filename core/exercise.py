"""
One word-ordering exercise: the prompt, the tile bank and the answer line.

A required tile can be placed at most as many times as the answer needs it;
distractor tiles are never capped. Once submitted, the answer is frozen.
"""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from core.schemas import Item
from core.word_bank import MAX_DISTRACTORS, build_word_bank


@dataclass(frozen=True)
class TileState:
    """A bank tile as the UI should draw it."""
    index: int
    text: str
    used_up: bool


@dataclass
class Exercise:
    item: Item
    bank_tiles: list[str]
    required_tiles: list[str]
    chosen: list[str] = field(default_factory=list)
    submitted: bool = False

    @classmethod
    def for_item(
        cls,
        item: Item,
        distractor_pool: list[str],
        rng: Optional[random.Random] = None,
        max_distractors: int = MAX_DISTRACTORS
    ) -> Exercise:
        """Prepare a fresh exercise with a shuffled word bank."""
        required = list(item.target_tokens)
        bank = build_word_bank(required, distractor_pool, max_distractors, rng)
        return cls(item=item, bank_tiles=bank, required_tiles=required)

    @property
    def prompt(self) -> str:
        return self.item.source_text

    @property
    def canonical_text(self) -> str:
        return self.item.target_text

    def _required_counts(self) -> Counter:
        return Counter(self.required_tiles)

    def can_choose(self, tile: str) -> bool:
        if self.submitted:
            return False
        required = self._required_counts().get(tile, 0)
        if required == 0:
            return True
        return self.chosen.count(tile) < required

    def choose(self, tile: str) -> bool:
        """
        Append a tile to the answer line.

        Returns:
            True if the tile was placed
        """
        if not self.can_choose(tile):
            return False
        self.chosen.append(tile)
        return True

    def choose_index(self, bank_index: int) -> bool:
        """Place the bank tile at bank_index (out of range is ignored)."""
        if not 0 <= bank_index < len(self.bank_tiles):
            return False
        return self.choose(self.bank_tiles[bank_index])

    def remove_at(self, index: int) -> Optional[str]:
        """Take the tile at index off the answer line."""
        if self.submitted or not 0 <= index < len(self.chosen):
            return None
        return self.chosen.pop(index)

    def undo(self) -> Optional[str]:
        if self.submitted or not self.chosen:
            return None
        return self.chosen.pop()

    def clear(self) -> None:
        if not self.submitted:
            self.chosen = []

    def tile_states(self) -> list[TileState]:
        """Bank tiles with a used-up flag for required tiles already placed."""
        required = self._required_counts()
        used = Counter(self.chosen)
        return [
            TileState(
                index=i,
                text=tile,
                used_up=required.get(tile, 0) > 0 and used.get(tile, 0) >= required[tile],
            )
            for i, tile in enumerate(self.bank_tiles)
        ]
