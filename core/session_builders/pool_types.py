"""
Typed pool models for lesson building.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal

from core.schemas import Item


PoolStatus = Literal["due", "new", "near_due"]
POOL_ORDER: list[PoolStatus] = ["due", "new", "near_due"]


@dataclass
class PoolState:
    """
    Snapshot of the corpus split into scheduling pools.

    Each pool is an ordered list of items:
    - due: scheduled and past due, oldest due first
    - new: never graded, in import order
    - near_due: graded but not yet due, soonest first
    """
    due: list[Item] = field(default_factory=list)
    new: list[Item] = field(default_factory=list)
    near_due: list[Item] = field(default_factory=list)

    def as_dict(self) -> dict[str, list[Item]]:
        return {"due": self.due, "new": self.new, "near_due": self.near_due}

    def is_empty(self) -> bool:
        return not (self.due or self.new or self.near_due)
