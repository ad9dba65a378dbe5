"""
Storage interface for the trainer state.

The core only needs "load the document" and "save the document"; backends
decide where it lives.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from core.schemas import TrainerState, default_state

logger = logging.getLogger(__name__)


class StateStore(ABC):
    """Whole-document persistence for a TrainerState."""

    @abstractmethod
    def load(self) -> Optional[TrainerState]:
        """
        Load the saved state.

        Returns:
            The state, or None if nothing has been saved yet

        Raises:
            ValueError (including pydantic ValidationError) for a corrupt document
        """
        pass

    @abstractmethod
    def save(self, state: TrainerState) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete the saved document."""
        pass


class MemoryStateStore(StateStore):
    """
    In-process store holding the serialized document.

    Saving serializes, so later mutations of the live state are not visible
    until the next save.
    """

    def __init__(self, payload: Optional[str] = None):
        self.payload = payload
        self.save_count = 0

    def load(self) -> Optional[TrainerState]:
        if self.payload is None:
            return None
        return TrainerState.model_validate_json(self.payload)

    def save(self, state: TrainerState) -> None:
        self.payload = state.model_dump_json()
        self.save_count += 1

    def clear(self) -> None:
        self.payload = None


def load_state_or_default(store: StateStore) -> TrainerState:
    """
    Load the saved state, falling back to a fresh one.

    A missing document is normal on first run; a corrupt one is logged and
    replaced (the broken document stays in the store until the next save).
    """
    try:
        state = store.load()
    except ValueError as exc:
        logger.warning("Saved trainer state is unreadable, starting fresh: %s", exc)
        return default_state()

    if state is None:
        return default_state()
    return state
