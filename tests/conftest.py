"""
Shared fixtures for the sentence trainer tests.
"""

import random
from datetime import datetime, timezone

import pytest

from core.clock import FixedClock
from core.corpus import build_item, import_text
from core.schemas import Item, Progress, TrainerState
from core.store import MemoryStateStore


START = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)

SMALL_CORPUS = (
    "1\tI don't know. = Я не знаю.\n"
    "2\tI already have plans. = У меня уже есть планы.\n"
    "3\tI love that song. = Я люблю эту песню.\n"
    "4\tHold on = Подожди.\n"
)


def make_item(index: int, **progress) -> Item:
    """Item with distinct tokens and the given progress fields."""
    item = build_item(f"Sentence {index}", f"Слово{index} тест")
    item.progress = Progress(**progress)
    return item


def make_state(items: list[Item]) -> TrainerState:
    state = TrainerState()
    for item in items:
        state.items[item.id] = item
        state.order.append(item.id)
    return state


def answer_correctly(exercise) -> None:
    """Place the canonical tokens in order."""
    for token in exercise.item.target_tokens:
        assert exercise.choose(token)


@pytest.fixture
def clock():
    return FixedClock(START)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(clock):
    """Trainer state with the four-sentence corpus imported."""
    trainer_state = TrainerState()
    import_text(trainer_state, SMALL_CORPUS, clock.now_ms())
    return trainer_state


@pytest.fixture
def memory_store():
    return MemoryStateStore()


@pytest.fixture
def sqlite_url(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite file."""
    url = f"sqlite:///{tmp_path / 'trainer.sqlite'}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.delenv("TEST_MODE", raising=False)
    monkeypatch.delenv("TRAINER_STATE_KEY", raising=False)
    return url
