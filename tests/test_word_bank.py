"""
Tests for word bank construction.
"""

import random
from collections import Counter

from core.word_bank import build_word_bank, global_distractor_pool


class TestGlobalDistractorPool:

    def test_distinct_tokens_in_first_seen_order(self, state):
        pool = global_distractor_pool(state)
        assert pool[:3] == ["я", "не", "знаю"]
        assert len(pool) == len(set(pool))
        assert "подожди" in pool

    def test_empty_state(self):
        from core.schemas import TrainerState
        assert global_distractor_pool(TrainerState()) == []


class TestBuildWordBank:

    def test_contains_required_tiles_and_distractors(self):
        tiles = build_word_bank(["я", "не", "знаю"], ["я", "не", "знаю", "мы", "ты"], rng=random.Random(1))
        assert Counter(tiles) == Counter(["я", "не", "знаю", "мы", "ты"])

    def test_required_tokens_are_never_distractors(self):
        tiles = build_word_bank(["я", "я"], ["я", "ты"], rng=random.Random(1))
        assert Counter(tiles) == Counter(["я", "я", "ты"])

    def test_distractor_cap(self):
        pool = [f"слово{i}" for i in range(20)]
        tiles = build_word_bank(["я", "знаю"], pool, max_distractors=6, rng=random.Random(1))
        assert len(tiles) == 8
        assert len(set(tiles) - {"я", "знаю"}) == 6

    def test_zero_distractors(self):
        tiles = build_word_bank(["я", "знаю"], ["мы"], max_distractors=0, rng=random.Random(1))
        assert sorted(tiles) == ["знаю", "я"]

    def test_seeded_rng_is_reproducible(self):
        pool = [f"слово{i}" for i in range(20)]
        first = build_word_bank(["я", "не", "знаю"], pool, rng=random.Random(7))
        second = build_word_bank(["я", "не", "знаю"], pool, rng=random.Random(7))
        assert first == second
