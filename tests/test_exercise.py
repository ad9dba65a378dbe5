"""
Tests for the answer line and tile usage caps.
"""

import random
from collections import Counter

from core.corpus import build_item
from core.exercise import Exercise


def _exercise() -> Exercise:
    item = build_item("I know that I know.", "Я знаю, что я знаю.")
    return Exercise(
        item=item,
        bank_tiles=["знаю", "я", "мы", "что", "я", "знаю"],
        required_tiles=list(item.target_tokens),
    )


class TestChoose:

    def test_required_tile_capped_at_required_count(self):
        exercise = _exercise()
        assert exercise.choose("что")
        assert not exercise.choose("что")
        assert exercise.chosen == ["что"]

    def test_repeated_token_allowed_twice(self):
        exercise = _exercise()
        assert exercise.choose("я")
        assert exercise.choose("я")
        assert not exercise.choose("я")

    def test_distractor_is_unlimited(self):
        exercise = _exercise()
        for _ in range(3):
            assert exercise.choose("мы")
        assert exercise.chosen == ["мы", "мы", "мы"]

    def test_choose_by_index(self):
        exercise = _exercise()
        assert exercise.choose_index(3)
        assert exercise.chosen == ["что"]
        assert not exercise.choose_index(99)


class TestEditing:

    def test_undo_and_clear(self):
        exercise = _exercise()
        exercise.choose("я")
        exercise.choose("знаю")
        assert exercise.undo() == "знаю"
        assert exercise.chosen == ["я"]
        exercise.clear()
        assert exercise.chosen == []
        assert exercise.undo() is None

    def test_remove_at(self):
        exercise = _exercise()
        for tile in ["я", "знаю", "что"]:
            exercise.choose(tile)
        assert exercise.remove_at(1) == "знаю"
        assert exercise.chosen == ["я", "что"]
        assert exercise.remove_at(5) is None

    def test_submitted_answer_is_frozen(self):
        exercise = _exercise()
        exercise.choose("я")
        exercise.submitted = True
        assert not exercise.choose("знаю")
        assert exercise.undo() is None
        exercise.clear()
        assert exercise.chosen == ["я"]


class TestTileStates:

    def test_used_up_flags(self):
        exercise = _exercise()
        exercise.choose("что")
        exercise.choose("я")
        states = {tile.index: tile.used_up for tile in exercise.tile_states()}
        assert states[3] is True       # что: 1 of 1 used
        assert states[1] is False      # я: 1 of 2 used
        assert states[2] is False      # distractor


class TestForItem:

    def test_bank_holds_required_tiles(self):
        item = build_item("I don't know.", "Я не знаю.")
        exercise = Exercise.for_item(item, ["я", "не", "знаю", "мы", "ты"], random.Random(5))
        assert exercise.prompt == "I don't know."
        assert exercise.canonical_text == "Я не знаю."
        assert Counter(exercise.bank_tiles) == Counter(["я", "не", "знаю", "мы", "ты"])
