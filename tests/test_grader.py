"""
Tests for order-flexible grading.
"""

from core.grader import (
    NOTE_ADVERBS_MOVED,
    NOTE_DIFFERENT_ORDER,
    NOTE_EXACT,
    REASON_WRONG_COUNT,
    REASON_WRONG_WORDS,
    grade_order_flexible,
    required_adjacent_pairs,
)
from core.srs import Quality
from core.text import split_tokens


class TestFailures:
    """Wrong words or a wrong count never pass."""

    def test_wrong_count(self):
        result = grade_order_flexible(["я", "не"], ["я", "не", "знаю"])
        assert not result.ok
        assert result.reason == REASON_WRONG_COUNT
        assert result.quality is None
        assert result.schedule_quality == Quality.MISS

    def test_wrong_words(self):
        result = grade_order_flexible(["я", "не", "знал"], ["я", "не", "знаю"])
        assert not result.ok
        assert result.reason == REASON_WRONG_WORDS

    def test_duplicate_counts_matter(self):
        result = grade_order_flexible(["я", "я", "знаю"], ["я", "не", "знаю"])
        assert result.reason == REASON_WRONG_WORDS


class TestExactOrder:

    def test_canonical_order_is_perfect(self):
        canonical = split_tokens("Вообще-то, я не знаю, где Том живёт.")
        result = grade_order_flexible(list(canonical), canonical)
        assert result.ok
        assert result.quality == Quality.PERFECT
        assert result.note == NOTE_EXACT
        assert result.schedule_quality == Quality.PERFECT

    def test_empty_answer_for_empty_sentence(self):
        result = grade_order_flexible([], [])
        assert result.quality == Quality.PERFECT


class TestMovableAdverbs:

    def test_moved_adverb_is_good(self):
        canonical = split_tokens("У меня уже есть планы.")
        user = ["уже", "у", "меня", "есть", "планы"]
        result = grade_order_flexible(user, canonical)
        assert result.quality == Quality.GOOD
        assert result.note == NOTE_ADVERBS_MOVED

    def test_yo_spelling_of_adverb_is_recognized(self):
        canonical = split_tokens("Я ещё здесь.")
        result = grade_order_flexible(["еще", "я", "здесь"], canonical)
        assert result.quality == Quality.GOOD


class TestAdjacency:

    def test_split_negation_is_hard_with_hint(self):
        result = grade_order_flexible(["не", "я", "знаю"], ["я", "не", "знаю"])
        assert result.ok
        assert result.quality == Quality.HARD
        assert result.note == 'Correct, but keep "не знаю" together.'
        assert result.required_pair == ("не", "знаю")

    def test_reordered_with_pairs_intact(self):
        result = grade_order_flexible(["не", "знаю", "я"], ["я", "не", "знаю"])
        assert result.quality == Quality.HARD
        assert result.note == NOTE_DIFFERENT_ORDER

    def test_preposition_pair(self):
        canonical = ["я", "живу", "в", "москве"]
        result = grade_order_flexible(["в", "я", "живу", "москве"], canonical)
        assert result.required_pair == ("в", "москве")

    def test_fixed_expression(self):
        assert ("только", "что") in required_adjacent_pairs(["ты", "только", "что", "сказала"])

    def test_pairs_in_sentence_order(self):
        assert required_adjacent_pairs(["я", "не", "могу", "найти", "в", "доме"]) == [
            ("не", "могу"),
            ("в", "доме"),
        ]


class TestDeterminism:

    def test_same_input_same_result(self):
        canonical = ["я", "не", "знаю", "где", "том", "живет"]
        user = ["где", "том", "живет", "я", "не", "знаю"]
        assert grade_order_flexible(user, canonical) == grade_order_flexible(user, canonical)
