"""
Tests for normalization, tokenization and stable ids.
"""

import re

from core.identity import stable_id
from core.text import normalize_for_match, split_tokens


class TestNormalizeForMatch:
    """Answers are compared after lowercasing, folding and stripping."""

    def test_lowercases_and_folds_yo(self):
        assert normalize_for_match("Ещё Живёт") == "еще живет"

    def test_strips_punctuation(self):
        assert normalize_for_match('«Привет», он сказал: "да!"') == "привет он сказал да"

    def test_keeps_hyphens(self):
        assert normalize_for_match("Вообще-то, да.") == "вообще-то да"

    def test_collapses_whitespace(self):
        assert normalize_for_match("  я   не\tзнаю  ") == "я не знаю"


class TestSplitTokens:

    def test_sentence_tokens(self):
        assert split_tokens("Вообще-то, я не знаю, где Том живёт.") == [
            "вообще-то", "я", "не", "знаю", "где", "том", "живет"
        ]

    def test_empty_after_cleaning(self):
        assert split_tokens("?!...") == []
        assert split_tokens("") == []

    def test_ellipsis_is_not_stripped(self):
        assert split_tokens("Я согласна с твоим мнением о…")[-1] == "о…"


class TestStableId:
    """Ids are deterministic FNV-1a hashes of the sentence pair."""

    def test_format(self):
        assert re.fullmatch(r"s_[0-9a-f]{1,8}", stable_id("Hello", "Привет"))

    def test_deterministic(self):
        assert stable_id("Hold on", "Подожди.") == stable_id("Hold on", "Подожди.")

    def test_depends_on_both_sides(self):
        base = stable_id("Hold on", "Подожди.")
        assert stable_id("Hold on!", "Подожди.") != base
        assert stable_id("Hold on", "Подожди") != base

    def test_side_order_matters(self):
        assert stable_id("a", "b") != stable_id("b", "a")

    def test_hashes_the_raw_text(self):
        assert stable_id("x", "Ёлка") != stable_id("x", "елка")

    def test_handles_non_bmp_characters(self):
        assert stable_id("smile 😀", "улыбка").startswith("s_")
