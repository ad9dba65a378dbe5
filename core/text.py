"""
Text normalization for Russian answers.

Answers are compared token-by-token, so every target sentence is reduced to
a canonical token sequence once, at import time.
"""

from __future__ import annotations

import re


# Punctuation removed before tokenizing (quotes include typographic variants)
PUNCTUATION_RE = re.compile(r"[.,!?;:()\"“”«»]")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_for_match(text: str) -> str:
    """
    Normalize a Russian sentence for matching.

    Lowercases, folds ё to е, strips punctuation and collapses whitespace.
    """
    text = (text or "").lower().replace("ё", "е")
    text = PUNCTUATION_RE.sub("", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def split_tokens(raw_text: str) -> list[str]:
    """Split a sentence into normalized tokens (empty list for blank input)."""
    cleaned = normalize_for_match(raw_text)
    if not cleaned:
        return []
    return cleaned.split(" ")
