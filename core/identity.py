"""
Stable item identity.

An item id is a 32-bit FNV-1a hash of the sentence pair, so re-importing the
same corpus lands on the same ids and merges into existing progress.

32 bits is plenty for a personal corpus (a few thousand sentences); a
collision would merge two sentences' progress. That is an accepted risk.
"""

from __future__ import annotations


FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
ID_PREFIX = "s_"


def _utf16_code_units(text: str) -> list[int]:
    data = text.encode("utf-16-le")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def stable_id(source_text: str, target_text: str) -> str:
    """
    Derive the stable id of a sentence pair.

    Hashes UTF-16 code units so ids match the ones produced by earlier
    browser-based versions of the trainer.

    Args:
        source_text: English prompt
        target_text: Russian answer (raw, not normalized)

    Returns:
        Id such as "s_8f3a01c2"
    """
    h = FNV_OFFSET_BASIS
    for unit in _utf16_code_units(f"{source_text}||{target_text}"):
        h ^= unit
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return f"{ID_PREFIX}{h:x}"
