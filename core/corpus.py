"""
Corpus ingestion: parse "English = Russian" lines and merge them by id.

Re-importing is idempotent. An existing item keeps its progress; only its
texts and tokens are refreshed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from core.identity import stable_id
from core.schemas import Item, Progress, TrainerState
from core.text import split_tokens

logger = logging.getLogger(__name__)

LEADING_NUMBER_RE = re.compile(r"^\d+\s+")
WHITESPACE_RE = re.compile(r"\s+")
NBSP = "\u00a0"


@dataclass(frozen=True)
class ImportSummary:
    """Result of an import, reported to the caller."""
    ok: bool
    imported: int
    skipped: int
    added: int = 0
    updated: int = 0

    @property
    def message(self) -> str:
        if not self.ok:
            return "No valid lines found."
        return f"Imported {self.imported} lines."


def parse_line(line: str) -> Optional[tuple[str, str]]:
    """
    Parse one corpus line of the form "[number] English = Russian".

    The first "=" separates the sides; a leading line number is dropped.

    Returns:
        (source_text, target_text), or None for blank/malformed lines
    """
    text = (line or "").strip()
    if not text:
        return None
    text = WHITESPACE_RE.sub(" ", text.replace(NBSP, " ")).strip()

    source, sep, target = text.partition("=")
    if not sep:
        return None

    source = LEADING_NUMBER_RE.sub("", source.strip()).strip()
    target = target.strip()
    if not source or not target:
        return None
    return source, target


def build_item(source_text: str, target_text: str) -> Item:
    """Create a fresh item (new progress) for a sentence pair."""
    return Item(
        id=stable_id(source_text, target_text),
        source_text=source_text,
        target_text=target_text,
        target_tokens=split_tokens(target_text),
        progress=Progress(),
    )


def merge_item(state: TrainerState, item: Item) -> bool:
    """
    Add an item or refresh an existing one with the same id.

    Returns:
        True if the item was new to the state
    """
    existing = state.items.get(item.id)
    if existing is None:
        state.items[item.id] = item
        if item.id not in state.order:
            state.order.append(item.id)
        return True

    existing.source_text = item.source_text
    existing.target_text = item.target_text
    existing.target_tokens = item.target_tokens
    if item.id not in state.order:
        state.order.append(item.id)
    return False


def import_pairs(
    state: TrainerState,
    pairs: Iterable[tuple[str, str]],
    now_ms: int
) -> ImportSummary:
    """
    Merge already-parsed (source, target) pairs into the state.

    Args:
        state: Trainer state to modify in place
        pairs: Sentence pairs
        now_ms: Import time (epoch ms), stored as meta.imported_at

    Returns:
        ImportSummary with counts of imported, added and updated items
    """
    items = [build_item(source, target) for source, target in pairs]
    if not items:
        return ImportSummary(ok=False, imported=0, skipped=0)

    added = 0
    for item in items:
        if merge_item(state, item):
            added += 1

    state.meta.imported_at = now_ms
    logger.info("Imported %d pairs (%d new, %d refreshed)", len(items), added, len(items) - added)
    return ImportSummary(
        ok=True,
        imported=len(items),
        skipped=0,
        added=added,
        updated=len(items) - added,
    )


def import_text(state: TrainerState, text: str, now_ms: int) -> ImportSummary:
    """
    Parse a multi-line corpus and merge it into the state.

    Blank lines are ignored; other lines that do not parse are counted as
    skipped.
    """
    pairs = []
    skipped = 0
    for line in (text or "").split("\n"):
        parsed = parse_line(line)
        if parsed is None:
            if line.strip():
                skipped += 1
            continue
        pairs.append(parsed)

    if skipped:
        logger.info("Skipped %d malformed corpus lines", skipped)

    summary = import_pairs(state, pairs, now_ms)
    return ImportSummary(
        ok=summary.ok,
        imported=summary.imported,
        skipped=skipped,
        added=summary.added,
        updated=summary.updated,
    )
