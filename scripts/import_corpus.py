"""
Import sentence pairs into the trainer database.

Accepts either a text file with one "English = Russian" pair per line (a
leading line number is ignored) or a CSV file with `english` and `russian`
columns. Re-importing is safe: existing sentences keep their progress.

Usage:
    python -m scripts.import_corpus data/sentences.txt
    python -m scripts.import_corpus data/sentences.csv
    python -m scripts.import_corpus --sample [--dry-run]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pandas as pd
from dotenv import load_dotenv
from sqlalchemy.engine import make_url

from core import store
from core.clock import SystemClock
from core.corpus import ImportSummary, import_pairs, import_text
from core.sample_corpus import SAMPLE_CORPUS

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

CSV_SOURCE_COLUMN = "english"
CSV_TARGET_COLUMN = "russian"


def read_csv_pairs(path: Path) -> tuple[list[tuple[str, str]], int]:
    """
    Read (english, russian) pairs from a CSV file.

    Returns:
        (pairs, skipped) where skipped counts rows with an empty side
    """
    df = pd.read_csv(path, dtype=str).fillna("")
    missing = {CSV_SOURCE_COLUMN, CSV_TARGET_COLUMN} - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing columns: {sorted(missing)}")

    df[CSV_SOURCE_COLUMN] = df[CSV_SOURCE_COLUMN].str.strip()
    df[CSV_TARGET_COLUMN] = df[CSV_TARGET_COLUMN].str.strip()
    valid = df[(df[CSV_SOURCE_COLUMN] != "") & (df[CSV_TARGET_COLUMN] != "")]
    pairs = list(zip(valid[CSV_SOURCE_COLUMN], valid[CSV_TARGET_COLUMN]))
    return pairs, len(df) - len(valid)


def import_corpus(path: Optional[Path], use_sample: bool = False, dry_run: bool = False) -> ImportSummary:
    """
    Import a corpus file (or the built-in sample) and save the state.
    """
    backend = store.SqlStateStore()
    state = store.load_state_or_default(backend)
    before = len(state.items)
    now_ms = SystemClock().now_ms()

    if use_sample:
        summary = import_text(state, SAMPLE_CORPUS, now_ms)
    elif path is not None and path.suffix.lower() == ".csv":
        pairs, skipped = read_csv_pairs(path)
        summary = import_pairs(state, pairs, now_ms)
        summary = ImportSummary(
            ok=summary.ok,
            imported=summary.imported,
            skipped=skipped,
            added=summary.added,
            updated=summary.updated,
        )
    elif path is not None:
        summary = import_text(state, path.read_text(encoding="utf-8"), now_ms)
    else:
        raise ValueError("Give a corpus path or --sample")

    print(f"\n{summary.message}")
    print(f"  New sentences:       {summary.added}")
    print(f"  Refreshed sentences: {summary.updated}")
    print(f"  Skipped lines:       {summary.skipped}")
    print(f"  Corpus size:         {before} → {len(state.items)}")

    if dry_run:
        print("\n⚠ DRY RUN MODE - No changes were saved")
    elif summary.ok:
        backend.save(state)
        print(f"\n✓ Saved to {make_url(store.get_database_url())}")
    return summary


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(
        description="Import English = Russian sentence pairs into the trainer"
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Text file (one pair per line) or CSV with english/russian columns"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Import the built-in 40-sentence sample instead of a file"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and report, but don't save"
    )

    args = parser.parse_args()
    if args.path is None and not args.sample:
        parser.error("a corpus path or --sample is required")

    import_corpus(args.path, use_sample=args.sample, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
