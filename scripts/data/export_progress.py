"""
Export per-sentence progress to CSV.

Usage:
    python -m scripts.data.export_progress [--out data/progress.csv]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

from core import store
from core.analytics import load_items_df
from core.clock import SystemClock

# Load environment
load_dotenv()

DEFAULT_OUT = Path("data/progress.csv")


def export_progress(out_path: Path) -> int:
    """
    Write one CSV row per sentence.

    Returns:
        Number of rows written
    """
    state = store.load_state_or_default(store.SqlStateStore())
    df = load_items_df(state, SystemClock())

    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    print(f"✓ Exported {len(df)} sentences to {out_path}")
    return len(df)


def main():
    parser = argparse.ArgumentParser(description="Export sentence progress to CSV")
    parser.add_argument(
        "--out",
        type=Path,
        default=DEFAULT_OUT,
        help=f"Output CSV path (default: {DEFAULT_OUT})"
    )
    args = parser.parse_args()
    export_progress(args.out)


if __name__ == "__main__":
    main()
