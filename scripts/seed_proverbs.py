#!/usr/bin/env python3
"""
Initialize the proverbs JSON store with the sample proverbs.

Usage:
  python scripts/seed_proverbs.py [--file data/proverbs.json] [--reset]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from proverbs.core.config import get_settings
from proverbs.domain.records import seed_records
from proverbs.repositories.json_storage import ProverbStore


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Seed the proverbs JSON store")
    ap.add_argument("--file", help="Path to the JSON file (default: PROVERBS_FILE or data/proverbs.json)")
    ap.add_argument("--reset", action="store_true", help="Overwrite existing proverbs with the sample set")
    args = ap.parse_args(argv)

    path = Path(args.file) if args.file else get_settings().proverbs_file
    store = ProverbStore(path)
    if args.reset:
        seeds = seed_records()
        store.write_all(seeds)
        print(f"OK: {path} reset with {len(seeds)} proverbs")
        return 0

    seeded = store.initialize()
    if seeded:
        print(f"OK: {path} seeded with {seeded} proverbs")
    else:
        print(f"OK: {path} already has {len(store.read_all())} proverbs, nothing to do")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
