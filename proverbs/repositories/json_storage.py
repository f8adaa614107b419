"""
JSON-file persistence adapter for proverb records.

The whole collection is the unit of read and write: callers read everything,
mutate the list in memory and hand the full list back to write_all().
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator
import json
import logging
import os
import tempfile
import threading

from proverbs.domain.records import ProverbRecord, seed_records

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for the record store."""


class StoreReadError(StoreError):
    """Raised when the backing file exists but cannot be read or parsed."""


class StoreWriteError(StoreError):
    """Raised when the backing file cannot be written."""


class ProverbStore:
    """Reads and rewrites the JSON file holding every proverb record."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the single-writer lock across a read-modify-write cycle."""
        with self._lock:
            yield

    def read_all(self) -> list[ProverbRecord]:
        with self._lock:
            if not self.path.exists():
                self.write_all([])
                return []
            try:
                raw = self.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise StoreReadError(f"Could not read {self.path}: {exc}") from exc
            if not raw.strip():
                return []
            try:
                payload = json.loads(raw)
            except (json.JSONDecodeError, RecursionError) as exc:
                raise StoreReadError(f"Malformed JSON in {self.path}: {exc}") from exc
            if not isinstance(payload, list):
                raise StoreReadError(f"Expected a list of proverbs in {self.path}")
            try:
                records = [ProverbRecord.from_dict(item) for item in payload]
            except (KeyError, TypeError, ValueError) as exc:
                raise StoreReadError(f"Malformed proverb entry in {self.path}: {exc!r}") from exc
            if len({r.id for r in records}) != len(records):
                raise StoreReadError(f"Duplicate proverb ids in {self.path}")
            return records

    def write_all(self, records: Iterable[ProverbRecord]) -> None:
        data = [record.to_dict() for record in records]
        text = json.dumps(data, ensure_ascii=False, indent=2)
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as handle:
                        handle.write(text)
                    os.replace(tmp_name, self.path)
                except BaseException:
                    if os.path.exists(tmp_name):
                        os.unlink(tmp_name)
                    raise
            except OSError as exc:
                raise StoreWriteError(f"Could not write {self.path}: {exc}") from exc

    def initialize(self) -> int:
        """Seed the example proverbs when the store is empty. Returns how many were written."""
        with self._lock:
            if self.read_all():
                return 0
            seeds = seed_records()
            self.write_all(seeds)
        logger.info("Initialized %s with %d sample proverbs", self.path, len(seeds))
        return len(seeds)
