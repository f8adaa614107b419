"""Proverb use cases (list, lookup, create, edit, delete, random pick)."""

from __future__ import annotations

import logging
import random
from typing import Optional

from proverbs.domain.records import ProverbDraft, ProverbRecord, find_index, next_id
from proverbs.repositories.json_storage import ProverbStore, StoreError, StoreWriteError

logger = logging.getLogger(__name__)

NOT_FOUND = "not_found"
INVALID = "invalid"
EMPTY = "empty"
READ_FAILED = "read_failed"
WRITE_FAILED = "write_failed"


class ProverbService:
    """
    Orchestrates the JSON store for the HTTP handlers.

    Every method returns (value, reason); reason is None on success or one of
    the module-level constants above. Store exceptions never escape.
    """

    def __init__(self, store: ProverbStore, rng: Optional[random.Random] = None) -> None:
        self.store = store
        self.rng = rng or random.Random()

    def list_proverbs(self) -> tuple[list[ProverbRecord], Optional[str]]:
        try:
            return self.store.read_all(), None
        except StoreError:
            logger.exception("Error reading proverbs")
            return [], READ_FAILED

    def get_proverb(self, proverb_id: int | None) -> tuple[Optional[ProverbRecord], Optional[str]]:
        try:
            records = self.store.read_all()
        except StoreError:
            logger.exception("Error fetching proverb %s", proverb_id)
            return None, READ_FAILED
        idx = find_index(records, proverb_id)
        if idx < 0:
            return None, NOT_FOUND
        return records[idx], None

    def create_proverb(self, draft: ProverbDraft):
        """
        Append a new proverb with id max+1.
        On INVALID the value is the list of missing field names.
        """
        missing = draft.missing_fields()
        if missing:
            return missing, INVALID
        with self.store.locked():
            try:
                records = self.store.read_all()
            except StoreError:
                logger.exception("Error adding proverb")
                return None, READ_FAILED
            record = draft.to_record(next_id(records))
            records.append(record)
            try:
                self.store.write_all(records)
            except StoreWriteError:
                logger.exception("Error adding proverb")
                return None, WRITE_FAILED
        logger.info("Created proverb %s", record.id)
        return record, None

    def update_proverb(self, proverb_id: int | None, draft: ProverbDraft) -> tuple[Optional[ProverbRecord], Optional[str]]:
        """Replace every field of an existing proverb except its id."""
        with self.store.locked():
            try:
                records = self.store.read_all()
            except StoreError:
                logger.exception("Error updating proverb %s", proverb_id)
                return None, READ_FAILED
            idx = find_index(records, proverb_id)
            if idx < 0:
                return None, NOT_FOUND
            updated = draft.to_record(records[idx].id)
            records[idx] = updated
            try:
                self.store.write_all(records)
            except StoreWriteError:
                logger.exception("Error updating proverb %s", proverb_id)
                return None, WRITE_FAILED
        logger.info("Updated proverb %s", updated.id)
        return updated, None

    def delete_proverb(self, proverb_id: int | None) -> tuple[Optional[ProverbRecord], Optional[str]]:
        with self.store.locked():
            try:
                records = self.store.read_all()
            except StoreError:
                logger.exception("Error deleting proverb %s", proverb_id)
                return None, READ_FAILED
            idx = find_index(records, proverb_id)
            if idx < 0:
                return None, NOT_FOUND
            removed = records[idx]
            remaining = [r for r in records if r.id != removed.id]
            try:
                self.store.write_all(remaining)
            except StoreWriteError:
                logger.exception("Error deleting proverb %s", proverb_id)
                return None, WRITE_FAILED
        logger.info("Deleted proverb %s", removed.id)
        return removed, None

    def random_proverb(self) -> tuple[Optional[ProverbRecord], Optional[str]]:
        try:
            records = self.store.read_all()
        except StoreError:
            logger.exception("Error fetching random proverb")
            return None, READ_FAILED
        if not records:
            return None, EMPTY
        return self.rng.choice(records), None
