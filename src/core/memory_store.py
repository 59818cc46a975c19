"""Thread-safe in-memory record store for local development and tests."""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any

from src.core.record_store import KINDS_WITH_UPDATED_AT, RecordKind, RecordStore

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """Dict-backed record store.

    Rows live in per-kind dicts keyed by id; dicts keep insertion order,
    which is also ascending id order. Rows are deep-copied on the way in
    and out so callers can never mutate stored state.
    """

    def __init__(self) -> None:
        self._tables: dict[RecordKind, dict[int, dict[str, Any]]] = {kind: {} for kind in RecordKind}
        self._next_ids: dict[RecordKind, int] = {kind: 1 for kind in RecordKind}
        self._lock = Lock()

    def find(
        self,
        kind: RecordKind,
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        filters = filters or {}
        with self._lock:
            rows = [
                row
                for row in self._tables[kind].values()
                if all(row.get(key) == value for key, value in filters.items())
            ]
            if limit is not None:
                rows = rows[:limit]
            return copy.deepcopy(rows)

    def insert(self, kind: RecordKind, record: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._insert_locked(kind, record))

    def update_by_id(
        self,
        kind: RecordKind,
        record_id: int,
        changes: dict[str, Any],
    ) -> dict[str, Any] | None:
        with self._lock:
            row = self._tables[kind].get(record_id)
            if row is None:
                return None
            # id is the key and never changes
            row.update(copy.deepcopy({k: v for k, v in changes.items() if k != "id"}))
            return copy.deepcopy(row)

    def delete_by_id(self, kind: RecordKind, record_id: int) -> bool:
        with self._lock:
            return self._tables[kind].pop(record_id, None) is not None

    def get_or_init_singleton(
        self,
        kind: RecordKind,
        initial: dict[str, Any],
    ) -> tuple[dict[str, Any], bool]:
        with self._lock:
            table = self._tables[kind]
            if table:
                return copy.deepcopy(next(iter(table.values()))), False

            row = self._insert_locked(kind, initial)
            logger.debug("Initialized singleton %s row with id %s", kind.value, row["id"])
            return copy.deepcopy(row), True

    def _insert_locked(self, kind: RecordKind, record: dict[str, Any]) -> dict[str, Any]:
        """Insert while holding the lock; returns the stored row itself."""
        now = datetime.now(timezone.utc)
        row = copy.deepcopy(record)

        row["id"] = self._next_ids[kind]
        self._next_ids[kind] += 1

        row.setdefault("created_at", now)
        if kind in KINDS_WITH_UPDATED_AT:
            row.setdefault("updated_at", row["created_at"])

        self._tables[kind][row["id"]] = row
        return row
