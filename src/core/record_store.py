"""Abstract record store used by the services for all persistence."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import Any

from src.core.config import get_settings

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    """Record kinds held by the store. Values are the table names."""

    PROFILE = "profile"
    SKILL = "skills"
    PROJECT = "projects"


# Kinds whose rows carry an updated_at column
KINDS_WITH_UPDATED_AT = frozenset({RecordKind.PROFILE, RecordKind.PROJECT})


class RecordStore(ABC):
    """Create/read/update/delete primitives over the three record kinds.

    Implementations guarantee atomic single-record writes, assign ``id``
    on insert, and fill ``created_at`` / ``updated_at`` when the caller
    does not supply them. Every backend failure is raised as
    ``PersistenceError``.
    """

    @abstractmethod
    def find(
        self,
        kind: RecordKind,
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return rows matching all equality filters, in insertion order."""

    @abstractmethod
    def insert(self, kind: RecordKind, record: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return the stored row."""

    @abstractmethod
    def update_by_id(
        self,
        kind: RecordKind,
        record_id: int,
        changes: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Apply changes to one row. Returns None when the id does not exist."""

    @abstractmethod
    def delete_by_id(self, kind: RecordKind, record_id: int) -> bool:
        """Delete one row. Returns True if a row was found and removed."""

    @abstractmethod
    def get_or_init_singleton(
        self,
        kind: RecordKind,
        initial: dict[str, Any],
    ) -> tuple[dict[str, Any], bool]:
        """Return the only row of a kind, creating it from ``initial`` if absent.

        The check and the insert happen atomically with respect to other
        callers, so concurrent first writes still leave exactly one row.

        Returns:
            tuple: (row, created) where created is True if this call inserted it.
        """

    def check_connection(self) -> dict[str, Any]:
        """Check that the store is reachable.

        Returns:
            dict: Connection status with 'healthy' boolean and optional 'error' message.
        """
        try:
            self.find(RecordKind.PROFILE, limit=1)
            return {"healthy": True}
        except Exception as e:
            return {"healthy": False, "error": str(e)}


@lru_cache
def get_record_store() -> RecordStore:
    """Get the cached record store for the configured backend.

    Returns:
        RecordStore: Store instance selected by ``settings.store_backend``.

    Note:
        Call get_record_store.cache_clear() to start over with a fresh store.
    """
    settings = get_settings()

    if settings.store_backend == "memory":
        from src.core.memory_store import InMemoryRecordStore

        logger.info("Using in-memory record store")
        return InMemoryRecordStore()

    from src.core.supabase import SupabaseRecordStore

    logger.info("Using Supabase record store at %s", settings.supabase_url)
    return SupabaseRecordStore()
