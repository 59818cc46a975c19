"""Supabase client singleton and the Supabase-backed record store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from src.api.middleware.error_handler import PersistenceError
from src.core.config import get_settings
from src.core.record_store import RecordKind, RecordStore

logger = logging.getLogger(__name__)

# Unique boolean column on the profile table that pins it to a single row
SINGLETON_COLUMN = "singleton"


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton for database operations.

    Uses the secret key for backend operations, which bypasses RLS
    at the PostgREST level. The service is single-tenant, so every
    request goes through this one client.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )


def _serialize(record: dict[str, Any]) -> dict[str, Any]:
    """Convert datetimes to ISO strings for the JSON request body."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in record.items()
    }


def _clean(row: dict[str, Any]) -> dict[str, Any]:
    """Drop storage-only columns from a returned row."""
    row.pop(SINGLETON_COLUMN, None)
    return row


@contextmanager
def _translate_errors(operation: str, kind: RecordKind) -> Iterator[None]:
    """Re-raise any client or network failure as PersistenceError."""
    try:
        yield
    except PersistenceError:
        raise
    except Exception as e:
        logger.error("Supabase %s on %s failed: %s", operation, kind.value, e, exc_info=True)
        raise PersistenceError() from e


class SupabaseRecordStore(RecordStore):
    """Record store backed by Supabase (PostgREST over PostgreSQL).

    Expected tables, with ``id`` a serial primary key and timestamp
    columns defaulting to ``now()``::

        profile(id, name, greeting, email, linkedin_url, whatsapp_number,
                about_description, created_at, updated_at,
                singleton boolean not null default true unique
                check (singleton))
        skills(id, name, category, created_at)
        projects(id, title, description, image_url, github_url, demo_url,
                 technologies json not null, created_at, updated_at)

    The ``singleton`` unique constraint is what keeps concurrent first
    writes from creating a second profile row.
    """

    def __init__(self, client: Client | None = None) -> None:
        """Initialize the store with a Supabase client."""
        self.client = client or get_supabase_client()

    def find(
        self,
        kind: RecordKind,
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        with _translate_errors("select", kind):
            query = self.client.table(kind.value).select("*")
            for column, value in (filters or {}).items():
                query = query.eq(column, value)
            query = query.order("id")
            if limit is not None:
                query = query.limit(limit)
            response = query.execute()

        return [_clean(row) for row in response.data or []]

    def insert(self, kind: RecordKind, record: dict[str, Any]) -> dict[str, Any]:
        with _translate_errors("insert", kind):
            response = self.client.table(kind.value).insert(_serialize(record)).execute()

        if not response.data:
            logger.error("Supabase insert on %s returned no row", kind.value)
            raise PersistenceError()
        return _clean(response.data[0])

    def update_by_id(
        self,
        kind: RecordKind,
        record_id: int,
        changes: dict[str, Any],
    ) -> dict[str, Any] | None:
        with _translate_errors("update", kind):
            response = (
                self.client.table(kind.value)
                .update(_serialize(changes))
                .eq("id", record_id)
                .execute()
            )

        return _clean(response.data[0]) if response.data else None

    def delete_by_id(self, kind: RecordKind, record_id: int) -> bool:
        with _translate_errors("delete", kind):
            response = (
                self.client.table(kind.value)
                .delete()
                .eq("id", record_id)
                .execute()
            )

        return bool(response.data)

    def get_or_init_singleton(
        self,
        kind: RecordKind,
        initial: dict[str, Any],
    ) -> tuple[dict[str, Any], bool]:
        existing = self.find(kind, limit=1)
        if existing:
            return existing[0], False

        # Conflicting inserts are dropped by the unique constraint, leaving data empty
        with _translate_errors("upsert", kind):
            response = (
                self.client.table(kind.value)
                .upsert(
                    {**_serialize(initial), SINGLETON_COLUMN: True},
                    on_conflict=SINGLETON_COLUMN,
                    ignore_duplicates=True,
                )
                .execute()
            )

        if response.data:
            return _clean(response.data[0]), True

        logger.info("Concurrent %s initialization detected, reading winner", kind.value)
        existing = self.find(kind, limit=1)
        if not existing:
            logger.error("Singleton %s row missing after conflicting insert", kind.value)
            raise PersistenceError()
        return existing[0], False
