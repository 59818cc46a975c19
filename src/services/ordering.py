"""Deterministic ordering for record listings."""

from datetime import datetime, timezone
from typing import Any


def as_datetime(value: datetime | str) -> datetime:
    """Parse a stored timestamp into an aware datetime.

    PostgREST returns ISO strings (naive for ``timestamp`` columns); the
    memory store keeps datetimes. Naive values are taken to be UTC.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def newest_first(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort rows by created_at descending.

    Rows with identical timestamps fall back to id descending, so records
    created back to back still list in reverse creation order.
    """
    return sorted(
        rows,
        key=lambda row: (as_datetime(row["created_at"]), row["id"]),
        reverse=True,
    )
