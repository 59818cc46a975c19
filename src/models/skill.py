"""Skill model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


class Skill(TypedDict):
    """Skills table row representation.

    Skills are append-only; there is no update row type.
    """

    id: int
    name: str
    category: str | None
    created_at: datetime
