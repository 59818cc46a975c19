"""Profile model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


class Profile(TypedDict):
    """Profile table row representation.

    The profile table holds at most one row: the portfolio owner.
    Maps directly to the database schema.
    """

    id: int
    name: str
    greeting: str
    email: str
    linkedin_url: str | None
    whatsapp_number: str | None
    about_description: str
    created_at: datetime
    updated_at: datetime


class ProfileChanges(TypedDict, total=False):
    """Fields that can be written on the profile.

    All fields are optional; a missing key means "leave unchanged".
    """

    name: str
    greeting: str
    email: str
    linkedin_url: str | None
    whatsapp_number: str | None
    about_description: str
    updated_at: datetime
