"""Project model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


class Project(TypedDict):
    """Projects table row representation.

    ``technologies`` is stored as a JSON array; element order is significant.
    """

    id: int
    title: str
    description: str
    image_url: str | None
    github_url: str | None
    demo_url: str | None
    technologies: list[str]
    created_at: datetime
    updated_at: datetime


class ProjectChanges(TypedDict, total=False):
    """Data that can be updated on a project.

    ``created_at`` is deliberately absent: it never changes after insert.
    """

    title: str
    description: str
    image_url: str | None
    github_url: str | None
    demo_url: str | None
    technologies: list[str]
    updated_at: datetime
