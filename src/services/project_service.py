"""Project business logic service."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from src.api.middleware.error_handler import NotFoundError
from src.core.record_store import RecordKind, RecordStore, get_record_store
from src.models.project import Project, ProjectChanges
from src.schemas.partial import FieldState
from src.schemas.project import ProjectCreate, ProjectUpdate
from src.services.ordering import newest_first

logger = logging.getLogger(__name__)


def coerce_technologies(value: Any) -> list[str]:
    """Return the technologies column as a list of strings.

    JSON columns can come back as a raw string or null depending on the
    driver; anything that is not a list after decoding becomes [].
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            value = None

    if not isinstance(value, list):
        if value is not None:
            logger.warning("Discarding non-list technologies value of type %s", type(value).__name__)
        return []

    return [str(item) for item in value if item is not None]


def _with_technologies(row: dict[str, Any]) -> dict[str, Any]:
    row["technologies"] = coerce_technologies(row.get("technologies"))
    return row


class ProjectService:
    """Service for portfolio projects."""

    def __init__(self, store: RecordStore | None = None) -> None:
        """Initialize project service with the record store."""
        self.store = store or get_record_store()

    async def list_projects(self) -> list[Project]:
        """Get all projects, newest first.

        Returns:
            list[Project]: Projects ordered by created_at descending.
        """
        rows = self.store.find(RecordKind.PROJECT)
        return newest_first([_with_technologies(row) for row in rows])

    async def get_project(self, project_id: int) -> Project | None:
        """Get a project by ID.

        Args:
            project_id: The project's id.

        Returns:
            Project | None: The project or None if not found.
        """
        rows = self.store.find(RecordKind.PROJECT, {"id": project_id}, limit=1)
        return _with_technologies(rows[0]) if rows else None

    async def create_project(self, data: ProjectCreate) -> Project:
        """Create a project.

        Args:
            data: Project creation data.

        Returns:
            Project: The created project.
        """
        now = datetime.now(timezone.utc)
        record = {
            **data.model_dump(),
            "created_at": now,
            "updated_at": now,
        }

        project = self.store.insert(RecordKind.PROJECT, record)
        logger.info("Created project %s", project["id"])
        return _with_technologies(project)

    async def update_project(self, project_id: int, data: ProjectUpdate) -> Project:
        """Apply a partial update to an existing project.

        Only the fields present in the request are written; explicit nulls
        clear the nullable link fields and ``technologies`` replaces the
        stored list. ``created_at`` is never touched, ``updated_at`` always is.

        Args:
            project_id: The project's id.
            data: The fields to write.

        Returns:
            Project: The persisted project.

        Raises:
            NotFoundError: If no project has this id. Nothing is created.
        """
        if await self.get_project(project_id) is None:
            raise self._not_found(project_id)

        changes: ProjectChanges = data.provided_fields()
        cleared = data.fields_in_state(FieldState.NULL)
        if cleared:
            logger.info("Clearing %s on project %s", ", ".join(cleared), project_id)

        changes["updated_at"] = datetime.now(timezone.utc)

        updated = self.store.update_by_id(RecordKind.PROJECT, project_id, changes)
        if updated is None:
            # Deleted between the lookup and the write
            raise self._not_found(project_id)

        return _with_technologies(updated)

    async def delete_project(self, project_id: int) -> dict[str, bool]:
        """Delete a project.

        A missing id is not an error; the result just reports success=False.

        Args:
            project_id: The project's id.

        Returns:
            dict: {"success": bool}.
        """
        if await self.get_project(project_id) is None:
            logger.info("Delete requested for missing project %s", project_id)
            return {"success": False}

        removed = self.store.delete_by_id(RecordKind.PROJECT, project_id)
        if removed:
            logger.info("Deleted project %s", project_id)
        return {"success": removed}

    @staticmethod
    def _not_found(project_id: int) -> NotFoundError:
        message = f"Project with id {project_id} not found"
        return NotFoundError(
            message,
            details=[{"loc": ["path", "project_id"], "msg": message, "type": "not_found"}],
        )
