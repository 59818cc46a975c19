"""Skill business logic service."""

from datetime import datetime, timezone

from src.core.record_store import RecordKind, RecordStore, get_record_store
from src.models.skill import Skill
from src.schemas.skill import SkillCreate


class SkillService:
    """Service for the append-only skill list."""

    def __init__(self, store: RecordStore | None = None) -> None:
        """Initialize skill service with the record store."""
        self.store = store or get_record_store()

    async def list_skills(self) -> list[Skill]:
        """Get all skills in insertion order."""
        return self.store.find(RecordKind.SKILL)

    async def create_skill(self, data: SkillCreate) -> Skill:
        """Add a skill. Duplicates are allowed.

        Args:
            data: Skill creation data.

        Returns:
            Skill: The created skill.
        """
        record = {
            "name": data.name,
            "category": data.category,
            "created_at": datetime.now(timezone.utc),
        }
        return self.store.insert(RecordKind.SKILL, record)
