"""Profile business logic service."""

import logging
from datetime import datetime, timezone

from src.api.middleware.error_handler import PersistenceError
from src.core.config import get_settings
from src.core.record_store import RecordKind, RecordStore, get_record_store
from src.models.profile import Profile, ProfileChanges
from src.schemas.partial import FieldState
from src.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for the single portfolio profile.

    There is no create operation: the first update on an empty store
    bootstraps the profile from the configured defaults.
    """

    def __init__(self, store: RecordStore | None = None) -> None:
        """Initialize profile service with the record store."""
        self.store = store or get_record_store()

    async def get_profile(self) -> Profile | None:
        """Get the profile.

        Returns:
            Profile | None: The profile or None if it was never created.
        """
        rows = self.store.find(RecordKind.PROFILE, limit=1)
        return rows[0] if rows else None

    async def update_profile(self, data: ProfileUpdate) -> Profile:
        """Apply a partial update to the profile, creating it if needed.

        On an empty store the profile is built from the provided fields
        over the configured defaults, with created_at equal to updated_at.
        Otherwise only the provided fields are overwritten (explicit nulls
        included) and updated_at is refreshed even when nothing else changed.

        Args:
            data: The fields to write.

        Returns:
            Profile: The persisted profile.

        Raises:
            PersistenceError: If the store fails or loses the profile row.
        """
        changes: ProfileChanges = data.provided_fields()
        now = datetime.now(timezone.utc)

        initial = {
            **get_settings().default_profile,
            **changes,
            "created_at": now,
            "updated_at": now,
        }
        profile, created = self.store.get_or_init_singleton(RecordKind.PROFILE, initial)

        if created:
            logger.info(
                "Bootstrapped profile %s (defaults used for: %s)",
                profile["id"],
                ", ".join(sorted(set(initial) - set(changes) - {"created_at", "updated_at"})) or "none",
            )
            return profile

        cleared = data.fields_in_state(FieldState.NULL)
        if cleared:
            logger.info("Clearing %s on profile %s", ", ".join(cleared), profile["id"])

        changes["updated_at"] = now
        updated = self.store.update_by_id(RecordKind.PROFILE, profile["id"], changes)

        if updated is None:
            logger.error("Profile %s disappeared during update", profile["id"])
            raise PersistenceError()

        return updated
