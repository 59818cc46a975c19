"""Profile API routes."""

from fastapi import APIRouter

from src.schemas.profile import ProfileResponse, ProfileUpdate
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileResponse | None,
    summary="Get the profile",
    description="Returns the portfolio profile, or null if it has never been written.",
)
async def get_profile() -> ProfileResponse | None:
    """Get the portfolio profile.

    Returns:
        ProfileResponse | None: The profile, or None before the first update.
    """
    service = ProfileService()
    profile = await service.get_profile()

    return ProfileResponse(**profile) if profile else None


@router.put(
    "",
    response_model=ProfileResponse,
    summary="Update the profile",
    description=(
        "Partially updates the profile. Omitted fields are unchanged, null clears "
        "nullable fields. Creates the profile from defaults on first use."
    ),
)
async def update_profile(data: ProfileUpdate) -> ProfileResponse:
    """Update the portfolio profile, creating it if it does not exist yet.

    Args:
        data: Fields to update.

    Returns:
        ProfileResponse: The persisted profile.
    """
    service = ProfileService()
    profile = await service.update_profile(data)

    return ProfileResponse(**profile)
