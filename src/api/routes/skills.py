"""Skill API routes."""

from fastapi import APIRouter, status

from src.schemas.skill import SkillCreate, SkillResponse
from src.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get(
    "",
    response_model=list[SkillResponse],
    summary="List skills",
    description="Returns all skills in the order they were added.",
)
async def get_skills() -> list[SkillResponse]:
    """List skills in insertion order."""
    service = SkillService()
    skills = await service.list_skills()
    return [SkillResponse(**skill) for skill in skills]


@router.post(
    "",
    response_model=SkillResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a skill",
    description="Appends a skill. Skills cannot be edited or removed afterwards.",
)
async def create_skill(data: SkillCreate) -> SkillResponse:
    """Add a skill.

    Args:
        data: Skill creation data.

    Returns:
        SkillResponse: The created skill.
    """
    service = SkillService()
    skill = await service.create_skill(data)
    return SkillResponse(**skill)
