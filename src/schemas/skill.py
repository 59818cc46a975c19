"""Skill Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SkillCreate(BaseModel):
    """Schema for adding a skill. Duplicate names are allowed."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="Skill name")
    category: str | None = Field(default=None, description="Optional grouping, e.g. 'Frontend'")


class SkillResponse(BaseModel):
    """Schema for skill API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Skill identifier")
    name: str = Field(description="Skill name")
    category: str | None = Field(default=None, description="Skill category")
    created_at: datetime = Field(description="Creation timestamp")
