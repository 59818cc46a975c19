"""Project Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.schemas.common import UrlStr
from src.schemas.partial import PartialUpdate, reject_null


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    Only title and description are required. Nullable links default to
    null and technologies to an empty list.
    """

    model_config = ConfigDict(from_attributes=True)

    title: str = Field(..., description="Project title")
    description: str = Field(..., description="Project description")
    image_url: str | None = Field(default=None, description="Image URL, stored as given")
    github_url: UrlStr | None = Field(default=None, description="Repository URL")
    demo_url: UrlStr | None = Field(default=None, description="Live demo URL")
    technologies: list[str] = Field(default_factory=list, description="Technologies, in display order")


class ProjectUpdate(PartialUpdate):
    """Schema for partially updating a project.

    Omitted fields are left alone. The three link fields accept null to
    clear them; ``technologies`` replaces the whole stored list.
    """

    title: str | None = Field(default=None, description="New title")
    description: str | None = Field(default=None, description="New description")
    image_url: str | None = Field(default=None, description="New image URL")
    github_url: UrlStr | None = Field(default=None, description="New repository URL")
    demo_url: UrlStr | None = Field(default=None, description="New live demo URL")
    technologies: list[str] | None = Field(default=None, description="Replacement technology list")

    @field_validator("title", "description", "technologies")
    @classmethod
    def not_nullable(cls, value):
        return reject_null(value)


class ProjectResponse(BaseModel):
    """Schema for project API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Project identifier")
    title: str = Field(description="Project title")
    description: str = Field(description="Project description")
    image_url: str | None = Field(default=None, description="Image URL")
    github_url: str | None = Field(default=None, description="Repository URL")
    demo_url: str | None = Field(default=None, description="Live demo URL")
    technologies: list[str] = Field(default_factory=list, description="Technologies, in display order")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class DeleteProjectResponse(BaseModel):
    """Result of a delete; success is False when the id did not exist."""

    success: bool = Field(description="Whether a project was removed")
