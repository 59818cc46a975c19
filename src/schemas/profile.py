"""Profile Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.schemas.common import EmailText, UrlStr
from src.schemas.partial import PartialUpdate, reject_null


class ProfileUpdate(PartialUpdate):
    """Schema for updating the profile.

    All fields are optional. Omitted fields keep their stored value;
    ``linkedin_url`` and ``whatsapp_number`` may be sent as null to clear them.
    """

    name: str | None = Field(default=None, description="Display name")
    greeting: str | None = Field(default=None, description="Greeting shown on the home page")
    email: EmailText | None = Field(default=None, description="Contact email address")
    linkedin_url: UrlStr | None = Field(default=None, description="LinkedIn profile URL")
    whatsapp_number: str | None = Field(default=None, description="WhatsApp number, free-form")
    about_description: str | None = Field(default=None, description="About section text")

    @field_validator("name", "greeting", "email", "about_description")
    @classmethod
    def not_nullable(cls, value: str | None) -> str:
        """Required profile columns can be omitted but never cleared."""
        return reject_null(value)


class ProfileResponse(BaseModel):
    """Schema for profile API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Profile identifier")
    name: str = Field(description="Display name")
    greeting: str = Field(description="Greeting shown on the home page")
    email: str = Field(description="Contact email address")
    linkedin_url: str | None = Field(default=None, description="LinkedIn profile URL")
    whatsapp_number: str | None = Field(default=None, description="WhatsApp number")
    about_description: str = Field(description="About section text")
    created_at: datetime = Field(description="Profile creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
