"""Application configuration management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.schemas.common import EmailText, UrlStr

DEFAULT_ABOUT_DESCRIPTION = (
    "I have a background in fine arts, which I later applied in IT support. "
    "This experience sparked my passion for web development, where I now focus "
    "on blending creativity with technology."
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Supabase credentials are only required when the Supabase store is selected.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="portfolio-backend", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=2022, description="Server port")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    # Storage
    store_backend: Literal["supabase", "memory"] = Field(
        default="supabase",
        description="Record store backend (supabase or memory)",
    )
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_secret_key: str = Field(default="", description="Supabase secret key for backend operations")

    # Profile bootstrap values, used when the first update hits an empty store
    default_profile_name: str = Field(default="mufti", description="Fallback profile name")
    default_profile_greeting: str = Field(default="Hello! I'm mufti.", description="Fallback greeting")
    default_profile_email: EmailText = Field(default="muftipurwa4@gmail.com", description="Fallback email")
    default_profile_linkedin_url: UrlStr | None = Field(
        default="https://linkedin.com/in/mufti",
        description="Fallback LinkedIn URL",
    )
    default_profile_whatsapp_number: str | None = Field(
        default="+1234567890",
        description="Fallback WhatsApp number",
    )
    default_profile_about_description: str = Field(
        default=DEFAULT_ABOUT_DESCRIPTION,
        description="Fallback about text",
    )

    @model_validator(mode="after")
    def require_supabase_credentials(self) -> "Settings":
        """Fail fast when the Supabase store is selected without credentials."""
        if self.store_backend == "supabase":
            missing = [
                name
                for name in ("supabase_url", "supabase_secret_key")
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(
                    f"{', '.join(missing)} required when store_backend is 'supabase'"
                )
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def default_profile(self) -> dict[str, str | None]:
        """Fallback values for every writable profile field."""
        return {
            "name": self.default_profile_name,
            "greeting": self.default_profile_greeting,
            "email": self.default_profile_email,
            "linkedin_url": self.default_profile_linkedin_url,
            "whatsapp_number": self.default_profile_whatsapp_number,
            "about_description": self.default_profile_about_description,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
