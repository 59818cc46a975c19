"""API route modules."""

from src.api.routes import health, profiles, projects, skills

__all__ = ["health", "profiles", "projects", "skills"]
