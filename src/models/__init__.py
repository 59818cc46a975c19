"""Database model type definitions."""

from src.models.profile import Profile, ProfileChanges
from src.models.project import Project, ProjectChanges
from src.models.skill import Skill

__all__ = [
    "Profile",
    "ProfileChanges",
    "Project",
    "ProjectChanges",
    "Skill",
]
