#!/usr/bin/env python
"""Script to seed an empty portfolio store.

Usage:
    python scripts/seed_portfolio.py

Creates the profile from the configured defaults if none exists yet and
adds the default skill list if there are no skills. Existing data is
never modified, so running the script twice is safe.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.schemas.profile import ProfileUpdate
from src.schemas.skill import SkillCreate
from src.services.profile_service import ProfileService
from src.services.skill_service import SkillService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_SKILLS = [
    "JavaScript",
    "React",
    "Git",
    "GitHub",
    "Bootstrap",
    "HTML5",
    "CSS3",
    "Laravel",
    "MySQL",
    "Tailwind",
    "Node.js",
]


async def seed() -> dict[str, int]:
    """Seed the profile and skills.

    Returns:
        dict: Number of profiles and skills created.
    """
    created = {"profiles": 0, "skills": 0}

    profile_service = ProfileService()
    if await profile_service.get_profile() is None:
        profile = await profile_service.update_profile(ProfileUpdate())
        logger.info(f"Created profile for {profile['name']}")
        created["profiles"] = 1
    else:
        logger.info("Profile already exists, leaving it unchanged")

    skill_service = SkillService()
    if await skill_service.list_skills():
        logger.info("Skills already present, skipping")
    else:
        for name in DEFAULT_SKILLS:
            await skill_service.create_skill(SkillCreate(name=name))
        created["skills"] = len(DEFAULT_SKILLS)

    return created


async def main() -> None:
    """Seed an empty portfolio store."""
    logger.info("Seeding portfolio store...")

    try:
        result = await seed()
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)

    logger.info("Seeding complete!")
    logger.info(f"Profiles created: {result['profiles']}")
    logger.info(f"Skills created: {result['skills']}")


if __name__ == "__main__":
    asyncio.run(main())
