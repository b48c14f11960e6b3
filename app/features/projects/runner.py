"""One-shot startup seed for projects."""

from __future__ import annotations

from app.core.logging import get_logger
from app.features.projects.models import Project
from app.features.projects.repository import ProjectRepository

logger = get_logger(__name__)

SEED_PROJECT_NAMES: tuple[str, ...] = ("P1", "P2", "P3")


class ProjectSeedRunner:
    """Insert the seed projects through a repository.

    Saves are awaited one at a time in ``SEED_PROJECT_NAMES`` order. The first
    failure propagates and nothing after it is saved. Earlier saves stay
    committed. Running it again inserts another full set.
    """

    def __init__(self, repository: ProjectRepository) -> None:
        self.repository = repository

    async def run(self) -> None:
        logger.info("projects.seed_started", count=len(SEED_PROJECT_NAMES))

        for name in SEED_PROJECT_NAMES:
            try:
                await self.repository.save(Project(name))
            except Exception as e:
                logger.error(
                    "projects.seed_failed",
                    name=name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

        logger.info("projects.seed_completed", count=len(SEED_PROJECT_NAMES))
