"""Persistence for Project records.

The abstract interface is what callers depend on; the SQLAlchemy implementation
is wired in explicitly at application startup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import DatabaseError
from app.core.logging import get_logger
from app.features.projects.models import Project

logger = get_logger(__name__)


class ProjectRepository(ABC):
    """Storage abstraction for projects."""

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Persist a project.

        Args:
            project: Project to insert.

        Returns:
            The persisted project, with its generated id populated.

        Raises:
            DatabaseError: If the store rejects the write.
        """


class SqlAlchemyProjectRepository(ProjectRepository):
    """ProjectRepository backed by an async SQLAlchemy session maker.

    Every save runs in its own session and transaction.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def save(self, project: Project) -> Project:
        name = project.name
        async with self._session_maker() as session:
            try:
                session.add(project)
                await session.commit()
                await session.refresh(project)
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(
                    "projects.save_failed",
                    name=name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise DatabaseError(
                    message="Failed to save project",
                    details={"name": name, "error": str(e)},
                ) from e

        logger.debug(
            "projects.saved",
            project_id=project.id,
            name=project.name,
            created_date=project.created_date.isoformat(),
        )
        return project
