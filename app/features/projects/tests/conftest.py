"""Fixtures for projects feature tests.

The SQLite database lives in pytest's tmp_path, so every test starts empty.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base
from app.features.projects.models import Project
from app.features.projects.repository import ProjectRepository


class RecordingProjectRepository(ProjectRepository):
    """Test double that records saved projects and can fail on a given call."""

    def __init__(self, fail_on_call: int | None = None, error: Exception | None = None) -> None:
        self.saved: list[Project] = []
        self.calls = 0
        self.fail_on_call = fail_on_call
        self.error = error or RuntimeError("storage unavailable")

    async def save(self, project: Project) -> Project:
        self.calls += 1
        if self.fail_on_call == self.calls:
            raise self.error
        project.id = self.calls
        self.saved.append(project)
        return project


@pytest.fixture
def recording_repository():
    return RecordingProjectRepository()


@pytest.fixture
async def session_maker(tmp_path):
    """Session maker bound to a fresh SQLite file with tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'projects.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def bare_session_maker(tmp_path):
    """Session maker bound to a SQLite file with no tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def fetch_projects(session_maker):
    """Return a coroutine function that loads all stored projects by id."""

    async def _fetch() -> list[Project]:
        async with session_maker() as session:
            result = await session.execute(select(Project).order_by(Project.id))
            return list(result.scalars().all())

    return _fetch
