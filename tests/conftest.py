"""Shared pytest fixtures for application-level tests."""

import pytest
from sqlalchemy import select

from app.core.config import get_settings
from app.core.database import dispose_engine, get_session_maker
from app.features.projects.models import Project


@pytest.fixture(autouse=True)
async def isolated_database(tmp_path, monkeypatch):
    """Run each test against its own SQLite file with fresh cached singletons."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("APP_ENV", "testing")
    get_settings.cache_clear()
    await dispose_engine()

    yield

    await dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
def stored_projects():
    """Return a coroutine function that loads all stored projects by id."""

    async def _fetch() -> list[Project]:
        async with get_session_maker()() as session:
            result = await session.execute(select(Project).order_by(Project.id))
            return list(result.scalars().all())

    return _fetch
