"""Fixtures for core infrastructure tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import get_settings
from app.core.database import dispose_engine


@pytest.fixture(autouse=True)
async def isolated_settings(tmp_path, monkeypatch):
    """Point every test at a throwaway SQLite file and reset cached singletons."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'core.db'}")
    get_settings.cache_clear()
    await dispose_engine()

    yield

    await dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def client():
    """Async HTTP client for the FastAPI app (lifespan not run)."""
    from app.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
