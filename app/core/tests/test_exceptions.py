"""Tests for application exceptions and the catch-all error handler."""

from unittest.mock import AsyncMock

import pytest

from app.core.database import get_db
from app.core.exceptions import DatabaseError, LsAppError


class TestExceptionClasses:
    def test_database_error_defaults(self):
        error = DatabaseError()

        assert isinstance(error, LsAppError)
        assert error.code == "DATABASE_ERROR"
        assert error.message == "Database operation failed"
        assert error.details == {}

    def test_database_error_keeps_context(self):
        error = DatabaseError(message="Failed to save project", details={"name": "P1"})

        assert str(error) == "Failed to save project"
        assert error.details == {"name": "P1"}


class TestUnhandledErrors:
    @pytest.mark.asyncio
    async def test_readiness_crash_renders_problem_details(self, client):
        """A non-database failure inside readiness becomes a generic 500."""
        from app.main import app

        session = AsyncMock()
        session.execute.side_effect = RuntimeError("driver exploded: secret dsn")

        async def broken_db():
            yield session

        app.dependency_overrides[get_db] = broken_db

        response = await client.get("/health/ready")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["type"] == "/errors/internal-error"
        assert body["code"] == "INTERNAL_ERROR"
        assert body["status"] == 500
        assert "secret dsn" not in body["detail"]
