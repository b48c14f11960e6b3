"""Liveness and readiness endpoints.

Readiness means the database answers and every table the models declare
exists, so the startup seed has somewhere to write.
"""

from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Base, get_db
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: Literal["ok", "unhealthy"]
    database: Literal["connected", "disconnected"] | None = None
    missing_tables: list[str] | None = None


async def _missing_tables(db: AsyncSession) -> list[str]:
    """Return declared table names the connected database does not have."""
    conn = await db.connection()
    existing = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    return sorted(set(Base.metadata.tables) - existing)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up."""
    return HealthResponse(status="ok")


@router.get("/health/ready", response_model=HealthResponse, response_model_exclude_none=True)
async def readiness_check(db: AsyncSession = Depends(get_db)) -> HealthResponse:
    """Report database connectivity and schema presence."""
    try:
        await db.execute(text("SELECT 1"))
        missing = await _missing_tables(db)
    except SQLAlchemyError as e:
        logger.error(
            "health.database_disconnected",
            error=str(e),
            error_type=type(e).__name__,
        )
        await db.rollback()
        return HealthResponse(status="unhealthy", database="disconnected")

    if missing:
        logger.warning("health.schema_incomplete", missing_tables=missing)
        return HealthResponse(status="unhealthy", database="connected", missing_tables=missing)

    return HealthResponse(status="ok", database="connected", missing_tables=[])
