#!/usr/bin/env python
"""Check database connectivity.

Usage:
    python scripts/check_db.py
"""

import asyncio
import sys

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.config import get_settings


def _safe_url(url: str) -> str:
    """Drop credentials from a database URL."""
    return url.split("@", 1)[1] if "@" in url else url


async def check_database() -> int:
    """Verify the database answers and report whether the project table exists."""
    settings = get_settings()

    print(f"{settings.app_name} - Database Connectivity Check")
    print("=" * 45)
    print(f"Database URL: {_safe_url(settings.database_url)}")
    print()

    engine = create_async_engine(settings.database_url)

    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            assert result.scalar() == 1
            print("[OK] Basic connectivity")

            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
            if "project" in tables:
                print("[OK] project table present")
            else:
                print("[WARN] project table missing")
                print("       Start the app with DB_CREATE_TABLES=true or run: alembic upgrade head")

        print()
        print("Database check completed successfully!")
        return 0

    except SQLAlchemyError as e:
        print(f"[FAIL] Connection failed: {e}")
        print()
        print("Troubleshooting:")
        print("  1. Check DATABASE_URL in .env file")
        print("  2. For PostgreSQL, verify the server is reachable")
        return 1

    finally:
        await engine.dispose()


def main():
    sys.exit(asyncio.run(check_database()))


if __name__ == "__main__":
    main()
