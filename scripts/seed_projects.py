#!/usr/bin/env python
"""Insert the seed projects once, outside the web server.

Usage:
    python scripts/seed_projects.py
    python scripts/seed_projects.py --create-tables
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from app.core.database import dispose_engine, get_session_maker, init_models
from app.core.exceptions import LsAppError
from app.core.logging import configure_logging
from app.features.projects import ProjectSeedRunner, SqlAlchemyProjectRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed projects P1, P2 and P3.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    return parser.parse_args(argv)


async def seed(create_tables: bool) -> int:
    """Run the project seed against the configured database.

    Args:
        create_tables: Create tables from model metadata first.

    Returns:
        Process exit code.
    """
    try:
        if create_tables:
            await init_models()
        await ProjectSeedRunner(SqlAlchemyProjectRepository(get_session_maker())).run()
    except LsAppError as e:
        print(f"[FAIL] {e.message}: {e.details.get('error', '')}")
        return 1
    finally:
        await dispose_engine()

    print("[OK] Seeded projects")
    return 0


def main() -> None:
    args = parse_args()
    configure_logging()
    sys.exit(asyncio.run(seed(args.create_tables)))


if __name__ == "__main__":
    main()
