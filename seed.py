#!/usr/bin/env python3
"""
Database seeding script.
Loads the sample agents, listings and admin account into an empty database.
"""

import asyncio
import argparse
import logging
import sys

from homequest.config import settings
from homequest.database import AsyncSessionLocal, create_tables, close_db_connection
from homequest.seed import seed_database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run(create_schema: bool) -> bool:
    """Optionally create the schema, then seed."""
    try:
        if create_schema:
            logger.info("Creating database tables...")
            await create_tables()

        async with AsyncSessionLocal() as session:
            return await seed_database(session)
    finally:
        await close_db_connection()


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the HomeQuest database with sample data")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding"
    )
    args = parser.parse_args()

    logger.info(f"Seeding database for environment: {settings.environment}")
    try:
        seeded = asyncio.run(run(args.create_tables))
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        return 1

    logger.info("Seed complete" if seeded else "Nothing to do, database already has data")
    return 0


if __name__ == "__main__":
    sys.exit(main())
