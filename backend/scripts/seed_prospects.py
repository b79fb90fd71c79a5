"""Prospect seed script for the x402 Partner Program.

Creates a pending partner for every catalog prospect that is not
registered yet. It is idempotent and safe to run on every container start.
"""

import asyncio
import logging

from app.config import settings
from app.database import AsyncSessionLocal, create_tables
from app.logging_config import setup_logging
from app.services.partners import seed_prospects

logger = logging.getLogger(__name__)


async def run() -> int:
    """Seed prospects and return how many partners were created."""
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()

    async with AsyncSessionLocal() as session:
        created = await seed_prospects(session)

    if created:
        logger.info(f"Created {created} prospect partners")
    else:
        logger.info("All prospects already registered, skipping")
    return created


def main():
    """Entry point for the seed script."""
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.DATABASE_ECHO)
    asyncio.run(run())


if __name__ == "__main__":
    main()
