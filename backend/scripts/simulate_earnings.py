"""Credit one simulated earning to every active partner (demo data)."""

import asyncio
import logging

from app.config import settings
from app.database import AsyncSessionLocal
from app.logging_config import setup_logging
from app.services.ledger import simulate_earnings

logger = logging.getLogger(__name__)


async def run() -> int:
    async with AsyncSessionLocal() as session:
        count = await simulate_earnings(session)
    logger.info(f"Simulated earnings for {count} partners")
    return count


def main():
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.DATABASE_ECHO)
    asyncio.run(run())


if __name__ == "__main__":
    main()
