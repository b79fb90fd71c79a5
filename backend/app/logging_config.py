"""Logging setup for the partner service, its scripts and uvicorn."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Ledger, partner store and request logs follow LOG_LEVEL
SERVICE_LOGGERS = ("app", "main", "uvicorn", "uvicorn.access")

# Driver and limiter chatter stays at WARNING unless something goes wrong
QUIET_LOGGERS = ("sqlalchemy", "aiosqlite", "asyncpg", "slowapi")


def setup_logging(level: Optional[str] = None, sql_echo: bool = False) -> None:
    """
    Route service logs to stdout.

    Args:
        level: Level name for the service loggers. Defaults to INFO.
        sql_echo: Keep SQLAlchemy engine statements at INFO instead of
                  silencing them with the other driver loggers.
    """
    log_level = (level or "INFO").upper()

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
