"""Jinja2 environment shared by the HTML views."""
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from fastapi.templating import Jinja2Templates

from app.catalog import TIERS, PROSPECTS, WALLET_ADDRESS_PATTERN, format_stx, get_tier
from app.config import settings

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def medal(rank: int) -> str:
    """Leaderboard marker for a 1-based rank."""
    return {1: "\U0001F947", 2: "\U0001F948", 3: "\U0001F949"}.get(rank, f"#{rank}")


def format_datetime(value: Optional[datetime], fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    if value is None:
        return "-"
    return value.strftime(fmt)


def short_tx(tx_id: str) -> str:
    return f"{tx_id[:8]}..."


def is_http_url(value: Optional[str]) -> bool:
    """Only http(s) links are rendered as anchors; anything else is shown as text."""
    return bool(value) and value.strip().lower().startswith(("http://", "https://"))


def sum_totals(partners: Iterable) -> dict:
    """Display-only totals over an already fetched set of partners."""
    earnings = 0
    volume = 0
    for p in partners:
        earnings += p.total_earnings
        volume += p.total_volume
    return {"earnings": earnings, "volume": volume}


templates.env.filters["stx"] = format_stx
templates.env.filters["datetime"] = format_datetime
templates.env.filters["short_tx"] = short_tx
templates.env.tests["http_url"] = is_http_url
templates.env.globals.update(
    tier_for=get_tier,
    tiers=TIERS,
    prospects=PROSPECTS,
    wallet_pattern=WALLET_ADDRESS_PATTERN,
    medal=medal,
    settings=settings,
)
