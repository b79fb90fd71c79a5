"""Partner store: registration, lookup, listing and prospect seeding."""
import logging
from typing import Optional, Sequence
from uuid import uuid4

from sqlalchemy import select, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog import PROSPECTS, is_valid_wallet_address, normalize_tier
from app.models.partner import Partner
from app.models.partner_endpoint import PartnerEndpoint
from app.services.errors import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_REVENUE_SHARE = 10

ORDER_BY_EARNINGS = "earnings"
ORDER_BY_CREATED = "created"


def generate_placeholder_wallet() -> str:
    """Format-valid but unspendable address for prospects without a wallet."""
    return "SP" + (uuid4().hex + uuid4().hex)[:38].upper()


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


async def create_partner(
    db: AsyncSession,
    name: Optional[str],
    wallet_address: Optional[str],
    tier: Optional[str] = None,
    twitter: Optional[str] = None,
    website: Optional[str] = None,
    description: Optional[str] = None,
    revenue_share: Optional[float] = None,
    status: str = "active",
) -> Partner:
    """
    Register a new partner.

    Raises ValidationError if the name or wallet is missing or the wallet
    is not a Stacks address, StorageError if the insert fails.
    """
    name = _clean(name)
    wallet_address = _clean(wallet_address)

    if not name or not wallet_address:
        raise ValidationError("Name and wallet address required")

    if not is_valid_wallet_address(wallet_address):
        raise ValidationError("Invalid Stacks wallet address")

    partner = Partner(
        name=name,
        wallet_address=wallet_address,
        tier=normalize_tier(_clean(tier)),
        twitter=_clean(twitter),
        website=_clean(website),
        description=_clean(description),
        revenue_share=DEFAULT_REVENUE_SHARE if revenue_share is None else revenue_share,
        total_earnings=0,
        total_volume=0,
        status=status,
    )

    db.add(partner)
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(f"Failed to create partner {name!r}")
        raise StorageError(str(e)) from e

    await db.refresh(partner)
    logger.info(f"Partner created: {partner.id} ({partner.name}, status={partner.status})")
    return partner


async def get_partner(db: AsyncSession, partner_id: str) -> Partner:
    """Fetch a partner or raise NotFoundError."""
    partner = await db.get(Partner, partner_id)
    if partner is None:
        raise NotFoundError("Partner not found")
    return partner


async def find_partner(db: AsyncSession, partner_id: str) -> Optional[Partner]:
    """Fetch a partner, returning None when absent."""
    return await db.get(Partner, partner_id)


async def list_partners(
    db: AsyncSession,
    status: Optional[str] = None,
    order: str = ORDER_BY_EARNINGS,
    limit: Optional[int] = None,
) -> Sequence[Partner]:
    """
    List partners, optionally filtered by status.

    Ordered by total earnings (highest first) or, with ``order="created"``,
    by registration time (newest first).
    """
    query = select(Partner)
    if status is not None:
        query = query.where(Partner.status == status)

    if order == ORDER_BY_CREATED:
        query = query.order_by(desc(Partner.created_at))
    else:
        query = query.order_by(desc(Partner.total_earnings), Partner.created_at)

    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return result.scalars().all()


async def list_partner_endpoints(db: AsyncSession, partner_id: str) -> Sequence[PartnerEndpoint]:
    result = await db.execute(
        select(PartnerEndpoint)
        .where(PartnerEndpoint.partner_id == partner_id)
        .order_by(desc(PartnerEndpoint.created_at))
    )
    return result.scalars().all()


async def seed_prospects(db: AsyncSession) -> int:
    """
    Materialize the prospect catalog as pending partners.

    Prospects whose exact name is already registered are skipped, so running
    this repeatedly creates each prospect at most once. Returns the number
    of partners created.
    """
    result = await db.execute(
        select(Partner.name).where(Partner.name.in_([p.name for p in PROSPECTS]))
    )
    existing = set(result.scalars().all())

    created = 0
    for prospect in PROSPECTS:
        if prospect.name in existing:
            continue
        db.add(Partner(
            name=prospect.name,
            wallet_address=generate_placeholder_wallet(),
            tier=normalize_tier(prospect.tier),
            twitter=prospect.twitter,
            description=prospect.description,
            revenue_share=DEFAULT_REVENUE_SHARE,
            total_earnings=0,
            total_volume=0,
            status="pending",
        ))
        existing.add(prospect.name)
        created += 1

    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Failed to seed prospects")
        raise StorageError(str(e)) from e

    logger.info(f"Seeded {created} prospect partners")
    return created
