"""Earnings ledger: append earning rows and keep partner totals in step.

Every write here adds the ledger row and increments the owning partner's
aggregates inside one transaction. Increments are relative
(``total = total + amount``) so concurrent writers never lose updates.
"""
import logging
import random
from typing import Optional, Sequence, Tuple

from sqlalchemy import select, update, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog import MAX_USTX
from app.config import settings
from app.models.earning import Earning
from app.models.partner import Partner
from app.services.errors import NotFoundError, PartnerServiceError, StorageError, ValidationError

logger = logging.getLogger(__name__)

SIMULATED_ENDPOINT = "simulated"


def _validate_amount(amount_ustx) -> int:
    # bool is an int subclass but never a valid amount
    if isinstance(amount_ustx, bool) or not isinstance(amount_ustx, int) or amount_ustx <= 0:
        raise ValidationError("amount_ustx must be a positive integer")
    if amount_ustx > MAX_USTX:
        raise ValidationError(f"amount_ustx must not exceed {MAX_USTX}")
    return amount_ustx


async def _apply_earning(
    db: AsyncSession,
    partner_id: str,
    amount_ustx: int,
    endpoint: Optional[str],
    tx_id: Optional[str],
    volume_ustx: int,
) -> Earning:
    """Increment the partner aggregates and append the ledger row. Does not commit.

    The increment only matches while both totals stay within BIGINT range, so
    a matched row can never wrap or overflow.
    """
    result = await db.execute(
        update(Partner)
        .where(
            Partner.id == partner_id,
            Partner.total_earnings <= MAX_USTX - amount_ustx,
            Partner.total_volume <= MAX_USTX - volume_ustx,
        )
        .values(
            total_earnings=Partner.total_earnings + amount_ustx,
            total_volume=Partner.total_volume + volume_ustx,
        )
        .execution_options(synchronize_session="evaluate")
    )
    if result.rowcount == 0:
        exists = await db.scalar(select(Partner.id).where(Partner.id == partner_id))
        if exists is None:
            raise NotFoundError("Partner not found")
        raise ValidationError("Earning would overflow partner totals")

    earning = Earning(
        partner_id=partner_id,
        amount_ustx=amount_ustx,
        endpoint=endpoint,
        tx_id=tx_id,
    )
    db.add(earning)
    await db.flush()
    return earning


async def record_earning(
    db: AsyncSession,
    partner_id: Optional[str],
    amount_ustx,
    endpoint: Optional[str] = None,
    tx_id: Optional[str] = None,
) -> Earning:
    """
    Record one earning for a partner.

    Earnings and volume both grow by ``amount_ustx``. Either the ledger row
    and the aggregate increment are both committed, or neither is.

    Raises ValidationError for missing/invalid input, NotFoundError for an
    unknown partner, StorageError if the datastore fails.
    """
    if not partner_id or amount_ustx is None:
        raise ValidationError("partner_id and amount_ustx required")
    amount_ustx = _validate_amount(amount_ustx)

    try:
        earning = await _apply_earning(
            db, partner_id, amount_ustx, endpoint or None, tx_id or None, volume_ustx=amount_ustx
        )
        await db.commit()
    except PartnerServiceError:
        await db.rollback()
        raise
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(f"Failed to record earning for partner {partner_id}")
        raise StorageError(str(e)) from e

    logger.info(f"Earning {earning.id} recorded: partner={partner_id} amount_ustx={amount_ustx}")
    return earning


async def simulate_earnings(db: AsyncSession, rng: Optional[random.Random] = None) -> int:
    """
    Generate one random earning for every active partner.

    Simulated volume is the amount times ``SIMULATED_VOLUME_MULTIPLIER``,
    modelling gross flow against the partner's fee. All rows commit together.
    Returns the number of partners credited.
    """
    rng = rng or random.Random()

    result = await db.execute(select(Partner.id).where(Partner.status == "active"))
    partner_ids = result.scalars().all()

    try:
        for partner_id in partner_ids:
            amount = rng.randint(settings.SIMULATED_EARNING_MIN_USTX, settings.SIMULATED_EARNING_MAX_USTX)
            await _apply_earning(
                db,
                partner_id,
                amount,
                SIMULATED_ENDPOINT,
                None,
                volume_ustx=amount * settings.SIMULATED_VOLUME_MULTIPLIER,
            )
        await db.commit()
    except PartnerServiceError:
        await db.rollback()
        raise
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Failed to simulate earnings")
        raise StorageError(str(e)) from e

    logger.info(f"Simulated earnings for {len(partner_ids)} partners")
    return len(partner_ids)


async def list_partner_earnings(db: AsyncSession, partner_id: str, limit: int) -> Sequence[Earning]:
    """Most recent earnings for one partner, newest first."""
    result = await db.execute(
        select(Earning)
        .where(Earning.partner_id == partner_id)
        .order_by(desc(Earning.timestamp))
        .limit(limit)
    )
    return result.scalars().all()


async def list_recent_earnings(db: AsyncSession, limit: int) -> Sequence[Tuple[Earning, str]]:
    """Most recent earnings across all partners with the partner's name."""
    result = await db.execute(
        select(Earning, Partner.name)
        .join(Partner, Earning.partner_id == Partner.id)
        .order_by(desc(Earning.timestamp))
        .limit(limit)
    )
    return result.all()
