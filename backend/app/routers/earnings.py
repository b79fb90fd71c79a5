"""Earnings ledger API plus the demo seeding/simulation actions."""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.rate_limit import limiter
from app.schemas.earnings import (
    EarningCreate, EarningRecordedResponse, SeedProspectsResponse, SimulateEarningsResponse
)
from app.schemas.partners import ErrorEnvelope
from app.services import ledger, partners as partner_store

router = APIRouter()


@router.post(
    "/api/earnings",
    response_model=EarningRecordedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={code: {"model": ErrorEnvelope} for code in (400, 404, 500)},
)
async def record_earning(
    earning_data: EarningCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record a payment for a partner and bump its earnings/volume totals.
    The partner must exist.
    """
    earning = await ledger.record_earning(
        db,
        partner_id=earning_data.partner_id,
        amount_ustx=earning_data.amount_ustx,
        endpoint=earning_data.endpoint,
        tx_id=earning_data.tx_id,
    )
    return EarningRecordedResponse(earning_id=earning.id)


@router.post("/api/seed-prospects", response_model=SeedProspectsResponse)
@limiter.limit(settings.BULK_RATE_LIMIT)
async def seed_prospects(request: Request, db: AsyncSession = Depends(get_db)):
    """Create pending partners for prospects not registered yet. Idempotent."""
    created = await partner_store.seed_prospects(db)
    return SeedProspectsResponse(
        created=created,
        message=f"Created {created} prospect partners",
    )


@router.post("/api/simulate-earnings", response_model=SimulateEarningsResponse)
@limiter.limit(settings.BULK_RATE_LIMIT)
async def simulate_earnings(request: Request, db: AsyncSession = Depends(get_db)):
    """Credit one random earning to every active partner."""
    count = await ledger.simulate_earnings(db)
    return SimulateEarningsResponse(
        count=count,
        message=f"Simulated earnings for {count} partners",
    )
