"""Partner registration and lookup API."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.partners import (
    PartnerCreate, PartnerResponse, PartnerEnvelope, PartnerListEnvelope, ErrorEnvelope
)
from app.services import partners as partner_store

router = APIRouter()

_errors = {
    400: {"model": ErrorEnvelope},
    404: {"model": ErrorEnvelope},
    500: {"model": ErrorEnvelope},
}


@router.post(
    "/api/partners",
    response_model=PartnerEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
)
async def create_partner(
    partner_data: PartnerCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a partner.

    - `name` and `wallet_address` are required
    - wallet must be a Stacks address (SP/SM + 38-40 chars)
    - unknown tiers fall back to `builder`, revenue share defaults to 10
    """
    partner = await partner_store.create_partner(
        db,
        name=partner_data.name,
        wallet_address=partner_data.wallet_address,
        tier=partner_data.tier,
        twitter=partner_data.twitter,
        website=partner_data.website,
        description=partner_data.description,
        revenue_share=partner_data.revenue_share,
    )
    return PartnerEnvelope(partner=PartnerResponse.model_validate(partner))


@router.get("/api/partners", response_model=PartnerListEnvelope)
async def list_partners(db: AsyncSession = Depends(get_db)):
    """List every partner, highest earnings first."""
    partners = await partner_store.list_partners(db)
    return PartnerListEnvelope(
        partners=[PartnerResponse.model_validate(p) for p in partners]
    )


@router.get("/api/partners/{partner_id}", response_model=PartnerEnvelope, responses=_errors)
async def get_partner(partner_id: str, db: AsyncSession = Depends(get_db)):
    partner = await partner_store.get_partner(db, partner_id)
    return PartnerEnvelope(partner=PartnerResponse.model_validate(partner))
