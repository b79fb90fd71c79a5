"""Server-rendered HTML views: landing, onboarding, dashboards and admin."""
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog import PROSPECTS, normalize_tier
from app.config import settings
from app.database import get_db
from app.services import ledger, partners as partner_store
from app.templating import templates, sum_totals

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
async def landing_page(request: Request, db: AsyncSession = Depends(get_db)):
    """Active partners ranked by earnings, plus the prospect pipeline."""
    active = await partner_store.list_partners(db, status="active")
    return templates.TemplateResponse(
        request,
        "landing.html",
        {
            "title": "Partner Program",
            "partners": active,
            "totals": sum_totals(active),
            "pipeline": PROSPECTS[:settings.LANDING_PROSPECT_LIMIT],
        },
    )


@router.get("/onboard")
async def onboard_page(
    request: Request,
    name: Optional[str] = None,
    twitter: Optional[str] = None,
    tier: Optional[str] = None,
):
    """Registration form, optionally prefilled from the pipeline links."""
    prefill = {
        "name": name or "",
        "twitter": twitter or "",
        "tier": normalize_tier(tier),
    }
    return templates.TemplateResponse(
        request, "onboard.html", {"title": "Join Program", "prefill": prefill}
    )


@router.get("/partners/{partner_id}")
async def partner_dashboard(partner_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    partner = await partner_store.find_partner(db, partner_id)
    if partner is None:
        return templates.TemplateResponse(request, "not_found.html", {"title": "Not Found"})

    earnings = await ledger.list_partner_earnings(db, partner_id, settings.DASHBOARD_EARNINGS_LIMIT)
    endpoints = await partner_store.list_partner_endpoints(db, partner_id)
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "title": partner.name,
            "partner": partner,
            "earnings": earnings,
            "endpoints": endpoints,
        },
    )


@router.get("/embed/{partner_id}")
async def embed_widget(partner_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    """Minimal frameable earnings widget."""
    partner = await partner_store.find_partner(db, partner_id)
    return templates.TemplateResponse(request, "embed.html", {"partner": partner})


@router.get("/leaderboard")
async def leaderboard(request: Request, db: AsyncSession = Depends(get_db)):
    top = await partner_store.list_partners(db, status="active", limit=settings.LEADERBOARD_LIMIT)
    return templates.TemplateResponse(
        request, "leaderboard.html", {"title": "Leaderboard", "partners": top}
    )


@router.get("/admin")
async def admin_console(request: Request, db: AsyncSession = Depends(get_db)):
    """Every partner, newest first, with recent ledger activity and demo actions."""
    everyone = await partner_store.list_partners(db, order=partner_store.ORDER_BY_CREATED)
    recent = await ledger.list_recent_earnings(db, settings.ADMIN_RECENT_EARNINGS_LIMIT)
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "title": "Admin",
            "partners": everyone,
            "totals": sum_totals(everyone),
            "recent_earnings": recent,
        },
    )
