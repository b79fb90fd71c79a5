"""Database models for the x402 Partner Program."""
from app.models.partner import Partner
from app.models.earning import Earning
from app.models.partner_endpoint import PartnerEndpoint

__all__ = [
    "Partner",
    "Earning",
    "PartnerEndpoint",
]
