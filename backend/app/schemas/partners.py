"""Schemas for partner endpoints."""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


class PartnerCreate(BaseModel):
    """Schema for partner registration.

    Required fields are checked by the partner service so that a missing
    name or wallet gets the same error envelope as a malformed one.
    """

    name: Optional[str] = Field(None, max_length=255)
    wallet_address: Optional[str] = Field(None, max_length=64)
    tier: Optional[str] = Field(None, max_length=50)
    twitter: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=512)
    description: Optional[str] = None
    revenue_share: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """HTML forms submit untouched inputs as empty strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PartnerResponse(BaseModel):
    """Schema for partner response."""

    id: str
    name: str
    wallet_address: str
    tier: str
    twitter: Optional[str]
    website: Optional[str]
    description: Optional[str]
    revenue_share: float
    total_earnings: int
    total_volume: int
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class PartnerEnvelope(BaseModel):
    success: bool = True
    partner: PartnerResponse


class PartnerListEnvelope(BaseModel):
    success: bool = True
    partners: List[PartnerResponse]


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str
