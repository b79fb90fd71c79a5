"""Schemas for earnings and demo bulk endpoints."""
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from app.catalog import MAX_USTX


class EarningCreate(BaseModel):
    """Schema for recording an earning. Amounts are in microSTX."""

    partner_id: Optional[str] = None
    amount_ustx: Optional[int] = Field(None, gt=0, le=MAX_USTX)
    endpoint: Optional[str] = Field(None, max_length=255)
    tx_id: Optional[str] = Field(None, max_length=255)

    @field_validator("partner_id", "endpoint", "tx_id", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class EarningRecordedResponse(BaseModel):
    success: bool = True
    earning_id: str


class SeedProspectsResponse(BaseModel):
    success: bool = True
    created: int
    message: str


class SimulateEarningsResponse(BaseModel):
    success: bool = True
    count: int
    message: str
