"""Paid endpoints a partner exposes through x402."""
from datetime import datetime
from uuid import uuid4
from sqlalchemy import String, BigInteger, DateTime, Text, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class PartnerEndpoint(Base):
    """Display-only listing of a partner's endpoints, provisioned out of band."""

    __tablename__ = "partner_endpoints"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    partner_id: Mapped[str] = mapped_column(String(36), ForeignKey("partners.id"), nullable=False)
    path: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_ustx: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_partner_endpoint_partner_id", "partner_id"),
    )

    def __repr__(self) -> str:
        return f"<PartnerEndpoint(id={self.id}, partner_id={self.partner_id}, path={self.path})>"
