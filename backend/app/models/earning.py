"""Earning model: one append-only ledger row per recorded payment."""
from datetime import datetime
from uuid import uuid4

from sqlalchemy import String, BigInteger, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Earning(Base):
    """Records a single micropayment attributed to a partner.

    Rows are never updated or deleted. Amounts are stored in microSTX.
    """
    __tablename__ = "earnings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    partner_id: Mapped[str] = mapped_column(String(36), ForeignKey("partners.id"), nullable=False)
    amount_ustx: Mapped[int] = mapped_column(BigInteger, nullable=False)
    endpoint: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tx_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_earning_partner_id", "partner_id"),
        Index("idx_earning_timestamp", "timestamp"),
    )

    def __repr__(self) -> str:
        return f"<Earning(id={self.id}, partner_id={self.partner_id}, amount_ustx={self.amount_ustx})>"
