"""Partner model for x402 ecosystem partners."""
from datetime import datetime
from uuid import uuid4
from sqlalchemy import String, Float, BigInteger, DateTime, Text, Index
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class Partner(Base):
    """An onboarded partner and its running earnings aggregates.

    ``total_earnings`` and ``total_volume`` are derived from the earnings
    ledger and are only ever changed through ``app.services.ledger``.
    """

    __tablename__ = "partners"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))

    # Identity
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    wallet_address: Mapped[str] = mapped_column(String(64), nullable=False)
    tier: Mapped[str] = mapped_column(String(50), nullable=False, default="builder")

    # Profile
    twitter: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(512), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    revenue_share: Mapped[float] = mapped_column(Float, nullable=False, default=10)

    # Aggregates in microSTX
    total_earnings: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_volume: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    # Indexes
    __table_args__ = (
        Index("idx_partner_status", "status"),
        Index("idx_partner_name", "name"),
        Index("idx_partner_total_earnings", "total_earnings"),
    )

    def __repr__(self) -> str:
        return f"<Partner(id={self.id}, name={self.name}, status={self.status})>"
