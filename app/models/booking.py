"""Booking database model."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.database import Base

if TYPE_CHECKING:
    from app.models.listing import Accommodation


class Booking(Base):
    """Reservation of an accommodation.

    Rows are written by the reservation flow and admin actions on the
    external platform; this service only reads them.
    """

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    accommodation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accommodations.id"), nullable=False, index=True
    )
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)

    # Dates
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Status
    status: Mapped[str] = mapped_column(
        String(20), default="pending", index=True
    )  # pending, confirmed, cancelled

    # Amounts (base currency)
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 3), nullable=False)
    payed_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 3))

    # Cash sub-ledger
    payed_amount_cash: Mapped[Decimal | None] = mapped_column(Numeric(12, 3))
    cash_payed_by: Mapped[uuid.UUID | None] = mapped_column(Uuid)
    has_collected_cash: Mapped[bool] = mapped_column(Boolean, default=False)
    collected_by: Mapped[uuid.UUID | None] = mapped_column(Uuid)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    accommodation: Mapped["Accommodation"] = relationship(
        "Accommodation", back_populates="bookings"
    )

    @property
    def nights(self) -> int:
        """Calculate number of nights."""
        return (self.end_date - self.start_date).days
