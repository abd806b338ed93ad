"""Accommodation (listing) database models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.database import Base

if TYPE_CHECKING:
    from app.models.booking import Booking


class Accommodation(Base):
    """Rental property."""

    __tablename__ = "accommodations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    location: Mapped[str | None] = mapped_column(String(255))
    type: Mapped[str | None] = mapped_column(String(50))  # villa, apartment, house
    bedrooms: Mapped[int | None] = mapped_column(Integer)
    bathrooms: Mapped[int | None] = mapped_column(Integer)
    capacity: Mapped[int | None] = mapped_column(Integer)

    # Default nightly price, base currency
    price_per_night: Mapped[Decimal | None] = mapped_column(Numeric(12, 3))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    prices: Mapped[list["AccommodationPrice"]] = relationship(
        "AccommodationPrice", back_populates="accommodation", cascade="all, delete-orphan"
    )
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="accommodation")


class AccommodationPrice(Base):
    """Per-month nightly price for an accommodation."""

    __tablename__ = "prices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    accommodation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accommodations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-12
    price_per_day: Mapped[Decimal] = mapped_column(Numeric(12, 3), nullable=False)

    # Relationships
    accommodation: Mapped["Accommodation"] = relationship("Accommodation", back_populates="prices")
