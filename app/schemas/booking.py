"""Booking-related Pydantic schemas."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class AvailabilityResponse(BaseModel):
    """Schema for an availability check."""

    accommodation_id: int
    start: date | None
    end: date | None
    available: bool


class PaymentSplitResponse(BaseModel):
    """Schema for the deposit / remaining split of a booking."""

    booking_id: UUID
    total_price: Decimal
    deposit: Decimal
    remaining: Decimal
    deposit_display: str
    remaining_display: str
    currency: str


class StayQuoteResponse(BaseModel):
    """Schema for a stay price quote."""

    accommodation_id: int
    nights: int = Field(ge=0)
    nightly_price: Decimal
    total_price: Decimal
    total_display: str
    available: bool


class BlockedDatesResponse(BaseModel):
    """Schema for the calendar's disabled days."""

    accommodation_id: int
    blocked: list[date]


class DateChangeQuoteResponse(BaseModel):
    """Schema for re-pricing a booking on new dates."""

    booking_id: UUID
    start: date
    end: date
    total_price: Decimal
    total_display: str
