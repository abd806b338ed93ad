"""Payment-related Pydantic schemas."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    """Schema for initiating a payment."""

    booking_id: UUID
    plan: str = Field(default="full", pattern="^(deposit|full)$")
    # Falls back to the client's saved currency
    currency: str | None = Field(None, min_length=3, max_length=3)


class PaymentInitResponse(BaseModel):
    """Schema for a started gateway payment."""

    booking_id: UUID
    plan: str
    currency: str
    amount_due: Decimal
    gateway_amount: int
    pay_url: str
    payment_ref: str | None
