"""Currency-related Pydantic schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field


class CurrencyResponse(BaseModel):
    """Schema for a currency table entry."""

    code: str
    name: str
    rate: Decimal


class CurrencyTableResponse(BaseModel):
    """Schema for the current currency table."""

    base_currency: str
    currencies: list[CurrencyResponse]


class FormattedPriceResponse(BaseModel):
    """Schema for a formatted price."""

    amount: Decimal | None
    currency: str
    converted: Decimal | None = None  # amount in the selected currency, when known
    display: str


class CurrencyPreference(BaseModel):
    """Schema for reading and writing the selected currency."""

    currency: str = Field(..., min_length=3, max_length=3)
