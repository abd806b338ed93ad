"""Pydantic schemas for API validation."""

from app.schemas.booking import (
    AvailabilityResponse,
    BlockedDatesResponse,
    DateChangeQuoteResponse,
    PaymentSplitResponse,
    StayQuoteResponse,
)
from app.schemas.currency import (
    CurrencyPreference,
    CurrencyResponse,
    CurrencyTableResponse,
    FormattedPriceResponse,
)
from app.schemas.listing import AccommodationResponse, AccommodationSearchResponse
from app.schemas.payment import PaymentCreate, PaymentInitResponse
from app.schemas.reporting import CashTotals, DashboardOverview

__all__ = [
    # Booking
    "AvailabilityResponse",
    "BlockedDatesResponse",
    "DateChangeQuoteResponse",
    "PaymentSplitResponse",
    "StayQuoteResponse",
    # Currency
    "CurrencyPreference",
    "CurrencyResponse",
    "CurrencyTableResponse",
    "FormattedPriceResponse",
    # Listing
    "AccommodationResponse",
    "AccommodationSearchResponse",
    # Payment
    "PaymentCreate",
    "PaymentInitResponse",
    # Reporting
    "CashTotals",
    "DashboardOverview",
]
