"""Listing-related Pydantic schemas."""

from decimal import Decimal

from pydantic import BaseModel


class AccommodationResponse(BaseModel):
    """Schema for an accommodation in search results."""

    id: int
    name: str
    location: str | None
    price_per_night: Decimal
    price_display: str


class AccommodationSearchResponse(BaseModel):
    """Schema for search results."""

    accommodations: list[AccommodationResponse]
    total: int
    currency: str
