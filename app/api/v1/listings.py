"""Accommodation pricing and calendar endpoints."""

from datetime import date, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_accommodation_repository,
    get_booking_repository,
    get_currency_state,
    get_settings_repository,
)
from app.api.v1.availability import validate_range
from app.core.exceptions import InvalidDateRange, NotFoundError
from app.domain.availability import is_available, is_date_blocked
from app.domain.currency import format_price
from app.domain.pricing import count_nights, nightly_price_for_month, quote_stay
from app.repositories import AccommodationRepository, BookingRepository, SettingsRepository
from app.schemas.booking import BlockedDatesResponse, StayQuoteResponse
from app.services.currency_preference import CurrencyState

router = APIRouter()

MAX_CALENDAR_DAYS = 366


@router.get("/{accommodation_id}/quote", response_model=StayQuoteResponse)
async def quote_accommodation_stay(
    accommodation_id: int,
    start: date,
    end: date,
    accommodations_repo: Annotated[AccommodationRepository, Depends(get_accommodation_repository)],
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
) -> StayQuoteResponse:
    """Price a stay at the check-in month's nightly rate."""
    validate_range(start, end)

    accommodations = await accommodations_repo.list_all()
    accommodation = next((a for a in accommodations if a.id == accommodation_id), None)
    if accommodation is None:
        raise NotFoundError("Accommodation", str(accommodation_id))

    nightly = nightly_price_for_month(
        accommodation.monthly_prices, start.month, accommodation.price_per_night
    )
    total = quote_stay(start, end, nightly)
    bookings = await bookings_repo.list_all()
    currency_table = await settings_repo.currency_table()

    return StayQuoteResponse(
        accommodation_id=accommodation_id,
        nights=count_nights(start, end),
        nightly_price=nightly,
        total_price=total,
        total_display=format_price(total, currency_table, currency_state.selected_currency_code),
        available=is_available(accommodation_id, start, end, bookings),
    )


@router.get("/{accommodation_id}/blocked-dates", response_model=BlockedDatesResponse)
async def get_blocked_dates(
    accommodation_id: int,
    start: date,
    end: date,
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> BlockedDatesResponse:
    """Days between start and end (inclusive) the date picker must disable."""
    if end < start:
        raise InvalidDateRange(start, end, "end must not be before start")
    if (end - start).days > MAX_CALENDAR_DAYS:
        raise InvalidDateRange(start, end, f"window is limited to {MAX_CALENDAR_DAYS} days")

    bookings = [b for b in await bookings_repo.list_all() if b.accommodation_id == accommodation_id]

    blocked = []
    day = start
    while day <= end:
        if is_date_blocked(day, bookings):
            blocked.append(day)
        day += timedelta(days=1)

    return BlockedDatesResponse(accommodation_id=accommodation_id, blocked=blocked)
