"""Search endpoints for accommodation discovery."""

from datetime import UTC, date, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_accommodation_repository,
    get_booking_repository,
    get_currency_state,
    get_settings_repository,
)
from app.api.v1.availability import validate_range
from app.domain.availability import available_accommodations
from app.domain.currency import format_price
from app.domain.pricing import nightly_price_for_month
from app.repositories import AccommodationRepository, BookingRepository, SettingsRepository
from app.schemas.listing import AccommodationResponse, AccommodationSearchResponse
from app.services.currency_preference import CurrencyState

router = APIRouter()


@router.get("/", response_model=AccommodationSearchResponse)
async def search_accommodations(
    accommodations_repo: Annotated[AccommodationRepository, Depends(get_accommodation_repository)],
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
    start: date | None = None,
    end: date | None = None,
    location: str | None = None,
) -> AccommodationSearchResponse:
    """List accommodations free for the range, priced for the current month.

    Without dates every accommodation is returned.
    """
    validate_range(start, end)

    accommodations = await accommodations_repo.list_all()
    if location:
        needle = location.strip().lower()
        accommodations = [
            a for a in accommodations if a.location and needle in a.location.lower()
        ]

    bookings = await bookings_repo.list_all()
    currency_table = await settings_repo.currency_table()
    code = currency_state.selected_currency_code
    month = datetime.now(UTC).month

    results = []
    for accommodation in available_accommodations(accommodations, start, end, bookings):
        nightly = nightly_price_for_month(
            accommodation.monthly_prices, month, accommodation.price_per_night
        )
        results.append(
            AccommodationResponse(
                id=accommodation.id,
                name=accommodation.name,
                location=accommodation.location,
                price_per_night=nightly,
                price_display=format_price(nightly, currency_table, code),
            )
        )

    return AccommodationSearchResponse(
        accommodations=results,
        total=len(results),
        currency=code,
    )
