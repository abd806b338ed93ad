"""Booking payment-plan and date-change endpoints."""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_accommodation_repository,
    get_booking_repository,
    get_currency_state,
    get_settings_repository,
)
from app.api.v1.availability import validate_range
from app.core.exceptions import DatesNotAvailable, NotFoundError
from app.domain.availability import is_available
from app.domain.currency import format_price
from app.domain.payment_plan import calculate_payments
from app.domain.pricing import sum_daily_prices
from app.repositories import AccommodationRepository, BookingRepository, SettingsRepository
from app.schemas.booking import DateChangeQuoteResponse, PaymentSplitResponse
from app.services.currency_preference import CurrencyState

router = APIRouter()


@router.get("/{booking_id}/payments", response_model=PaymentSplitResponse)
async def get_payment_split(
    booking_id: UUID,
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
) -> PaymentSplitResponse:
    """Deposit and remaining balance for a booking."""
    booking = await bookings_repo.get(booking_id)
    if booking is None:
        raise NotFoundError("Booking", str(booking_id))

    split = calculate_payments(booking.total_price)
    currency_table = await settings_repo.currency_table()
    code = currency_state.selected_currency_code

    return PaymentSplitResponse(
        booking_id=booking.id,
        total_price=booking.total_price,
        deposit=split.deposit,
        remaining=split.remaining,
        deposit_display=format_price(split.deposit, currency_table, code),
        remaining_display=format_price(split.remaining, currency_table, code),
        currency=code,
    )


@router.get("/{booking_id}/date-change-quote", response_model=DateChangeQuoteResponse)
async def quote_date_change(
    booking_id: UUID,
    start: date,
    end: date,
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    accommodations_repo: Annotated[AccommodationRepository, Depends(get_accommodation_repository)],
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
) -> DateChangeQuoteResponse:
    """New total when an admin moves a booking, charging every day through the end date.

    The new dates must not overlap another booking of the same
    accommodation; the booking being moved does not block itself.
    """
    validate_range(start, end)

    booking = await bookings_repo.get(booking_id)
    if booking is None:
        raise NotFoundError("Booking", str(booking_id))

    others = [b for b in await bookings_repo.list_all() if b.id != booking.id]
    if not is_available(booking.accommodation_id, start, end, others):
        raise DatesNotAvailable()

    accommodations = await accommodations_repo.list_all()
    accommodation = next((a for a in accommodations if a.id == booking.accommodation_id), None)
    if accommodation is None:
        raise NotFoundError("Accommodation", str(booking.accommodation_id))

    total = sum_daily_prices(start, end, accommodation.monthly_prices, accommodation.price_per_night)
    currency_table = await settings_repo.currency_table()

    return DateChangeQuoteResponse(
        booking_id=booking.id,
        start=start,
        end=end,
        total_price=total,
        total_display=format_price(total, currency_table, currency_state.selected_currency_code),
    )
