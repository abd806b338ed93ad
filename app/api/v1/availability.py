"""Availability endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_booking_repository
from app.core.exceptions import InvalidDateRange
from app.domain.availability import is_available
from app.repositories import BookingRepository
from app.schemas.booking import AvailabilityResponse

router = APIRouter()


def validate_range(start: date | None, end: date | None) -> None:
    """Reject reversed or empty ranges when both ends are given."""
    if start and end and end <= start:
        raise InvalidDateRange(start, end)


@router.get("/{accommodation_id}", response_model=AvailabilityResponse)
async def check_availability(
    accommodation_id: int,
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    start: date | None = None,
    end: date | None = None,
) -> AvailabilityResponse:
    """Check whether an accommodation is free for a date range."""
    validate_range(start, end)

    # Whole table, filtered in memory
    bookings = await bookings_repo.list_all()

    return AvailabilityResponse(
        accommodation_id=accommodation_id,
        start=start,
        end=end,
        available=is_available(accommodation_id, start, end, bookings),
    )
