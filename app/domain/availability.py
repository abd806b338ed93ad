"""Availability checks over an in-memory booking list.

Overlap rule (inclusive on both ends):

- candidate start falls inside a booking, or
- candidate end falls inside a booking, or
- candidate fully contains a booking.

Touching endpoints count as overlapping, so a stay cannot start on the
day another one ends. Booking status is not considered here: cancelled
bookings still block their dates.
"""

from collections.abc import Iterable
from datetime import date

from app.domain.records import AccommodationRecord, BookingRecord, BookingStatus


def _overlaps(start: date, end: date, booking: BookingRecord) -> bool:
    return (
        (start <= booking.end_date and start >= booking.start_date)
        or (end <= booking.end_date and end >= booking.start_date)
        or (start <= booking.start_date and end >= booking.end_date)
    )


def is_available(
    accommodation_id: int,
    candidate_start: date | None,
    candidate_end: date | None,
    bookings: Iterable[BookingRecord],
) -> bool:
    """Check whether a date range is free for an accommodation.

    Args:
        accommodation_id: Accommodation to check
        candidate_start: First day of the requested stay (None = no filter)
        candidate_end: Last day of the requested stay (None = no filter)
        bookings: All bookings across all accommodations

    Returns:
        bool: False if any booking of the accommodation overlaps the range
    """
    if not candidate_start or not candidate_end:
        return True

    return not any(
        _overlaps(candidate_start, candidate_end, booking)
        for booking in bookings
        if booking.accommodation_id == accommodation_id
    )


def available_accommodations(
    accommodations: Iterable[AccommodationRecord],
    candidate_start: date | None,
    candidate_end: date | None,
    bookings: Iterable[BookingRecord],
) -> list[AccommodationRecord]:
    """Filter accommodations down to those free for the range."""
    bookings = list(bookings)
    return [
        accommodation
        for accommodation in accommodations
        if is_available(accommodation.id, candidate_start, candidate_end, bookings)
    ]


def is_occupied_on(
    accommodation_id: int,
    day: date,
    bookings: Iterable[BookingRecord],
) -> bool:
    """Whether a confirmed booking of the accommodation covers ``day``."""
    return any(
        booking.accommodation_id == accommodation_id
        and booking.status == BookingStatus.CONFIRMED
        and booking.start_date <= day <= booking.end_date
        for booking in bookings
    )


def is_date_blocked(day: date, bookings: Iterable[BookingRecord]) -> bool:
    """Whether any of the given bookings covers ``day`` (calendar picker)."""
    return any(booking.start_date <= day <= booking.end_date for booking in bookings)
