from datetime import date

from app.domain.availability import (
    available_accommodations,
    is_available,
    is_date_blocked,
    is_occupied_on,
)
from app.domain.records import AccommodationRecord

P = 1
Q = 2


def test_no_dates_is_always_available(booking_factory):
    bookings = [booking_factory(P), booking_factory(Q)]

    assert is_available(P, None, None, bookings) is True
    assert is_available(P, date(2024, 6, 1), None, bookings) is True
    assert is_available(P, None, date(2024, 6, 10), bookings) is True


def test_same_range_is_unavailable(booking_factory):
    booking = booking_factory(P, date(2024, 6, 1), date(2024, 6, 10))

    assert is_available(P, date(2024, 6, 1), date(2024, 6, 10), [booking]) is False


def test_same_day_turnover_is_unavailable(booking_factory):
    booking = booking_factory(P, date(2024, 6, 1), date(2024, 6, 10))

    # checking in on the day the previous guest leaves
    assert is_available(P, date(2024, 6, 10), date(2024, 6, 15), [booking]) is False
    # checking out on the day the next guest arrives
    assert is_available(P, date(2024, 5, 25), date(2024, 6, 1), [booking]) is False


def test_disjoint_ranges_are_available(booking_factory):
    booking = booking_factory(P, date(2024, 6, 1), date(2024, 6, 10))

    assert is_available(P, date(2024, 6, 11), date(2024, 6, 15), [booking]) is True
    assert is_available(P, date(2024, 6, 12), date(2024, 6, 15), [booking]) is True
    assert is_available(P, date(2024, 5, 20), date(2024, 5, 31), [booking]) is True


def test_candidate_containing_booking_is_unavailable(booking_factory):
    booking = booking_factory(P, date(2024, 6, 5), date(2024, 6, 7))

    assert is_available(P, date(2024, 6, 1), date(2024, 6, 30), [booking]) is False


def test_candidate_inside_booking_is_unavailable(booking_factory):
    booking = booking_factory(P, date(2024, 6, 1), date(2024, 6, 30))

    assert is_available(P, date(2024, 6, 10), date(2024, 6, 12), [booking]) is False


def test_other_accommodation_is_ignored(booking_factory):
    booking = booking_factory(Q, date(2024, 6, 1), date(2024, 6, 10))

    assert is_available(P, date(2024, 6, 1), date(2024, 6, 10), [booking]) is True


def test_cancelled_bookings_still_block(booking_factory):
    booking = booking_factory(P, date(2024, 6, 1), date(2024, 6, 10), status="cancelled")

    assert is_available(P, date(2024, 6, 3), date(2024, 6, 4), [booking]) is False


def test_empty_booking_list_is_available():
    assert is_available(P, date(2024, 6, 1), date(2024, 6, 10), []) is True


def test_available_accommodations_filters_booked(booking_factory):
    accommodations = [
        AccommodationRecord(id=P, name="Dar Jasmin"),
        AccommodationRecord(id=Q, name="Villa Bleue"),
    ]
    bookings = [booking_factory(P, date(2024, 6, 1), date(2024, 6, 10))]

    free = available_accommodations(accommodations, date(2024, 6, 5), date(2024, 6, 8), bookings)
    assert [a.id for a in free] == [Q]

    assert len(available_accommodations(accommodations, None, None, bookings)) == 2


def test_occupied_only_counts_confirmed(booking_factory):
    day = date(2024, 6, 5)
    pending = booking_factory(P, date(2024, 6, 1), date(2024, 6, 10), status="pending")
    confirmed = booking_factory(Q, date(2024, 6, 1), date(2024, 6, 5), status="confirmed")

    assert is_occupied_on(P, day, [pending, confirmed]) is False
    assert is_occupied_on(Q, day, [pending, confirmed]) is True
    assert is_occupied_on(Q, date(2024, 6, 6), [pending, confirmed]) is False


def test_date_blocked_is_inclusive(booking_factory):
    bookings = [booking_factory(P, date(2024, 6, 1), date(2024, 6, 10))]

    assert is_date_blocked(date(2024, 6, 1), bookings) is True
    assert is_date_blocked(date(2024, 6, 10), bookings) is True
    assert is_date_blocked(date(2024, 6, 11), bookings) is False
