from datetime import UTC, date, datetime
from decimal import Decimal

from app.domain.records import AccommodationRecord
from app.services.dashboard_service import DashboardService

# Wednesday; the week runs Sunday 2024-06-09 through Saturday 2024-06-15
NOW = datetime(2024, 6, 12, 10, 0, tzinfo=UTC)
TODAY = NOW.date()

service = DashboardService()


def test_upcoming_checkouts_window(booking_factory):
    bookings = [
        booking_factory(end=date(2024, 6, 19), start=date(2024, 6, 15)),
        booking_factory(end=date(2024, 6, 12), start=date(2024, 6, 1)),
        booking_factory(end=date(2024, 6, 13), start=date(2024, 6, 1)),
        booking_factory(end=date(2024, 6, 20), start=date(2024, 6, 15)),
    ]

    upcoming = service.upcoming_checkouts(bookings, TODAY)

    assert [b.end_date for b in upcoming] == [date(2024, 6, 13), date(2024, 6, 19)]


def test_checkouts_today_and_revenue(booking_factory):
    bookings = [
        booking_factory(end=TODAY, total_price=400),
        booking_factory(end=date(2024, 6, 14), total_price=600),
        booking_factory(end=date(2024, 7, 30), start=date(2024, 7, 1), total_price=900),
    ]

    todays = service.checkouts_on(TODAY, bookings)
    upcoming = service.upcoming_checkouts(bookings, TODAY)

    assert len(todays) == 1
    assert service.checkout_revenue(todays, upcoming) == Decimal("1000")
    assert service.checkout_revenue() == Decimal("0")


def test_available_now_counts_confirmed_only(booking_factory):
    accommodations = [AccommodationRecord(id=i, name=f"Dar {i}") for i in (1, 2, 3)]
    bookings = [
        booking_factory(1, date(2024, 6, 10), date(2024, 6, 14), status="confirmed"),
        booking_factory(2, date(2024, 6, 10), date(2024, 6, 14), status="pending"),
        booking_factory(3, date(2024, 6, 1), date(2024, 6, 12), status="confirmed"),
    ]

    assert service.available_now_count(accommodations, bookings, TODAY) == 1


def test_cash_totals_by_period(booking_factory):
    bookings = [
        booking_factory(payed_amount_cash=100, updated_at=datetime(2024, 6, 10, 9, tzinfo=UTC)),
        booking_factory(payed_amount_cash=50, updated_at=datetime(2024, 6, 2, 9, tzinfo=UTC)),
        booking_factory(payed_amount_cash=25, updated_at=datetime(2024, 5, 30, 9, tzinfo=UTC)),
        booking_factory(updated_at=datetime(2024, 6, 11, 9, tzinfo=UTC)),
    ]

    totals = service.cash_totals(bookings, NOW)

    assert totals == {
        "total": Decimal("175"),
        "week": Decimal("100"),
        "month": Decimal("150"),
    }


def test_week_starts_on_sunday(booking_factory):
    bookings = [
        booking_factory(payed_amount_cash=10, updated_at=datetime(2024, 6, 9, 0, 0, tzinfo=UTC)),
        booking_factory(payed_amount_cash=20, updated_at=datetime(2024, 6, 8, 23, 59, tzinfo=UTC)),
    ]

    assert service.cash_totals(bookings, NOW)["week"] == Decimal("10")


def test_cash_totals_accept_naive_timestamps(booking_factory):
    bookings = [booking_factory(payed_amount_cash=30, updated_at=datetime(2024, 6, 11, 8, 0))]

    totals = service.cash_totals(bookings, NOW)

    assert totals["week"] == Decimal("30")
    assert totals["month"] == Decimal("30")


def test_overview(booking_factory):
    accommodations = [AccommodationRecord(id=1, name="Dar Jasmin")]
    bookings = [booking_factory(1, date(2024, 6, 10), TODAY, total_price=800)]

    overview = service.overview(accommodations, bookings, NOW)

    assert overview["accommodations"] == 1
    assert overview["available_now"] == 0
    assert overview["checkouts_today"] == 1
    assert overview["upcoming_checkouts"] == 0
    assert overview["checkout_revenue"] == Decimal("800")
