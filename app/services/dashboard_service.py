"""Admin dashboard statistics."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from app.domain.availability import is_occupied_on
from app.domain.records import AccommodationRecord, BookingRecord

UPCOMING_CHECKOUT_DAYS = 7


def _week_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Sunday 00:00 through Saturday 23:59:59.999999 of ``now``'s week."""
    days_since_sunday = (now.weekday() + 1) % 7
    start = datetime.combine(now.date() - timedelta(days=days_since_sunday), time.min, now.tzinfo)
    end = datetime.combine(start.date() + timedelta(days=6), time.max, now.tzinfo)
    return start, end


def _month_bounds(now: datetime) -> tuple[datetime, datetime]:
    start = datetime.combine(now.date().replace(day=1), time.min, now.tzinfo)
    next_month = (start.date() + timedelta(days=32)).replace(day=1)
    end = datetime.combine(next_month - timedelta(days=1), time.max, now.tzinfo)
    return start, end


class DashboardService:
    """Service for computing dashboard figures from already-fetched data."""

    def checkouts_on(self, day: date, bookings: Iterable[BookingRecord]) -> list[BookingRecord]:
        """Bookings ending on ``day``."""
        return sorted(
            (b for b in bookings if b.end_date == day),
            key=lambda b: b.end_date,
        )

    def upcoming_checkouts(
        self,
        bookings: Iterable[BookingRecord],
        today: date,
        days: int = UPCOMING_CHECKOUT_DAYS,
    ) -> list[BookingRecord]:
        """Bookings ending 1 to ``days`` days after ``today``."""
        return sorted(
            (b for b in bookings if 0 < (b.end_date - today).days <= days),
            key=lambda b: b.end_date,
        )

    def checkout_revenue(self, *groups: Iterable[BookingRecord]) -> Decimal:
        """Total price of the given checkout lists."""
        return sum((b.total_price for group in groups for b in group), Decimal("0"))

    def available_now_count(
        self,
        accommodations: Iterable[AccommodationRecord],
        bookings: Sequence[BookingRecord],
        today: date,
    ) -> int:
        """Accommodations with no confirmed booking covering today."""
        return sum(1 for a in accommodations if not is_occupied_on(a.id, today, bookings))

    def cash_totals(self, bookings: Iterable[BookingRecord], now: datetime) -> dict[str, Decimal]:
        """Cash collected overall, this week and this month.

        Only bookings with a cash amount count; the week and month windows
        use the booking's ``updated_at``.
        """
        cash = [b for b in bookings if b.payed_amount_cash is not None]
        week_start, week_end = _week_bounds(now)
        month_start, month_end = _month_bounds(now)

        def total(items: Iterable[BookingRecord]) -> Decimal:
            return sum((b.payed_amount_cash or Decimal("0") for b in items), Decimal("0"))

        def within(b: BookingRecord, start: datetime, end: datetime) -> bool:
            if b.updated_at is None:
                return False
            updated = b.updated_at
            if (updated.tzinfo is None) != (start.tzinfo is None):
                updated = updated.replace(tzinfo=start.tzinfo)
            return start <= updated <= end

        return {
            "total": total(cash),
            "week": total(b for b in cash if within(b, week_start, week_end)),
            "month": total(b for b in cash if within(b, month_start, month_end)),
        }

    def overview(
        self,
        accommodations: Sequence[AccommodationRecord],
        bookings: Sequence[BookingRecord],
        now: datetime,
    ) -> dict:
        """All dashboard figures in one payload."""
        today = now.date()
        todays = self.checkouts_on(today, bookings)
        upcoming = self.upcoming_checkouts(bookings, today)
        return {
            "accommodations": len(accommodations),
            "available_now": self.available_now_count(accommodations, bookings, today),
            "checkouts_today": len(todays),
            "upcoming_checkouts": len(upcoming),
            "checkout_revenue": self.checkout_revenue(todays, upcoming),
            "cash": self.cash_totals(bookings, now),
        }


# Singleton instance
dashboard_service = DashboardService()
