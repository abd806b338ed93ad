"""Stay pricing from nightly and per-month prices."""

from collections.abc import Mapping
from datetime import date, timedelta
from decimal import Decimal


def nightly_price_for_month(
    monthly_prices: Mapping[int, Decimal],
    month: int,
    default: Decimal | None,
) -> Decimal:
    """Nightly price for a calendar month, falling back to the default price.

    A missing or zero month price means no override for that month.
    """
    price = monthly_prices.get(month)
    if price:
        return price
    return default if default is not None else Decimal("0")


def count_nights(start: date, end: date) -> int:
    """Whole nights between check-in and check-out."""
    return max((end - start).days, 0)


def quote_stay(start: date, end: date, nightly_price: Decimal) -> Decimal:
    """Reservation total: nights times the nightly price."""
    return count_nights(start, end) * nightly_price


def sum_daily_prices(
    start: date,
    end: date,
    monthly_prices: Mapping[int, Decimal],
    default: Decimal | None,
) -> Decimal:
    """Total used when an admin edits booking dates.

    Every day from ``start`` through ``end`` is charged, the end day
    included, at the price of the month it falls in.
    """
    total = Decimal("0")
    current = start
    while current <= end:
        total += nightly_price_for_month(monthly_prices, current.month, default)
        current += timedelta(days=1)
    return total
