"""Display prices in the visitor's selected currency.

All stored prices are in the base currency (TND). Currency tables come
from the newest settings snapshot, with a built-in table used whenever
that snapshot is missing or empty.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache

from babel.numbers import format_currency

from app.config import settings
from app.domain.records import Currency

# Between 0 and 2 fraction digits; "," and "." are replaced by the locale's separators
DISPLAY_PATTERN = "#,##0.##\xa0¤"
ZERO_PATTERN = "#,##0\xa0¤"

DEFAULT_CURRENCIES: tuple[Currency, ...] = (
    Currency(code="TND", name="Tunisian Dinar", rate=Decimal("1")),
    Currency(code="EUR", name="Euro", rate=Decimal("0.29")),
    Currency(code="USD", name="US Dollar", rate=Decimal("0.32")),
)

PriceAmount = Decimal | int | float | None


def _to_decimal(amount: Decimal | int | float) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def _plain_number(amount: Decimal | int | float) -> str:
    """Render a number without exponent or trailing zeros (100, 99.5)."""
    value = _to_decimal(amount).normalize()
    return format(value, "f")


@lru_cache(maxsize=8)
def zero_price_display(base_currency: str | None = None, locale: str | None = None) -> str:
    """Fallback string shown for missing or zero prices."""
    return format_currency(
        0,
        base_currency or settings.base_currency,
        format=ZERO_PATTERN,
        locale=locale or settings.display_locale,
        currency_digits=False,
    )


def find_currency(currency_table: Sequence[Currency], code: str | None) -> Currency | None:
    """Look up a currency by exact code."""
    for currency in currency_table:
        if currency.code == code:
            return currency
    return None


def convert_price(amount: Decimal | int | float, rate: Decimal | int | float) -> Decimal:
    """Convert a base-currency amount, rounded to two decimals."""
    converted = _to_decimal(amount) * _to_decimal(rate)
    return converted.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_price(
    amount_in_base: PriceAmount,
    currency_table: Sequence[Currency],
    selected_code: str | None,
    *,
    base_currency: str | None = None,
    locale: str | None = None,
) -> str:
    """Format a base-currency price for display in the selected currency.

    Args:
        amount_in_base: Price in the base currency
        currency_table: Currencies with their rate against the base currency
        selected_code: Code of the currency to display
        base_currency: Base currency code (defaults to settings)
        locale: Babel locale for formatting (defaults to settings)

    Returns:
        str: Localized price, the zero fallback, or the unconverted amount
        suffixed with the base code when the currency is unknown
    """
    base_currency = base_currency or settings.base_currency
    locale = locale or settings.display_locale

    if not amount_in_base:
        return zero_price_display(base_currency, locale)

    currency = find_currency(currency_table, selected_code)
    if currency is None:
        return f"{_plain_number(amount_in_base)} {base_currency}"

    converted = _to_decimal(amount_in_base) * currency.rate
    return format_currency(
        converted,
        currency.code,
        format=DISPLAY_PATTERN,
        locale=locale,
        currency_digits=False,
    )
