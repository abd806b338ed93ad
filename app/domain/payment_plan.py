"""Payment plan domain logic.

Plans:
- deposit: 30% of the total now, the rest later
- full: the whole total now

The gateway takes integer amounts. For the base currency that is
millimes (x1000). For any other currency the amount is re-read from the
displayed price string by keeping only its digits; the gateway
integration was validated against exactly those values, so the
conversion stays string based.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

# Millimes per dinar
BASE_MINOR_UNITS = 1000


class PaymentPlan(str, Enum):
    """Payment plan types."""

    DEPOSIT = "deposit"
    FULL = "full"


PLAN_FRACTIONS: dict[PaymentPlan, Decimal] = {
    PaymentPlan.DEPOSIT: Decimal("0.30"),
    PaymentPlan.FULL: Decimal("1.00"),
}


@dataclass(frozen=True)
class PaymentSplit:
    """Amount due now and amount deferred."""

    deposit: Decimal
    remaining: Decimal


def _to_decimal(amount: Decimal | int | float) -> Decimal:
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def calculate_payments(total_price: Decimal | int | float) -> PaymentSplit:
    """Split a total into the deposit and the remaining balance.

    Only the deposit is rounded (to whole units); the remaining balance is
    the exact difference so both legs always add up to the total.

    Args:
        total_price: Booking total in base currency

    Returns:
        PaymentSplit with deposit and remaining amounts
    """
    total = _to_decimal(total_price)
    deposit = (total * PLAN_FRACTIONS[PaymentPlan.DEPOSIT]).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )
    return PaymentSplit(deposit=deposit, remaining=total - deposit)


def amount_due(total_price: Decimal | int | float, plan: str | PaymentPlan = PaymentPlan.FULL) -> Decimal:
    """Amount to charge now for the given plan."""
    if isinstance(plan, str):
        plan = PaymentPlan(plan)

    if plan == PaymentPlan.FULL:
        return _to_decimal(total_price)
    return calculate_payments(total_price).deposit


def gateway_amount(
    amount: Decimal | int | float,
    selected_code: str,
    display_price: str | None,
    base_currency: str,
) -> int:
    """Integer amount sent to the payment gateway.

    Args:
        amount: Amount due in base currency
        selected_code: Currency the visitor pays in
        display_price: Price as formatted for the visitor (used for foreign currencies)
        base_currency: Base currency code

    Returns:
        int: Amount in gateway units

    Raises:
        ValueError: If a foreign-currency display string holds no digits
    """
    if selected_code == base_currency:
        return int(_to_decimal(amount) * BASE_MINOR_UNITS)

    digits = re.sub(r"\D", "", display_price or "")
    if not digits:
        raise ValueError(f"No amount in display price {display_price!r}")
    return int(digits)
