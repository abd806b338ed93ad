"""Payment gateway service.

Turns a booking and a payment plan into a gateway payment. Amount rules
live in ``app.domain.payment_plan``; the adapter only talks HTTP.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from app.config import settings
from app.core.exceptions import BookingNotPayable, GatewayNotConfigured, PaymentError, ValidationError
from app.domain.currency import format_price
from app.domain.payment_plan import PaymentPlan, amount_due, gateway_amount
from app.domain.records import BookingRecord, BookingStatus, Currency
from app.gateways.base import PaymentGateway
from app.gateways.konnect import KonnectGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentInitiation:
    """A created gateway payment."""

    booking_id: str
    plan: PaymentPlan
    currency: str
    amount_due: Decimal
    gateway_amount: int
    pay_url: str
    payment_ref: str | None


class GatewayService:
    """Service for starting booking payments."""

    def __init__(self, gateway: PaymentGateway | None = None):
        self._gateway = gateway

    @property
    def gateway(self) -> PaymentGateway:
        """Get or create the gateway instance."""
        if self._gateway is None:
            self._gateway = KonnectGateway()
        return self._gateway

    def describe(self, booking: BookingRecord, plan: PaymentPlan) -> str:
        label = "Deposit" if plan == PaymentPlan.DEPOSIT else "Payment"
        return (
            f"{label} for booking {booking.id} "
            f"({booking.start_date.isoformat()} - {booking.end_date.isoformat()})"
        )

    async def start_payment(
        self,
        booking: BookingRecord,
        plan: str | PaymentPlan,
        currency_code: str,
        currency_table: Sequence[Currency],
    ) -> PaymentInitiation:
        """Create a gateway payment for a booking.

        Args:
            booking: Booking being paid
            plan: deposit or full
            currency_code: Currency the payer selected
            currency_table: Current currency table

        Returns:
            PaymentInitiation with the gateway redirect URL

        Raises:
            ValidationError: If the plan is unknown
            BookingNotPayable: If the booking is cancelled
            GatewayNotConfigured: If the gateway has no credentials
            PaymentError: If the gateway rejects the request
        """
        try:
            plan = PaymentPlan(plan)
        except ValueError:
            raise ValidationError(f"Unknown payment plan '{plan}'")

        if booking.status == BookingStatus.CANCELLED:
            raise BookingNotPayable(booking.status)

        if not self.gateway.is_configured:
            raise GatewayNotConfigured(self.gateway.gateway_type.value)

        due = amount_due(booking.total_price, plan)
        display = format_price(due, currency_table, currency_code)
        try:
            amount = gateway_amount(due, currency_code, display, settings.base_currency)
        except ValueError as e:
            logger.error(f"Cannot derive gateway amount for booking {booking.id}: {e}")
            raise PaymentError()

        result = await self.gateway.create_payment(
            amount=amount,
            currency=currency_code,
            reference_id=str(booking.id),
            description=self.describe(booking, plan),
        )
        if not result.success or not result.redirect_url:
            logger.warning(
                f"Payment initiation failed for booking {booking.id}: {result.error_message}"
            )
            raise PaymentError()

        logger.info(
            f"Payment {result.transaction_id} started for booking {booking.id} "
            f"({plan.value}, {amount} {currency_code})"
        )
        return PaymentInitiation(
            booking_id=str(booking.id),
            plan=plan,
            currency=currency_code,
            amount_due=due,
            gateway_amount=amount,
            pay_url=result.redirect_url,
            payment_ref=result.transaction_id,
        )


# Singleton instance
gateway_service = GatewayService()
