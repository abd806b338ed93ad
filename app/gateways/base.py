"""Base payment gateway interface.

All gateway adapters must implement this interface.
Business logic should NOT live in adapters - only gateway communication.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class GatewayType(str, Enum):
    """Supported payment gateways."""

    KONNECT = "konnect"


@dataclass
class PaymentResult:
    """Result of a payment initiation."""

    success: bool
    transaction_id: str | None = None
    redirect_url: str | None = None
    error_message: str | None = None
    status_code: int | None = None
    raw_response: dict | None = None


class PaymentGateway(ABC):
    """Abstract base class for payment gateways."""

    @property
    @abstractmethod
    def gateway_type(self) -> GatewayType:
        """Return the gateway type."""
        pass

    @property
    def is_configured(self) -> bool:
        """Whether the credentials needed for live calls are present."""
        return True

    @abstractmethod
    async def create_payment(
        self,
        amount: int,
        currency: str,
        reference_id: str,
        description: str,
    ) -> PaymentResult:
        """Create a hosted payment and return where to send the payer.

        Args:
            amount: Amount in gateway units (millimes for TND)
            currency: Currency code the payer is charged in
            reference_id: Internal reference (booking id)
            description: Payment description

        Returns:
            PaymentResult with the redirect URL on success
        """
        pass
