"""Konnect payment gateway adapter.

Hosted checkout for the Tunisian market: the API returns a ``payUrl``
the payer is redirected to, and the payer comes back to the configured
success or fail URL.
"""

import logging

import httpx

from app.config import settings
from app.gateways.base import GatewayType, PaymentGateway, PaymentResult

logger = logging.getLogger(__name__)


class KonnectGateway(PaymentGateway):
    """Konnect payment gateway implementation."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        api_url: str | None = None,
        api_key: str | None = None,
        receiver_wallet_id: str | None = None,
    ):
        self.api_url = (api_url or settings.konnect_api_url).rstrip("/")
        self.api_key = api_key or settings.konnect_api_key
        self.receiver_wallet_id = receiver_wallet_id or settings.konnect_receiver_wallet_id
        self.accepted_payment_methods = list(settings.konnect_payment_methods)
        self.success_url = settings.konnect_success_url
        self.fail_url = settings.konnect_fail_url
        self.timeout = settings.konnect_timeout_seconds
        self._client = client

    @property
    def gateway_type(self) -> GatewayType:
        return GatewayType.KONNECT

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.receiver_wallet_id)

    def build_payload(
        self,
        amount: int,
        currency: str,
        reference_id: str,
        description: str,
    ) -> dict:
        """Request body for ``payments/init-payment``."""
        return {
            "receiverWalletId": self.receiver_wallet_id,
            "token": currency,
            "amount": amount,
            "type": "immediate",
            "description": description,
            "acceptedPaymentMethods": self.accepted_payment_methods,
            "orderId": reference_id,
            "successUrl": self.success_url,
            "failUrl": self.fail_url,
        }

    async def _post(self, payload: dict) -> httpx.Response:
        headers = {"x-api-key": self.api_key or ""}
        url = f"{self.api_url}/payments/init-payment"
        if self._client is not None:
            return await self._client.post(url, json=payload, headers=headers, timeout=self.timeout)
        async with httpx.AsyncClient() as client:
            return await client.post(url, json=payload, headers=headers, timeout=self.timeout)

    async def create_payment(
        self,
        amount: int,
        currency: str,
        reference_id: str,
        description: str,
    ) -> PaymentResult:
        """Create a Konnect hosted payment."""
        if not self.is_configured:
            return PaymentResult(
                success=False,
                error_message="Konnect credentials not configured",
            )

        payload = self.build_payload(amount, currency, reference_id, description)

        try:
            response = await self._post(payload)
        except httpx.HTTPError as e:
            logger.error(f"Konnect request failed for {reference_id}: {e}")
            return PaymentResult(success=False, error_message=str(e))

        if not response.is_success:
            logger.error(
                f"Konnect returned {response.status_code} for {reference_id}: {response.text[:200]}"
            )
            return PaymentResult(
                success=False,
                error_message=f"API returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Konnect returned a non-JSON body for {reference_id}")
            return PaymentResult(
                success=False,
                error_message="Invalid gateway response",
                status_code=response.status_code,
            )

        pay_url = data.get("payUrl")
        if not pay_url:
            return PaymentResult(
                success=False,
                error_message="Gateway response has no payUrl",
                status_code=response.status_code,
                raw_response=data,
            )

        return PaymentResult(
            success=True,
            transaction_id=data.get("paymentRef"),
            redirect_url=pay_url,
            status_code=response.status_code,
            raw_response=data,
        )
