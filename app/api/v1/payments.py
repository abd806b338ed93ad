"""Payment endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import (
    get_booking_repository,
    get_currency_state,
    get_gateway_service,
    get_settings_repository,
)
from app.core.exceptions import NotFoundError
from app.repositories import BookingRepository, SettingsRepository
from app.schemas.payment import PaymentCreate, PaymentInitResponse
from app.services.currency_preference import CurrencyState, set_currency
from app.services.gateway_service import GatewayService

router = APIRouter()


@router.post("/init", response_model=PaymentInitResponse, status_code=status.HTTP_201_CREATED)
async def initiate_payment(
    payment_data: PaymentCreate,
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
    gateway: Annotated[GatewayService, Depends(get_gateway_service)],
) -> PaymentInitResponse:
    """Start a gateway payment for a booking and return the payment page URL."""
    booking = await bookings_repo.get(payment_data.booking_id)
    if booking is None:
        raise NotFoundError("Booking", str(payment_data.booking_id))

    if payment_data.currency:
        currency_state = set_currency(currency_state, payment_data.currency)

    currency_table = await settings_repo.currency_table()
    initiation = await gateway.start_payment(
        booking=booking,
        plan=payment_data.plan,
        currency_code=currency_state.selected_currency_code,
        currency_table=currency_table,
    )

    return PaymentInitResponse(
        booking_id=booking.id,
        plan=initiation.plan.value,
        currency=initiation.currency,
        amount_due=initiation.amount_due,
        gateway_amount=initiation.gateway_amount,
        pay_url=initiation.pay_url,
        payment_ref=initiation.payment_ref,
    )
