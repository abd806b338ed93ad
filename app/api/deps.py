"""API dependencies for data access and per-client state."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories import AccommodationRepository, BookingRepository, SettingsRepository
from app.services.currency_preference import (
    CurrencyPreferenceStore,
    CurrencyState,
    RedisKeyValueStore,
)
from app.services.gateway_service import GatewayService, gateway_service

ANONYMOUS_CLIENT = "anonymous"

_currency_store = CurrencyPreferenceStore(RedisKeyValueStore())


async def get_booking_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BookingRepository:
    return BookingRepository(db)


async def get_settings_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SettingsRepository:
    return SettingsRepository(db)


async def get_accommodation_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AccommodationRepository:
    return AccommodationRepository(db)


def get_currency_store() -> CurrencyPreferenceStore:
    """Shared currency preference store."""
    return _currency_store


async def close_currency_store() -> None:
    """Release the shared store's connections at shutdown."""
    await _currency_store.close()


def get_gateway_service() -> GatewayService:
    return gateway_service


async def get_client_id(
    x_client_id: Annotated[str | None, Header()] = None,
) -> str:
    """Client identifier the currency preference is stored under."""
    return (x_client_id or "").strip() or ANONYMOUS_CLIENT


async def get_currency_state(
    client_id: Annotated[str, Depends(get_client_id)],
    store: Annotated[CurrencyPreferenceStore, Depends(get_currency_store)],
) -> CurrencyState:
    """Currency selected by the calling client."""
    return await store.load(client_id)
