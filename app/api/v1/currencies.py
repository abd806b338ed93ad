"""Currency table, price formatting and currency preference endpoints."""

from decimal import Decimal
from typing import Annotated

import redis.asyncio as redis
from fastapi import APIRouter, Depends

from app.api.deps import get_client_id, get_currency_state, get_currency_store, get_settings_repository
from app.config import settings
from app.core.exceptions import PreferenceStoreUnavailable
from app.domain.currency import convert_price, find_currency, format_price
from app.repositories import SettingsRepository
from app.schemas.currency import (
    CurrencyPreference,
    CurrencyResponse,
    CurrencyTableResponse,
    FormattedPriceResponse,
)
from app.services.currency_preference import CurrencyPreferenceStore, CurrencyState, set_currency

router = APIRouter()


@router.get("/currencies", response_model=CurrencyTableResponse)
async def get_currencies(
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
) -> CurrencyTableResponse:
    """Current currency table (built-in table if none is configured)."""
    table = await settings_repo.currency_table()
    return CurrencyTableResponse(
        base_currency=settings.base_currency,
        currencies=[CurrencyResponse(code=c.code, name=c.name, rate=c.rate) for c in table],
    )


@router.get("/prices/format", response_model=FormattedPriceResponse)
async def format_amount(
    settings_repo: Annotated[SettingsRepository, Depends(get_settings_repository)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
    amount: Decimal | None = None,
    currency: str | None = None,
) -> FormattedPriceResponse:
    """Format a base-currency amount in the requested or saved currency."""
    code = currency or currency_state.selected_currency_code
    table = await settings_repo.currency_table()
    selected = find_currency(table, code)
    return FormattedPriceResponse(
        amount=amount,
        currency=code,
        converted=convert_price(amount, selected.rate) if amount and selected else None,
        display=format_price(amount, table, code),
    )


@router.get("/preferences/currency", response_model=CurrencyPreference)
async def get_currency_preference(
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
) -> CurrencyPreference:
    """Currency saved for the calling client."""
    return CurrencyPreference(currency=currency_state.selected_currency_code)


@router.put("/preferences/currency", response_model=CurrencyPreference)
async def update_currency_preference(
    request: CurrencyPreference,
    client_id: Annotated[str, Depends(get_client_id)],
    currency_state: Annotated[CurrencyState, Depends(get_currency_state)],
    store: Annotated[CurrencyPreferenceStore, Depends(get_currency_store)],
) -> CurrencyPreference:
    """Save the calling client's currency."""
    new_state = set_currency(currency_state, request.currency)
    try:
        await store.save(client_id, new_state)
    except redis.RedisError as e:
        raise PreferenceStoreUnavailable(str(e))
    return CurrencyPreference(currency=new_state.selected_currency_code)
