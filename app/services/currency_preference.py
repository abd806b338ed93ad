"""Selected-currency state and its persistence.

The visitor's currency choice is one plain currency-code string per
client, stored in a key-value store and read back as the default on
every visit.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Protocol

import redis.asyncio as redis

from app.config import settings
from app.core.exceptions import InvalidCurrencyCode

logger = logging.getLogger(__name__)

CURRENCY_CODE_RE = re.compile(r"^[A-Z]{3}$")


class KeyValueStore(Protocol):
    """Minimal string key-value port."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def close(self) -> None: ...


class InMemoryKeyValueStore:
    """Process-local store for tests and local development."""

    def __init__(self):
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def close(self) -> None:
        self._data.clear()


class RedisKeyValueStore:
    """Redis-backed store."""

    def __init__(self, redis_url: str | None = None):
        self.redis_url = redis_url or settings.redis_url
        self._redis: redis.Redis | None = None

    async def get_redis(self) -> redis.Redis:
        """Get Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._redis

    async def get(self, key: str) -> str | None:
        client = await self.get_redis()
        return await client.get(key)

    async def set(self, key: str, value: str) -> None:
        client = await self.get_redis()
        await client.set(key, value)

    async def close(self) -> None:
        """Close the Redis connection pool, if one was opened."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None


@dataclass(frozen=True)
class CurrencyState:
    """Currency currently selected by a visitor."""

    selected_currency_code: str


def set_currency(state: CurrencyState, code: str) -> CurrencyState:
    """Return a new state with ``code`` selected."""
    normalized = (code or "").strip().upper()
    if not CURRENCY_CODE_RE.match(normalized):
        raise InvalidCurrencyCode(code)
    return replace(state, selected_currency_code=normalized)


class CurrencyPreferenceStore:
    """Load and save the selected currency per client."""

    def __init__(
        self,
        store: KeyValueStore,
        key_prefix: str | None = None,
        default_code: str | None = None,
    ):
        self.store = store
        self.key_prefix = key_prefix or settings.currency_preference_key
        self.default_code = default_code or settings.base_currency

    def key_for(self, client_id: str) -> str:
        return f"{self.key_prefix}:{client_id}"

    async def load(self, client_id: str) -> CurrencyState:
        """Saved selection, or the base currency if none or unreadable."""
        try:
            code = await self.store.get(self.key_for(client_id))
        except redis.RedisError as e:
            logger.warning(f"Currency preference read failed for {client_id}: {e}")
            code = None

        if not code or not CURRENCY_CODE_RE.match(code):
            return CurrencyState(selected_currency_code=self.default_code)
        return CurrencyState(selected_currency_code=code)

    async def save(self, client_id: str, state: CurrencyState) -> None:
        """Persist the selection as a plain code string."""
        await self.store.set(self.key_for(client_id), state.selected_currency_code)

    async def close(self) -> None:
        await self.store.close()
