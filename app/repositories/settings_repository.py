"""Settings snapshot access."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.currency import DEFAULT_CURRENCIES
from app.domain.records import Currency, parse_rows
from app.models.settings import SiteSettings

logger = logging.getLogger(__name__)


class SettingsRepository:
    """Read the newest settings snapshot."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def latest(self) -> SiteSettings | None:
        """Most recently updated settings row."""
        result = await self.db.execute(
            select(SiteSettings).order_by(SiteSettings.updated_at.desc()).limit(1)
        )
        return result.scalar_one_or_none()

    async def currency_table(self) -> list[Currency]:
        """Currency table of the newest snapshot, or the built-in table.

        The built-in table is used when the fetch fails, no snapshot
        exists, or the snapshot has no valid currencies.
        """
        try:
            snapshot = await self.latest()
        except SQLAlchemyError as e:
            logger.warning(f"Settings fetch failed, using default currencies: {e}")
            return list(DEFAULT_CURRENCIES)

        if snapshot is None or not snapshot.currencies:
            logger.info("No currency table in settings, using default currencies")
            return list(DEFAULT_CURRENCIES)

        rows = [row for row in snapshot.currencies if isinstance(row, dict)]
        currencies = parse_rows(Currency, rows)
        if not currencies:
            logger.warning("Settings currency table has no valid entries, using default currencies")
            return list(DEFAULT_CURRENCIES)
        return currencies
