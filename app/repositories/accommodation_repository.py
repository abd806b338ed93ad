"""Accommodation access."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domain.records import AccommodationRecord
from app.models.listing import Accommodation

logger = logging.getLogger(__name__)


class AccommodationRepository:
    """Read accommodations with their monthly prices."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[AccommodationRecord]:
        """Fetch every accommodation."""
        try:
            result = await self.db.execute(
                select(Accommodation)
                .options(selectinload(Accommodation.prices))
                .order_by(Accommodation.id)
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Accommodation fetch failed: {e}")
            return []

        return [AccommodationRecord.from_row(row) for row in rows]
