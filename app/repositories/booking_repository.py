"""Booking list access.

A failed fetch degrades to an empty list, which makes every range look
available (fail-open). Callers that need to block on missing data must
check for that themselves.
"""

import logging
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.records import BookingRecord, parse_rows
from app.models.booking import Booking

logger = logging.getLogger(__name__)


class BookingRepository:
    """Read bookings from the external store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[BookingRecord]:
        """Fetch every booking across all accommodations."""
        try:
            result = await self.db.execute(select(Booking))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Booking fetch failed, continuing with no bookings: {e}")
            return []

        return parse_rows(BookingRecord, rows)

    async def get(self, booking_id: UUID) -> BookingRecord | None:
        """Fetch one booking, or None if missing or unreadable."""
        try:
            result = await self.db.execute(select(Booking).where(Booking.id == booking_id))
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Booking {booking_id} fetch failed: {e}")
            return None

        if row is None:
            return None
        try:
            return BookingRecord.model_validate(row, from_attributes=True)
        except ValidationError as e:
            logger.warning(f"Booking {booking_id} is malformed: {e.error_count()} error(s)")
            return None
