"""Typed records received from the external store.

Rows coming back from the data layer are validated here once. A booking
row is dropped only when it lacks the id, accommodation or dates the
availability check reads; unknown statuses and missing totals are kept so
the row still blocks its dates. Malformed rows are logged, never passed
on with ``None`` fields.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class BookingStatus(str, Enum):
    """Booking status values."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class BookingRecord(BaseModel):
    """Read-only view of a booking row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    accommodation_id: int
    user_id: UUID | None = None
    start_date: date
    end_date: date
    # Raw value; statuses added on the platform later must still block dates
    status: str = BookingStatus.PENDING.value
    total_price: Decimal = Decimal("0")
    payed_amount: Decimal | None = None
    payed_amount_cash: Decimal | None = None
    cash_payed_by: UUID | None = None
    has_collected_cash: bool = False
    updated_at: datetime | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def strip_time(cls, v: Any) -> Any:
        # the platform returns timestamps for bookings made from the date picker
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v

    @field_validator("has_collected_cash", mode="before")
    @classmethod
    def null_means_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def null_status_is_pending(cls, v: Any) -> Any:
        if v is None:
            return BookingStatus.PENDING.value
        return v.value if isinstance(v, BookingStatus) else v

    @field_validator("total_price", mode="before")
    @classmethod
    def null_total_is_zero(cls, v: Any) -> Any:
        return Decimal("0") if v is None else v

    @property
    def nights(self) -> int:
        """Number of nights between start and end."""
        return (self.end_date - self.start_date).days


class Currency(BaseModel):
    """Currency entry of a settings snapshot."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(pattern=r"^[A-Z]{3}$")
    name: str = ""
    rate: Decimal = Field(gt=0)  # units of this currency per one base unit


class AccommodationRecord(BaseModel):
    """Accommodation with its per-month nightly prices."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    location: str | None = None
    price_per_night: Decimal | None = None
    monthly_prices: dict[int, Decimal] = Field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Any) -> "AccommodationRecord":
        """Build from an ORM row with its ``prices`` relationship loaded."""
        monthly = {
            int(price.month): price.price_per_day
            for price in (getattr(row, "prices", None) or [])
            if price.price_per_day is not None
        }
        return cls(
            id=row.id,
            name=row.name,
            location=row.location,
            price_per_night=row.price_per_night,
            monthly_prices=monthly,
        )


RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_rows(model: type[RecordT], rows: Iterable[Any]) -> list[RecordT]:
    """Validate rows into records, skipping the malformed ones."""
    records: list[RecordT] = []
    skipped = 0
    for row in rows:
        try:
            records.append(model.model_validate(row, from_attributes=not isinstance(row, dict)))
        except ValidationError as e:
            skipped += 1
            logger.warning(f"Skipping malformed {model.__name__} row: {e.error_count()} error(s)")
    if skipped:
        logger.info(f"Parsed {len(records)} {model.__name__} rows, skipped {skipped}")
    return records
