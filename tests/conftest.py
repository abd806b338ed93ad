from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base
from app.domain.records import BookingRecord


def make_booking(
    accommodation_id: int = 1,
    start: date = date(2024, 6, 1),
    end: date = date(2024, 6, 10),
    status: str = "confirmed",
    total_price: Decimal | int = Decimal("1000"),
    **extra,
) -> BookingRecord:
    return BookingRecord(
        id=extra.pop("id", uuid4()),
        accommodation_id=accommodation_id,
        start_date=start,
        end_date=end,
        status=status,
        total_price=total_price,
        **extra,
    )


@pytest.fixture
def booking_factory():
    return make_booking


@pytest.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()
