"""Site settings model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.database import Base


class SiteSettings(Base):
    """Admin-edited settings record.

    Every save from the admin screen bumps ``updated_at``; readers only
    ever use the newest row.
    """

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    facebook_verification_code: Mapped[str | None] = mapped_column(String(255))
    default_deposit_percentage: Mapped[int] = mapped_column(Integer, default=30)
    cancellation_period_hours: Mapped[int] = mapped_column(Integer, default=48)

    # [{"code": "EUR", "name": "Euro", "rate": 0.29}, ...]
    currencies: Mapped[list | None] = mapped_column(JSON)
    website_content: Mapped[dict | None] = mapped_column(JSON)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
