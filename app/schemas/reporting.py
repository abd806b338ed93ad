"""Dashboard reporting schemas."""

from decimal import Decimal

from pydantic import BaseModel


class CashTotals(BaseModel):
    """Cash collected by period."""

    total: Decimal
    week: Decimal
    month: Decimal


class DashboardOverview(BaseModel):
    """Schema for the admin dashboard overview."""

    accommodations: int
    available_now: int
    checkouts_today: int
    upcoming_checkouts: int
    checkout_revenue: Decimal
    cash: CashTotals
