"""Admin dashboard endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_accommodation_repository, get_booking_repository
from app.repositories import AccommodationRepository, BookingRepository
from app.schemas.reporting import DashboardOverview
from app.services.dashboard_service import dashboard_service

router = APIRouter()


@router.get("/overview", response_model=DashboardOverview)
async def get_overview(
    accommodations_repo: Annotated[AccommodationRepository, Depends(get_accommodation_repository)],
    bookings_repo: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> dict:
    """Occupancy, checkout and cash figures for the admin dashboard."""
    accommodations = await accommodations_repo.list_all()
    bookings = await bookings_repo.list_all()
    return dashboard_service.overview(accommodations, bookings, datetime.now(UTC))
