"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from app.api.v1 import (
    availability,
    bookings,
    currencies,
    dashboard,
    listings,
    payments,
    search,
)

api_router = APIRouter()

# Availability
api_router.include_router(availability.router, prefix="/availability", tags=["Availability"])

# Search
api_router.include_router(search.router, prefix="/search", tags=["Search"])

# Accommodations
api_router.include_router(listings.router, prefix="/accommodations", tags=["Accommodations"])

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

# Currencies, prices and preferences
api_router.include_router(currencies.router, tags=["Currencies"])

# Payments
api_router.include_router(payments.router, prefix="/payments", tags=["Payments"])

# Dashboard
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
