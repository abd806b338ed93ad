"""Database models."""

from app.models.booking import Booking
from app.models.listing import Accommodation, AccommodationPrice
from app.models.settings import SiteSettings

__all__ = [
    # Listing
    "Accommodation",
    "AccommodationPrice",
    # Booking
    "Booking",
    # Settings
    "SiteSettings",
]
