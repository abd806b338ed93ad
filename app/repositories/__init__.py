"""Read-only repositories over the external store."""

from app.repositories.accommodation_repository import AccommodationRepository
from app.repositories.booking_repository import BookingRepository
from app.repositories.settings_repository import SettingsRepository

__all__ = [
    "AccommodationRepository",
    "BookingRepository",
    "SettingsRepository",
]
