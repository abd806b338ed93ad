"""Core utilities: exceptions, logging and middleware."""

from app.core.exceptions import (
    AppException,
    BookingNotPayable,
    DatesNotAvailable,
    ExternalServiceError,
    GatewayNotConfigured,
    InvalidCurrencyCode,
    InvalidDateRange,
    NotFoundError,
    PaymentError,
    PreferenceStoreUnavailable,
    ValidationError,
)

__all__ = [
    "AppException",
    "BookingNotPayable",
    "DatesNotAvailable",
    "ExternalServiceError",
    "GatewayNotConfigured",
    "InvalidCurrencyCode",
    "InvalidDateRange",
    "NotFoundError",
    "PaymentError",
    "PreferenceStoreUnavailable",
    "ValidationError",
]
