"""Application exceptions rendered as JSON error responses."""

from datetime import date
from typing import Any

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class ValidationError(AppException):
    """Request values the domain rules cannot work with."""

    def __init__(self, detail: str = "Validation failed", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class InvalidDateRange(ValidationError):
    """Check-out not after check-in, or a window that is too wide."""

    def __init__(self, start: date, end: date, reason: str = "end must be after start") -> None:
        super().__init__(
            detail=f"Invalid date range {start.isoformat()} - {end.isoformat()}: {reason}",
            errors=[{"field": "end", "message": reason}],
        )


class InvalidCurrencyCode(ValidationError):
    """Currency code that is not three letters."""

    def __init__(self, code: Any) -> None:
        super().__init__(
            detail=f"Invalid currency code '{code}'",
            errors=[{"field": "currency", "message": "expected a 3-letter code"}],
        )


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DatesNotAvailable(AppException):
    """Requested stay overlaps another booking of the accommodation."""

    def __init__(self, detail: str = "These dates are not available") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BookingNotPayable(AppException):
    """Payment requested for a booking in a state that cannot be paid."""

    def __init__(self, booking_status: str) -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"A {booking_status} booking cannot be paid",
        )


class PaymentError(AppException):
    """Payment processing error.

    The gateway's own message is never forwarded; callers get a generic
    failure notice.
    """

    def __init__(self, detail: str = "Payment processing failed") -> None:
        super().__init__(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail=detail)


class ExternalServiceError(AppException):
    """External service error."""

    def __init__(self, service: str, detail: str | None = None) -> None:
        message = f"External service '{service}' is unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=message)


class GatewayNotConfigured(ExternalServiceError):
    """Payment gateway credentials are missing."""

    def __init__(self, gateway: str) -> None:
        super().__init__(gateway, "credentials not configured")


class PreferenceStoreUnavailable(ExternalServiceError):
    """Currency preference could not be written."""

    def __init__(self, reason: str) -> None:
        super().__init__("preference store", reason)
