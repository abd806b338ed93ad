"""Custom middleware for the application."""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.config import settings

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0

# Responses carrying gateway redirect URLs or per-client state
NO_STORE_PREFIXES = ("/payments", "/preferences")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its client, status and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request details and timing.

        Args:
            request: Incoming request
            call_next: Next middleware/route handler

        Returns:
            Response: Route response with request id and timing headers
        """
        started = time.perf_counter()

        request_id = request.headers.get("X-Request-ID") or str(time.time_ns())
        request.state.request_id = request_id
        client_id = request.headers.get("X-Client-ID", "-")

        response = await call_next(request)

        duration = time.perf_counter() - started
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({duration:.3f}s) client={client_id} [{request_id}]"
        )
        if duration > SLOW_REQUEST_SECONDS:
            # Usually the unpaginated booking fetch or the gateway call
            logger.warning(
                f"SLOW REQUEST: {request.method} {request.url.path} took {duration:.3f}s"
            )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security and caching headers to responses."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        path = request.url.path.removeprefix(settings.api_prefix)
        if path.startswith(NO_STORE_PREFIXES):
            response.headers["Cache-Control"] = "no-store"

        if not settings.debug:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response
