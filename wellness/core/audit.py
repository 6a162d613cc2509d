"""
Audit Middleware - Request/response logging for monitoring.

Logs method, path, status code, duration and client IP for every
request. Request bodies are never logged since they carry contact details.
"""
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from wellness.core.logging_config import get_logger

logger = get_logger(__name__)

QUIET_PATHS = ("/health", "/health/ready")


class AuditMiddleware(BaseHTTPMiddleware):
    """Log every request with its timing and add an X-Response-Time header."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"REQUEST FAILED: {method} {path} "
                f"client={client_ip} duration={duration:.3f}s error={e}"
            )
            raise

        duration = time.time() - start_time
        self._log_request(method, path, response.status_code, duration, client_ip)
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response

    def _log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration: float,
        client_ip: str
    ) -> None:
        if path in QUIET_PATHS:
            logger.debug(f"HEALTH: {path} status={status_code} duration={duration:.3f}s")
            return

        if status_code >= 500:
            log_fn = logger.error
        elif status_code >= 400:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"REQUEST: {method} {path} "
            f"status={status_code} duration={duration:.3f}s client={client_ip}"
        )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add security headers to all responses.

    Headers added:
    - X-Content-Type-Options: nosniff
    - X-Frame-Options: DENY
    - X-XSS-Protection: 1; mode=block
    - Referrer-Policy: strict-origin-when-cross-origin
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response
