"""
Request observability middleware.

CorrelationMiddleware binds an X-Correlation-ID to each request and echoes
it on the response. RequestLoggingMiddleware writes one line when a request
arrives and one when it completes, with status and latency. Health probes
are logged at DEBUG so they do not drown registration traffic.

Dependencies: starlette, course_registry.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from course_registry.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_PREFIXES = ("/api/v1/health",)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with method, path, status and latency."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        level = logging.DEBUG if path.startswith(QUIET_PATH_PREFIXES) else logging.INFO
        context = {
            "method": request.method,
            "path": path,
            "client_host": request.client.host if request.client else None,
        }
        started = time.perf_counter()

        logger.log(level, f"{request.method} {path}", extra=context)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {path} failed",
                extra={**context, "process_time_ms": _elapsed_ms(started), "error_type": type(e).__name__},
            )
            raise

        logger.log(
            level,
            f"{request.method} {path} -> {response.status_code}",
            extra={**context, "status_code": response.status_code, "process_time_ms": _elapsed_ms(started)},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind the caller's correlation ID, or a fresh one, for the request's lifetime."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
