"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from course_registry.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from course_registry.observability.logger import configure_logging
from course_registry.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "configure_logging",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
