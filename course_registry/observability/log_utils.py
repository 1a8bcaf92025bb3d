"""
Structured logging helpers.

Values attached to log records through ``extra`` are flattened to short
strings so a record never fails to format: UUIDs and dates become their
string form, short id lists are written out, larger collections are
summarised by size.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_LISTED_ITEMS = 5


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a value to a bounded string for a log record.

    Args:
        value: Value to convert
        max_length: Length after which the string is truncated

    Returns:
        str: Loggable representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple, set)):
        items = list(value)
        if len(items) <= MAX_LISTED_ITEMS and all(
            not isinstance(item, (list, tuple, set, dict)) for item in items
        ):
            text = "[" + ", ".join(str(item) for item in items) + "]"
        else:
            text = f"{type(value).__name__}({len(items)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        text = str(value)

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log message at level with every context value passed through safe_log_value."""
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with its traceback, type and message.

    Args:
        logger: Logger instance
        message: Log message
        exc: The exception being handled
        **context: Additional context such as the failing operation
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.exception(message, extra=extra)
