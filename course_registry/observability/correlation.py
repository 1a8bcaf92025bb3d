"""
Request correlation IDs.

The ID lives in a ContextVar so it follows a request through awaits and is
picked up by the logging filter without being passed around.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar

MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    A caller-supplied ID is stripped and capped in length; a blank or
    missing one is replaced by a new UUID4.

    Returns:
        str: The ID now bound
    """
    value = (correlation_id or "").strip()[:MAX_CORRELATION_ID_LENGTH]
    if not value:
        value = str(uuid.uuid4())
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID, or "" outside a request."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
