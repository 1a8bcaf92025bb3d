"""
Registration error handling utilities.

Provides a decorator that turns domain exceptions into HTTPExceptions with
consistent logging across admin and student endpoints, and the handler that
reports malformed request bodies, paths and queries as 400 like every other
invalid input.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from course_registry.core.exceptions import (
    CourseNotFoundError,
    RegistrationException,
    StudentNotFoundError,
)
from course_registry.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def status_for(error: RegistrationException) -> int:
    """HTTP status for a domain error: 404 for missing records, 400 otherwise."""
    if isinstance(error, (CourseNotFoundError, StudentNotFoundError)):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def handle_registration_errors(func: F) -> F:
    """
    Decorator to handle registration errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with course/student context
    - Mapping domain exceptions to HTTP status codes
    - Ensuring uniform {"detail": ...} error bodies
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except RegistrationException as e:
            code = status_for(e)
            logger.warning(
                "Request rejected",
                extra={"status_code": code, "error_type": type(e).__name__, **e.log_context()},
            )
            raise HTTPException(status_code=code, detail=e.message)

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.errors(),
            )

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in registration operation",
                e,
                operation=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            )

    return wrapper  # type: ignore


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request parsing failures with 400 and the field errors as detail."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
