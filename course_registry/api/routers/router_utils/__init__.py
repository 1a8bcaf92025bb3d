"""Shared helpers for API routers."""

from .error_handling import (
    handle_registration_errors,
    request_validation_handler,
    status_for,
)
from .responses import (
    CONFLICT_WARNING,
    map_conflict_to_response,
    map_course_to_response,
    map_courses_to_response,
    map_registration_to_response,
    map_student_to_response,
)

__all__ = [
    "handle_registration_errors",
    "request_validation_handler",
    "status_for",
    "CONFLICT_WARNING",
    "map_conflict_to_response",
    "map_course_to_response",
    "map_courses_to_response",
    "map_registration_to_response",
    "map_student_to_response",
]
