"""API-specific dependencies."""

from .dependencies import (
    get_course_service,
    get_registration_service,
    get_student_service,
)

__all__ = [
    "get_course_service",
    "get_registration_service",
    "get_student_service",
]
