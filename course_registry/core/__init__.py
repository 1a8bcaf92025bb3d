"""
Core business logic module.

Contains the exception hierarchy and the weekly schedule logic.
"""

from course_registry.core.exceptions import (
    AlreadyRegisteredError,
    CourseFullError,
    CourseNotFoundError,
    InvalidCapacityError,
    InvalidCourseDataError,
    InvalidScheduleError,
    MissingFieldError,
    NotRegisteredError,
    RegistrationException,
    StudentAlreadyExistsError,
    StudentNotFoundError,
)

__all__ = [
    "AlreadyRegisteredError",
    "CourseFullError",
    "CourseNotFoundError",
    "InvalidCapacityError",
    "InvalidCourseDataError",
    "InvalidScheduleError",
    "MissingFieldError",
    "NotRegisteredError",
    "RegistrationException",
    "StudentAlreadyExistsError",
    "StudentNotFoundError",
]
