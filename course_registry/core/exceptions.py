"""
Exception hierarchy for the course registration backend.

Every condition the registration and course workflows detect is raised as a
subclass of RegistrationException and mapped to an HTTP status at the router
boundary.

Dependencies: None (pure domain layer)
System role: Centralized error taxonomy across services and routers
"""

from typing import Any
from uuid import UUID


class RegistrationException(Exception):
    """Base exception for all course registration errors."""

    def __init__(
        self,
        message: str,
        course_id: UUID | None = None,
        student_id: UUID | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            course_id: Course the error relates to, if any
            student_id: Student the error relates to, if any
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.course_id = course_id
        self.student_id = student_id
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def log_context(self) -> dict[str, Any]:
        """Structured context for log records."""
        return {
            "course_id": str(self.course_id) if self.course_id else None,
            "student_id": str(self.student_id) if self.student_id else None,
            "error": self.message,
            **self.details,
        }


class MissingFieldError(RegistrationException):
    """Raised when a required request field is absent."""

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(f"Missing required field: {field}", details={"field": field}, **kwargs)


class InvalidCourseDataError(RegistrationException):
    """Raised when course data breaks a business rule."""


class InvalidCapacityError(InvalidCourseDataError):
    """Raised when a capacity is not positive or is below current registrations."""


class InvalidScheduleError(InvalidCourseDataError):
    """Raised for unknown weekdays, malformed times or inverted time ranges."""


class CourseNotFoundError(RegistrationException):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: UUID) -> None:
        super().__init__("Course not found", course_id=course_id)


class StudentNotFoundError(RegistrationException):
    """Raised when a student cannot be found."""

    def __init__(self, student_id: UUID) -> None:
        super().__init__("Student not found", student_id=student_id)


class StudentAlreadyExistsError(RegistrationException):
    """Raised when a student with the same email already exists."""


class CourseFullError(RegistrationException):
    """Raised when a course has no seats left."""

    def __init__(self, course_id: UUID, student_id: UUID | None = None) -> None:
        super().__init__("Course is full", course_id=course_id, student_id=student_id)


class AlreadyRegisteredError(RegistrationException):
    """Raised when a student is already registered for a course."""

    def __init__(self, course_id: UUID, student_id: UUID) -> None:
        super().__init__(
            "Student is already registered for this course",
            course_id=course_id,
            student_id=student_id,
        )


class NotRegisteredError(RegistrationException):
    """Raised when withdrawing a student who is not registered."""

    def __init__(self, course_id: UUID, student_id: UUID) -> None:
        super().__init__(
            "Student is not registered for this course",
            course_id=course_id,
            student_id=student_id,
        )
