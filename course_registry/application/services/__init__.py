"""Service orchestrators."""

from .course_service import CourseService
from .registration_service import RegistrationResult, RegistrationService
from .student_service import StudentService

__all__ = [
    "CourseService",
    "RegistrationResult",
    "RegistrationService",
    "StudentService",
]
