"""
Response mapping utilities.

Transforms service dictionaries into Pydantic response models.

Dependencies: course_registry.models, course_registry.application.services
System role: Response transformation shared by admin and student routers
"""

from typing import Any

from course_registry.application.services.registration_service import RegistrationResult
from course_registry.models.course import CourseResponse
from course_registry.models.registration import (
    ConflictWarningResponse,
    RegistrationResponse,
)
from course_registry.models.student import StudentResponse

CONFLICT_WARNING = (
    "Course schedule conflicts with courses you are already registered for. "
    "Resubmit with confirm=true to register anyway."
)


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary from CourseService / course_to_dict

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    return [map_course_to_response(course) for course in courses_data]


def map_student_to_response(student_data: dict[str, Any]) -> StudentResponse:
    return StudentResponse(**student_data)


def map_registration_to_response(result: RegistrationResult, message: str) -> RegistrationResponse:
    """
    Transform a completed registration or withdrawal into RegistrationResponse.

    Args:
        result: Outcome from RegistrationService
        message: Human-readable confirmation

    Returns:
        RegistrationResponse: message plus updated course and student
    """
    return RegistrationResponse(
        message=message,
        course=map_course_to_response(result.course),
        student=map_student_to_response(result.student),
    )


def map_conflict_to_response(result: RegistrationResult) -> ConflictWarningResponse:
    """Transform a paused registration into the soft conflict warning."""
    return ConflictWarningResponse(
        warning=CONFLICT_WARNING,
        conflicting_courses=map_courses_to_response(result.conflicting_courses),
    )
