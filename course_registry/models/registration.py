"""
Registration request/response schemas.

Dependencies: pydantic, course_registry.models
System role: Register/withdraw API contracts
"""

import uuid

from pydantic import AliasChoices, BaseModel, Field

from course_registry.models.course import CourseResponse
from course_registry.models.student import StudentResponse


class RegistrationRequest(BaseModel):
    """Body of a registration request."""

    student_id: uuid.UUID | None = Field(
        None,
        validation_alias=AliasChoices("student_id", "studentId"),
        description="Student to register",
    )
    confirm: bool = Field(
        False,
        description="Register even if the course clashes with the student's schedule",
    )


class WithdrawalRequest(BaseModel):
    """Body of a withdrawal request."""

    student_id: uuid.UUID | None = Field(
        None,
        validation_alias=AliasChoices("student_id", "studentId"),
        description="Student to withdraw",
    )


class RegistrationResponse(BaseModel):
    """Successful registration or withdrawal with both updated records."""

    message: str
    course: CourseResponse
    student: StudentResponse


class ConflictWarningResponse(BaseModel):
    """Soft warning returned instead of registering when schedules clash."""

    warning: str
    conflicting_courses: list[CourseResponse] = Field(
        ...,
        validation_alias=AliasChoices("conflicting_courses", "conflictingCourses"),
        serialization_alias="conflictingCourses",
        description="Registered courses whose weekly sessions clash with the requested one",
    )
