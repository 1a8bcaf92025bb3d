"""
Course validation utilities.

Business logic validation not covered by Pydantic models: weekday names,
time formats, time ranges, date ranges and capacity.

Dependencies: course_registry.models.course, course_registry.core
System role: Course business logic validation
"""

from course_registry.core.exceptions import (
    InvalidCapacityError,
    InvalidCourseDataError,
    InvalidScheduleError,
)
from course_registry.core.scheduling import Weekday, is_valid_time, parse_time
from course_registry.models.course import (
    ClassSession,
    CreateCourseRequest,
    MakeupLecture,
    UpdateCourseRequest,
)

WEEKDAYS = {day.value for day in Weekday}

TIME_FORMAT_HINT = "Use 'HH:MM AM/PM' or 'HH:MM' (24-hour format)."


def validate_time_range(start_time: str, end_time: str) -> None:
    """
    Check both times are well formed and start strictly precedes end.

    Raises:
        InvalidScheduleError: If either time is malformed or the range is empty
    """
    for value in (start_time, end_time):
        if not is_valid_time(value):
            raise InvalidScheduleError(f"Invalid time format '{value}'. {TIME_FORMAT_HINT}")

    if parse_time(start_time) >= parse_time(end_time):
        raise InvalidScheduleError(
            f"Invalid time range: start_time {start_time} must be before end_time {end_time}"
        )


def validate_schedule(schedule: list[ClassSession]) -> None:
    """
    Validate weekly sessions.

    Raises:
        InvalidScheduleError: For an unknown weekday or a bad time range
    """
    for session in schedule:
        if session.day not in WEEKDAYS:
            raise InvalidScheduleError(
                f"Invalid schedule day '{session.day}'. Expected one of: "
                + ", ".join(day.value for day in Weekday)
            )
        validate_time_range(session.start_time, session.end_time)


def validate_makeup_lectures(lectures: list[MakeupLecture]) -> None:
    for lecture in lectures:
        validate_time_range(lecture.start_time, lecture.end_time)


def validate_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise InvalidCapacityError("Capacity must be a positive integer")


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request with business rules.

    Args:
        request: CreateCourseRequest

    Raises:
        InvalidCourseDataError: If business validation fails
    """
    if not request.code.strip():
        raise InvalidCourseDataError("Course code cannot be empty or whitespace-only")

    if not request.name.strip():
        raise InvalidCourseDataError("Course name cannot be empty or whitespace-only")

    validate_capacity(request.capacity)

    if request.end_date < request.start_date:
        raise InvalidCourseDataError("end_date must not be before start_date")

    validate_schedule(request.schedule)
    validate_makeup_lectures(request.makeup_lectures)


def validate_course_update(request: UpdateCourseRequest) -> None:
    """
    Validate course update request with business rules.

    Rules that depend on stored state (capacity versus current
    registrations, a date range split across request and record) are
    checked by CourseService.

    Args:
        request: UpdateCourseRequest with optional fields

    Raises:
        InvalidCourseDataError: If business validation fails
    """
    if not request.model_fields_set:
        raise InvalidCourseDataError("At least one field must be provided for update")

    if request.code is not None and not request.code.strip():
        raise InvalidCourseDataError("Course code cannot be empty or whitespace-only")

    if request.name is not None and not request.name.strip():
        raise InvalidCourseDataError("Course name cannot be empty or whitespace-only")

    if request.capacity is not None:
        validate_capacity(request.capacity)

    if request.start_date and request.end_date and request.end_date < request.start_date:
        raise InvalidCourseDataError("end_date must not be before start_date")

    if request.schedule is not None:
        validate_schedule(request.schedule)

    if request.makeup_lectures is not None:
        validate_makeup_lectures(request.makeup_lectures)
