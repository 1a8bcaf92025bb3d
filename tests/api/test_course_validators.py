"""Tests for course business-rule validation."""

from datetime import date

import pytest

from course_registry.api.routers.admin.course_validators import (
    validate_course_creation,
    validate_course_update,
    validate_schedule,
    validate_time_range,
)
from course_registry.core.exceptions import (
    InvalidCapacityError,
    InvalidCourseDataError,
    InvalidScheduleError,
)
from course_registry.models.course import (
    ClassSession,
    CreateCourseRequest,
    UpdateCourseRequest,
)


def make_request(**overrides) -> CreateCourseRequest:
    data = {
        "code": "CS 101",
        "name": "Intro",
        "start_date": date(2025, 1, 6),
        "end_date": date(2025, 4, 25),
        "capacity": 10,
        "schedule": [{"day": "Monday", "start_time": "9:00 AM", "end_time": "10:00 AM"}],
    }
    data.update(overrides)
    return CreateCourseRequest(**data)


class TestValidateTimeRange:
    def test_accepts_mixed_formats(self) -> None:
        validate_time_range("9:00 AM", "13:30")

    def test_rejects_equal_times(self) -> None:
        with pytest.raises(InvalidScheduleError):
            validate_time_range("10:00", "10:00 AM")

    def test_rejects_malformed_time(self) -> None:
        with pytest.raises(InvalidScheduleError, match="Invalid time format"):
            validate_time_range("noon", "1:00 PM")

    def test_rejects_trailing_newline(self) -> None:
        with pytest.raises(InvalidScheduleError, match="Invalid time format"):
            validate_time_range("10:00\n", "11:00\n")


class TestValidateSchedule:
    def test_rejects_unknown_day(self) -> None:
        with pytest.raises(InvalidScheduleError, match="Invalid schedule day"):
            validate_schedule([ClassSession(day="monday", start_time="9:00", end_time="10:00")])

    def test_empty_schedule_is_valid(self) -> None:
        validate_schedule([])


class TestValidateCourseCreation:
    def test_valid_request(self) -> None:
        validate_course_creation(make_request())

    def test_zero_capacity(self) -> None:
        with pytest.raises(InvalidCapacityError):
            validate_course_creation(make_request(capacity=0))

    def test_inverted_dates(self) -> None:
        with pytest.raises(InvalidCourseDataError):
            validate_course_creation(make_request(end_date=date(2025, 1, 1)))

    def test_bad_makeup_lecture(self) -> None:
        request = make_request(
            makeup_lectures=[{"date": date(2025, 3, 1), "start_time": "3:00 PM", "end_time": "2:00 PM"}]
        )
        with pytest.raises(InvalidScheduleError):
            validate_course_creation(request)


class TestValidateCourseUpdate:
    def test_requires_a_field(self) -> None:
        with pytest.raises(InvalidCourseDataError, match="At least one field"):
            validate_course_update(UpdateCourseRequest())

    def test_explicit_null_counts_as_field(self) -> None:
        validate_course_update(UpdateCourseRequest(description=None))

    def test_negative_capacity(self) -> None:
        with pytest.raises(InvalidCapacityError):
            validate_course_update(UpdateCourseRequest(capacity=-1))
