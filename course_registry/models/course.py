"""
Course domain models and schemas.

Request/response schemas for course operations. Shape is enforced here;
business rules (weekday names, time formats, ranges, capacity) are checked
by the admin router's validators so they surface as 400 errors.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field


class ClassSession(BaseModel):
    """One recurring weekly meeting of a course."""

    day: str = Field(..., description="Weekday name, e.g. 'Monday'")
    start_time: str = Field(..., description="'HH:MM AM/PM' or 24-hour 'HH:MM'")
    end_time: str = Field(..., description="'HH:MM AM/PM' or 24-hour 'HH:MM'")


class MakeupLecture(BaseModel):
    """An extra one-off lecture outside the weekly schedule."""

    date: date
    start_time: str
    end_time: str


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    code: str = Field(..., min_length=1, max_length=64, description="Course code, e.g. 'ECE 1786'")
    name: str = Field(..., min_length=1, max_length=255, description="Course name")
    description: str | None = Field(None, max_length=4096, description="Course description")
    start_date: date = Field(..., description="Course start date")
    end_date: date = Field(..., description="Course end date")
    capacity: int = Field(..., description="Maximum number of registered students")
    schedule: list[ClassSession] = Field(default_factory=list, description="Weekly class hours")
    makeup_lectures: list[MakeupLecture] = Field(default_factory=list)
    exception_dates: list[date] = Field(default_factory=list, description="Dates with no classes")


class UpdateCourseRequest(BaseModel):
    """Request schema for updating a course. Omitted fields are left unchanged."""

    code: str | None = Field(None, min_length=1, max_length=64)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=4096)
    start_date: date | None = None
    end_date: date | None = None
    capacity: int | None = None
    schedule: list[ClassSession] | None = None
    makeup_lectures: list[MakeupLecture] | None = None
    exception_dates: list[date] | None = None


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    id: uuid.UUID
    code: str
    name: str
    description: str | None
    start_date: date
    end_date: date
    capacity: int
    schedule: list[ClassSession]
    makeup_lectures: list[MakeupLecture]
    exception_dates: list[date]
    registered_students: list[uuid.UUID]
    available_spots: int
    created_at: datetime
    updated_at: datetime


class DeleteCourseResponse(BaseModel):
    message: str
