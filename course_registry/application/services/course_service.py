"""
Course service orchestrator.

Coordinates course lifecycle operations for administrators and the course
listing for students.

Dependencies: course_registry.boundary.db.CRUD, course_registry.core
System role: Course use case orchestration
"""

import logging
from datetime import date
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.boundary.db.base import as_utc
from course_registry.boundary.db.CRUD.course_crud import course_crud
from course_registry.boundary.db.CRUD.registration_crud import registration_crud
from course_registry.boundary.db.models.course_model import CourseModel
from course_registry.core.exceptions import (
    CourseNotFoundError,
    InvalidCapacityError,
    InvalidCourseDataError,
    RegistrationException,
)

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel, student_ids: Sequence[UUID]) -> dict:
    """
    Flatten a course row and its registered student ids into a response dict.

    Args:
        course: Course ORM instance
        student_ids: Ids of the students registered for it

    Returns:
        dict: Course data matching CourseResponse
    """
    return {
        "id": course.id,
        "code": course.code,
        "name": course.name,
        "description": course.description,
        "start_date": course.start_date,
        "end_date": course.end_date,
        "capacity": course.capacity,
        "schedule": [session.to_dict() for session in course.weekly_sessions],
        "makeup_lectures": list(course.makeup_lectures or []),
        "exception_dates": list(course.exception_dates or []),
        "registered_students": list(student_ids),
        "available_spots": course.capacity - len(student_ids),
        "created_at": as_utc(course.created_at),
        "updated_at": as_utc(course.updated_at),
    }


def _iso(value: Any) -> Any:
    return value.isoformat() if isinstance(value, date) else value


def to_course_columns(fields: dict[str, Any]) -> dict[str, Any]:
    """Convert dates inside the JSON sub-document fields to ISO strings."""
    columns = dict(fields)
    if columns.get("schedule") is not None:
        columns["schedule"] = [dict(entry) for entry in columns["schedule"]]
    if columns.get("makeup_lectures") is not None:
        columns["makeup_lectures"] = [
            {key: _iso(val) for key, val in dict(entry).items()}
            for entry in columns["makeup_lectures"]
        ]
    if columns.get("exception_dates") is not None:
        columns["exception_dates"] = [_iso(d) for d in columns["exception_dates"]]
    return columns


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _load(self, course_id: UUID) -> CourseModel:
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise CourseNotFoundError(course_id)
        return course

    async def describe(self, course: CourseModel) -> dict:
        """Build the response dict for a course, including registered students."""
        student_ids = await registration_crud.student_ids_for_course(self.db, course.id)
        return course_to_dict(course, student_ids)

    async def create_course(
        self,
        code: str,
        name: str,
        start_date: date,
        end_date: date,
        capacity: int,
        description: str | None = None,
        schedule: list[dict] | None = None,
        makeup_lectures: list[dict] | None = None,
        exception_dates: list[date] | None = None,
    ) -> UUID:
        """
        Create a new course.

        Args:
            code: Course code
            name: Course name
            start_date: First day of the course
            end_date: Last day of the course
            capacity: Seat limit (already validated positive)
            description: Optional description
            schedule: Weekly sessions as {day, start_time, end_time} dicts
            makeup_lectures: Extra lectures as {date, start_time, end_time} dicts
            exception_dates: Dates with no classes

        Returns:
            UUID: Created course ID
        """
        columns = to_course_columns({
            "code": code,
            "name": name,
            "description": description,
            "start_date": start_date,
            "end_date": end_date,
            "capacity": capacity,
            "schedule": schedule or [],
            "makeup_lectures": makeup_lectures or [],
            "exception_dates": exception_dates or [],
        })
        try:
            course = await course_crud.create(self.db, registered_count=0, **columns)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "course_code": code},
            )
            raise

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_code": code, "capacity": capacity},
        )
        return course.id

    async def get_course(self, course_id: UUID) -> dict:
        """
        Get course by ID.

        Raises:
            CourseNotFoundError: If course not found
        """
        course = await self._load(course_id)
        return await self.describe(course)

    async def get_all_courses(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        Get all courses with pagination.

        Args:
            limit: Maximum number of courses to return
            offset: Number of courses to skip

        Returns:
            list[dict]: List of course dicts
        """
        courses = await course_crud.get_all(self.db, limit=limit, offset=offset)
        return [await self.describe(course) for course in courses]

    async def update_course(self, course_id: UUID, **updates: Any) -> dict:
        """
        Apply a partial update to a course.

        Capacity may not drop below the number of students already
        registered, and the merged date range must stay ordered.

        Args:
            course_id: Course UUID
            **updates: Validated fields to change

        Returns:
            dict: Updated course data

        Raises:
            CourseNotFoundError: If course not found
            InvalidCapacityError: If capacity is below current registrations
            InvalidCourseDataError: If end_date would precede start_date
        """
        try:
            course = await self._load(course_id)

            if not updates:
                return await self.describe(course)

            capacity = updates.get("capacity")
            if capacity is not None and capacity < course.registered_count:
                raise InvalidCapacityError(
                    f"Capacity cannot be lower than the {course.registered_count} "
                    "students already registered",
                    course_id=course_id,
                )

            start_date = updates.get("start_date", course.start_date)
            end_date = updates.get("end_date", course.end_date)
            if end_date < start_date:
                raise InvalidCourseDataError(
                    "end_date must not be before start_date",
                    course_id=course_id,
                )

            updated = await course_crud.update_by_id(
                self.db, course_id, **to_course_columns(updates)
            )
            if not updated:
                raise CourseNotFoundError(course_id)
            await self.db.commit()
            await self.db.refresh(updated)
        except RegistrationException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course updated",
            extra={"course_id": str(course_id), "updates": sorted(updates)},
        )
        return await self.describe(updated)

    async def delete_course(self, course_id: UUID) -> bool:
        """
        Delete a course together with its registrations.

        Returns:
            bool: True if deleted

        Raises:
            CourseNotFoundError: If course not found
        """
        try:
            released = await registration_crud.delete_for_course(self.db, course_id)
            deleted = await course_crud.delete_by_id(self.db, course_id)
            if not deleted:
                raise CourseNotFoundError(course_id)
            await self.db.commit()
        except RegistrationException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course deleted",
            extra={"course_id": str(course_id), "registrations_removed": released},
        )
        return True
