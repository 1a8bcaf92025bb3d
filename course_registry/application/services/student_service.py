"""
Student service orchestrator.

Dependencies: course_registry.boundary.db.CRUD, course_registry.core
System role: Student use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.application.services.course_service import CourseService
from course_registry.boundary.db.base import as_utc
from course_registry.boundary.db.CRUD.course_crud import course_crud
from course_registry.boundary.db.CRUD.registration_crud import registration_crud
from course_registry.boundary.db.CRUD.student_crud import student_crud
from course_registry.boundary.db.models.student_model import StudentModel
from course_registry.core.exceptions import (
    InvalidCourseDataError,
    StudentAlreadyExistsError,
    StudentNotFoundError,
)

logger = logging.getLogger(__name__)


def student_to_dict(student: StudentModel, course_ids: Sequence[UUID]) -> dict:
    """Flatten a student row and its registered course ids into a response dict."""
    return {
        "id": student.id,
        "name": student.name,
        "email": student.email,
        "registered_courses": list(course_ids),
        "created_at": as_utc(student.created_at),
        "updated_at": as_utc(student.updated_at),
    }


class StudentService:
    """Student service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def describe(self, student: StudentModel) -> dict:
        """Build the response dict for a student, including registered courses."""
        course_ids = await registration_crud.course_ids_for_student(self.db, student.id)
        return student_to_dict(student, course_ids)

    async def create_student(self, name: str, email: str) -> UUID:
        """
        Create a student record.

        Args:
            name: Display name
            email: Contact address, unique across students

        Returns:
            UUID: Created student ID

        Raises:
            InvalidCourseDataError: If the email is malformed
            StudentAlreadyExistsError: If the email is taken
        """
        email = email.strip().lower()
        if "@" not in email:
            raise InvalidCourseDataError("Invalid email address")

        if await student_crud.get_by_email(self.db, email):
            raise StudentAlreadyExistsError(f"A student with email {email} already exists")

        try:
            student = await student_crud.create(self.db, name=name.strip(), email=email)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise StudentAlreadyExistsError(f"A student with email {email} already exists") from e
        except Exception as e:
            await self.db.rollback()
            logger.error("Failed to create student", extra={"error": str(e)})
            raise

        logger.info("Student created", extra={"student_id": str(student.id)})
        return student.id

    async def get_student(self, student_id: UUID) -> dict:
        """
        Get student by ID.

        Raises:
            StudentNotFoundError: If student not found
        """
        student = await student_crud.get_by_id(self.db, student_id)
        if not student:
            raise StudentNotFoundError(student_id)
        return await self.describe(student)

    async def get_registered_courses(self, student_id: UUID) -> list[dict]:
        """
        List the courses a student is registered for, in registration order.

        Raises:
            StudentNotFoundError: If student not found
        """
        if not await student_crud.exists(self.db, student_id):
            raise StudentNotFoundError(student_id)

        course_ids = await registration_crud.course_ids_for_student(self.db, student_id)
        by_id = {c.id: c for c in await course_crud.get_many(self.db, course_ids)}
        course_service = CourseService(self.db)
        return [await course_service.describe(by_id[cid]) for cid in course_ids if cid in by_id]
