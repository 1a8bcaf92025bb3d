"""
Registration workflow.

Orchestrates registering a student for a course and withdrawing them again:
existence, capacity and duplicate checks, the schedule conflict scan, and
the transactional write of the registration row and seat count.

Dependencies: course_registry.boundary.db.CRUD, course_registry.core
System role: Registration use case orchestration
"""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.application.services.course_service import course_to_dict
from course_registry.application.services.student_service import student_to_dict
from course_registry.boundary.db.CRUD.course_crud import course_crud
from course_registry.boundary.db.CRUD.registration_crud import registration_crud
from course_registry.boundary.db.CRUD.student_crud import student_crud
from course_registry.boundary.db.models.course_model import CourseModel
from course_registry.boundary.db.models.student_model import StudentModel
from course_registry.core.exceptions import (
    AlreadyRegisteredError,
    CourseFullError,
    CourseNotFoundError,
    MissingFieldError,
    NotRegisteredError,
    RegistrationException,
    StudentNotFoundError,
)
from course_registry.core.scheduling import find_schedule_conflicts
from course_registry.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


@dataclass
class RegistrationResult:
    """
    Outcome of a register or withdraw call.

    When completed is False the student was not registered because the
    course clashes with conflicting_courses and the request was not
    confirmed; nothing was written.
    """

    course: dict
    student: dict
    completed: bool = True
    conflicting_courses: list[dict] = field(default_factory=list)

    @property
    def needs_confirmation(self) -> bool:
        return not self.completed and bool(self.conflicting_courses)


class RegistrationService:
    """Registration workflow orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize registration service with async database session.

        Args:
            db: Async SQLAlchemy session; this service commits or rolls it back
        """
        self.db = db

    async def _load_pair(
        self,
        course_id: UUID,
        student_id: UUID | None,
    ) -> tuple[CourseModel, StudentModel]:
        if student_id is None:
            raise MissingFieldError("student_id", course_id=course_id)

        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise CourseNotFoundError(course_id)

        student = await student_crud.get_by_id(self.db, student_id)
        if not student:
            raise StudentNotFoundError(student_id)

        return course, student

    async def _registered_courses(self, student_id: UUID) -> list[CourseModel]:
        course_ids = await registration_crud.course_ids_for_student(self.db, student_id)
        by_id = {c.id: c for c in await course_crud.get_many(self.db, course_ids)}
        return [by_id[cid] for cid in course_ids if cid in by_id]

    async def _snapshot(self, course: CourseModel, student: StudentModel) -> tuple[dict, dict]:
        student_ids = await registration_crud.student_ids_for_course(self.db, course.id)
        course_ids = await registration_crud.course_ids_for_student(self.db, student.id)
        return course_to_dict(course, student_ids), student_to_dict(student, course_ids)

    async def register(
        self,
        course_id: UUID,
        student_id: UUID | None,
        confirm: bool = False,
    ) -> RegistrationResult:
        """
        Register a student for a course.

        Schedule clashes with the student's other courses are a soft
        warning: unless confirm is set, nothing is written and the result
        lists the conflicting courses. The seat is taken with a conditional
        increment and the registration row is inserted in the same
        transaction, so a failure leaves both untouched.

        Args:
            course_id: Course to register for
            student_id: Student registering
            confirm: Register despite schedule conflicts

        Returns:
            RegistrationResult: Updated records, or the conflict warning

        Raises:
            MissingFieldError: If student_id is missing
            CourseNotFoundError: If the course does not exist
            StudentNotFoundError: If the student does not exist
            CourseFullError: If no seats are left
            AlreadyRegisteredError: If the student is already registered
        """
        try:
            course, student = await self._load_pair(course_id, student_id)

            if course.registered_count >= course.capacity:
                raise CourseFullError(course_id, student_id)

            if await registration_crud.exists(self.db, student_id, course_id):
                raise AlreadyRegisteredError(course_id, student_id)

            registered = await self._registered_courses(student_id)
            conflicts = find_schedule_conflicts(registered, course)

            if conflicts and not confirm:
                log_with_context(
                    logger,
                    logging.INFO,
                    "Registration paused on schedule conflict",
                    course_id=str(course_id),
                    student_id=str(student_id),
                    conflicting_course_ids=[str(c.id) for c in conflicts],
                )
                course_data, student_data = await self._snapshot(course, student)
                conflicting = [
                    course_to_dict(
                        c, await registration_crud.student_ids_for_course(self.db, c.id)
                    )
                    for c in conflicts
                ]
                return RegistrationResult(
                    course=course_data,
                    student=student_data,
                    completed=False,
                    conflicting_courses=conflicting,
                )

            if not await course_crud.try_reserve_seat(self.db, course_id):
                raise CourseFullError(course_id, student_id)

            try:
                await registration_crud.add(self.db, student_id, course_id)
            except IntegrityError as e:
                raise AlreadyRegisteredError(course_id, student_id) from e

            await self.db.commit()
            await self.db.refresh(course)
        except RegistrationException as e:
            await self.db.rollback()
            logger.warning("Registration rejected", extra=e.log_context())
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to register student",
                extra={"error": str(e), "course_id": str(course_id), "student_id": str(student_id)},
            )
            raise

        logger.info(
            "Student registered",
            extra={
                "course_id": str(course_id),
                "student_id": str(student_id),
                "forced_over_conflicts": bool(conflicts),
            },
        )
        course_data, student_data = await self._snapshot(course, student)
        return RegistrationResult(course=course_data, student=student_data)

    async def withdraw(self, course_id: UUID, student_id: UUID | None) -> RegistrationResult:
        """
        Withdraw a student from a course.

        Deletes the registration row and releases the seat in one
        transaction.

        Args:
            course_id: Course to withdraw from
            student_id: Student withdrawing

        Returns:
            RegistrationResult: Updated records

        Raises:
            MissingFieldError: If student_id is missing
            CourseNotFoundError: If the course does not exist
            StudentNotFoundError: If the student does not exist
            NotRegisteredError: If the student is not registered for the course
        """
        try:
            course, student = await self._load_pair(course_id, student_id)

            if not await registration_crud.remove(self.db, student_id, course_id):
                raise NotRegisteredError(course_id, student_id)

            await course_crud.release_seat(self.db, course_id)
            await self.db.commit()
            await self.db.refresh(course)
        except RegistrationException as e:
            await self.db.rollback()
            logger.warning("Withdrawal rejected", extra=e.log_context())
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to withdraw student",
                extra={"error": str(e), "course_id": str(course_id), "student_id": str(student_id)},
            )
            raise

        logger.info(
            "Student withdrawn",
            extra={"course_id": str(course_id), "student_id": str(student_id)},
        )
        course_data, student_data = await self._snapshot(course, student)
        return RegistrationResult(course=course_data, student=student_data)
