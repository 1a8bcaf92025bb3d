"""
Registration CRUD operations.

Reads and writes the student/course join rows. Not a BaseCRUD subclass since
rows are keyed by (student_id, course_id) rather than a UUID id.

Dependencies: sqlalchemy, course_registry.boundary.db.models
System role: Student/course association persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.boundary.db.models.registration_model import RegistrationModel


class RegistrationCRUD:
    """CRUD operations for RegistrationModel."""

    model = RegistrationModel

    async def add(
        self,
        session: AsyncSession,
        student_id: UUID,
        course_id: UUID,
    ) -> RegistrationModel:
        """
        Insert a registration row.

        Raises:
            IntegrityError: If the pair is already registered
        """
        instance = RegistrationModel(student_id=student_id, course_id=course_id)
        session.add(instance)
        await session.flush()
        return instance

    async def remove(self, session: AsyncSession, student_id: UUID, course_id: UUID) -> bool:
        """
        Delete a registration row.

        Returns:
            True if a row was deleted, False if the pair was not registered
        """
        stmt = delete(RegistrationModel).where(
            RegistrationModel.student_id == student_id,
            RegistrationModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, student_id: UUID, course_id: UUID) -> bool:
        stmt = select(RegistrationModel.course_id).where(
            RegistrationModel.student_id == student_id,
            RegistrationModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def student_ids_for_course(self, session: AsyncSession, course_id: UUID) -> Sequence[UUID]:
        """Student ids registered for a course, oldest registration first."""
        stmt = (
            select(RegistrationModel.student_id)
            .where(RegistrationModel.course_id == course_id)
            .order_by(RegistrationModel.registered_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def course_ids_for_student(self, session: AsyncSession, student_id: UUID) -> Sequence[UUID]:
        """Course ids a student is registered for, oldest registration first."""
        stmt = (
            select(RegistrationModel.course_id)
            .where(RegistrationModel.student_id == student_id)
            .order_by(RegistrationModel.registered_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_for_course(self, session: AsyncSession, course_id: UUID) -> int:
        """
        Delete every registration for a course.

        Returns:
            int: Number of rows deleted
        """
        stmt = delete(RegistrationModel).where(RegistrationModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.rowcount


registration_crud = RegistrationCRUD()
