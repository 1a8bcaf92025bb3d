"""
Course CRUD operations.

Adds the seat reservation statements used by the registration workflow.

Dependencies: sqlalchemy, course_registry.boundary.db.models
System role: Course persistence operations
"""

from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.boundary.db.CRUD.base_crud import BaseCRUD
from course_registry.boundary.db.models.course_model import CourseModel


class CourseCRUD(BaseCRUD[CourseModel]):
    """CRUD operations for CourseModel."""

    def __init__(self) -> None:
        super().__init__(CourseModel)

    async def try_reserve_seat(self, session: AsyncSession, id: UUID) -> bool:
        """
        Take one seat if the course still has room.

        The capacity check and the increment are a single conditional
        UPDATE, so two concurrent registrations cannot both take the last
        seat.

        Args:
            session: Async database session
            id: Course UUID

        Returns:
            True if a seat was reserved, False if the course is full or missing
        """
        stmt = (
            update(CourseModel)
            .where(
                CourseModel.id == id,
                CourseModel.registered_count < CourseModel.capacity,
            )
            .values(registered_count=CourseModel.registered_count + 1)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def release_seat(self, session: AsyncSession, id: UUID) -> bool:
        """
        Give back one seat.

        Args:
            session: Async database session
            id: Course UUID

        Returns:
            True if a seat was released, False if none were taken
        """
        stmt = (
            update(CourseModel)
            .where(CourseModel.id == id, CourseModel.registered_count > 0)
            .values(registered_count=CourseModel.registered_count - 1)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0


course_crud = CourseCRUD()
