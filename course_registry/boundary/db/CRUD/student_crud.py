"""
Student CRUD operations.

Dependencies: sqlalchemy, course_registry.boundary.db.models
System role: Student persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.boundary.db.CRUD.base_crud import BaseCRUD
from course_registry.boundary.db.models.student_model import StudentModel


class StudentCRUD(BaseCRUD[StudentModel]):
    """CRUD operations for StudentModel with lookup by email."""

    def __init__(self) -> None:
        super().__init__(StudentModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> StudentModel | None:
        """
        Retrieve a student by email address.

        Args:
            session: Async database session
            email: Email to match; compared stripped and lower-cased, as stored

        Returns:
            StudentModel if found, None otherwise
        """
        stmt = select(StudentModel).where(StudentModel.email == email.strip().lower())
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


student_crud = StudentCRUD()
