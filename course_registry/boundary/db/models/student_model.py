"""
Student ORM model.

Dependencies: sqlalchemy, course_registry.boundary.db.base
System role: Student persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from course_registry.boundary.db.base import Base, TimestampMixin, UUIDMixin


class StudentModel(Base, UUIDMixin, TimestampMixin):
    """
    Student ORM model.

    Registered courses live in the registrations table rather than on this row.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        email: Unique contact address
    """

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
