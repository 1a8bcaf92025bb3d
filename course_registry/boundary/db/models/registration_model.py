"""
Registration ORM model.

Join table for the many-to-many association between students and courses.
A course's registered students and a student's registered courses are both
read from these rows, so the two views cannot drift apart.

Dependencies: sqlalchemy, course_registry.boundary.db.base
System role: Student/course association persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from course_registry.boundary.db.base import Base, utc_now


class RegistrationModel(Base):
    """
    Registration row; the composite primary key forbids duplicates.

    Attributes:
        student_id: Registered student
        course_id: Course registered for
        registered_at: When the registration was committed (UTC)
    """

    __tablename__ = "registrations"

    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("students.id", ondelete="CASCADE"),
        primary_key=True,
    )
    course_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("courses.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
