"""
Course ORM model.

A course offering with a weekly schedule and a seat capacity. Schedule,
make-up lectures and exception dates are stored as JSON sub-documents.

Dependencies: sqlalchemy, course_registry.boundary.db.base
System role: Course persistence
"""

from datetime import date

from sqlalchemy import JSON, CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from course_registry.boundary.db.base import Base, TimestampMixin, UUIDMixin
from course_registry.core.scheduling import WeeklySession


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        code: Course code, e.g. "ECE 1786"
        name: Course title
        description: Optional free text
        start_date: First day of the course
        end_date: Last day of the course
        capacity: Maximum number of registered students
        registered_count: Current number of registrations, kept in step with
            the registrations table and guarded against capacity in SQL
        schedule: List of {day, start_time, end_time} weekly sessions
        makeup_lectures: List of {date, start_time, end_time} extra sessions
        exception_dates: ISO dates with no classes
    """

    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("capacity > 0", name="capacity_positive"),
        CheckConstraint(
            "registered_count >= 0 AND registered_count <= capacity",
            name="registered_within_capacity",
        ),
    )

    code: Mapped[str] = mapped_column(String(64), nullable=False, doc="Course code")
    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Course name")
    description: Mapped[str | None] = mapped_column(
        String(4096),
        nullable=True,
        default=None,
        doc="Course description",
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    registered_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    schedule: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    makeup_lectures: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    exception_dates: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    @property
    def weekly_sessions(self) -> list[WeeklySession]:
        return [WeeklySession.from_dict(entry) for entry in self.schedule or []]

    @property
    def available_spots(self) -> int:
        return self.capacity - self.registered_count
