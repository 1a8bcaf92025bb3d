"""
Schedule conflict scanning.

Finds the already-registered courses whose weekly sessions collide with a
candidate course.

Dependencies: course_registry.core.scheduling.overlap
System role: Conflict detection consulted by the registration workflow
"""

from typing import Protocol, Sequence, TypeVar
from uuid import UUID

from course_registry.core.scheduling.overlap import WeeklySession, sessions_overlap


class ScheduledCourse(Protocol):
    """Anything with an id and a weekly schedule."""

    @property
    def id(self) -> UUID: ...

    @property
    def weekly_sessions(self) -> Sequence[WeeklySession]: ...


CourseT = TypeVar("CourseT", bound=ScheduledCourse)


def has_schedule_conflict(course: ScheduledCourse, candidate: ScheduledCourse) -> bool:
    """Return True if any session of course overlaps any session of candidate."""
    for session in course.weekly_sessions:
        for candidate_session in candidate.weekly_sessions:
            if sessions_overlap(session, candidate_session):
                return True
    return False


def find_schedule_conflicts(
    registered: Sequence[CourseT],
    candidate: ScheduledCourse,
) -> list[CourseT]:
    """
    List registered courses that collide with the candidate course.

    Each registered course is reported at most once, on its first
    overlapping session, and in the order given. The candidate itself is
    skipped if it appears among the registered courses.

    Args:
        registered: Courses the student is already registered for
        candidate: Course the student wants to register for

    Returns:
        list: Registered courses with at least one overlapping session
    """
    return [
        course
        for course in registered
        if course.id != candidate.id and has_schedule_conflict(course, candidate)
    ]
