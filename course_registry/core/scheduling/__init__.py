"""
Weekly schedule logic: time parsing, overlap checks and conflict scanning.
"""

from course_registry.core.scheduling.conflicts import (
    ScheduledCourse,
    find_schedule_conflicts,
    has_schedule_conflict,
)
from course_registry.core.scheduling.overlap import (
    Weekday,
    WeeklySession,
    sessions_overlap,
    times_overlap,
)
from course_registry.core.scheduling.time_parser import (
    TIME_PATTERN,
    is_valid_time,
    parse_time,
)

__all__ = [
    "ScheduledCourse",
    "find_schedule_conflicts",
    "has_schedule_conflict",
    "Weekday",
    "WeeklySession",
    "sessions_overlap",
    "times_overlap",
    "TIME_PATTERN",
    "is_valid_time",
    "parse_time",
]
