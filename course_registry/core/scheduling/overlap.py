"""
Time window overlap checks.

Dependencies: course_registry.core.scheduling.time_parser
System role: Pairwise session comparison for conflict scanning
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from course_registry.core.scheduling.time_parser import parse_time

logger = logging.getLogger(__name__)


class Weekday(str, Enum):
    """Day a weekly session meets on."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


@dataclass(frozen=True)
class WeeklySession:
    """One recurring weekly time block of a course."""

    day: str
    start_time: str
    end_time: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WeeklySession":
        return cls(
            day=data["day"],
            start_time=data["start_time"],
            end_time=data["end_time"],
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "day": self.day,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }


def times_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """
    Check whether two half-open time windows intersect.

    Windows are [start1, end1) and [start2, end2), so sessions that only
    touch at a boundary do not overlap. If any time fails to parse the
    windows are reported as not overlapping.

    Args:
        start1: Start of the first window
        end1: End of the first window
        start2: Start of the second window
        end2: End of the second window

    Returns:
        bool: True if the windows intersect
    """
    s1, e1 = parse_time(start1), parse_time(end1)
    s2, e2 = parse_time(start2), parse_time(end2)

    if s1 is None or e1 is None or s2 is None or e2 is None:
        logger.debug(
            "Unparsable time treated as no overlap",
            extra={"first": f"{start1}-{end1}", "second": f"{start2}-{end2}"},
        )
        return False

    return s1 < e2 and s2 < e1


def sessions_overlap(a: WeeklySession, b: WeeklySession) -> bool:
    """Return True if both sessions meet on the same day and their times intersect."""
    if a.day != b.day:
        return False
    return times_overlap(a.start_time, a.end_time, b.start_time, b.end_time)
