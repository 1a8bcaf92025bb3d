"""
Wall-clock time parsing.

Converts human time strings ("2:30 PM", "14:30") into minutes since midnight.

Dependencies: re (stdlib)
System role: Leaf parser for schedule overlap checks and schedule validation
"""

import re

TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s?(AM|PM)?", re.ASCII)


def parse_time(value: str) -> int | None:
    """
    Parse a time string into minutes since midnight.

    A trailing AM/PM marker converts from 12-hour time: 12 AM is hour 0,
    12 PM stays 12 and any other PM hour adds 12. Without a marker the hour
    is read as 24-hour time. Only the pattern is checked, so "25:00" parses
    to 1500. The whole string must match and only ASCII digits count.

    Args:
        value: Time string such as "2:30 PM" or "14:30"

    Returns:
        int | None: Minutes since midnight, or None if the string does not match
    """
    match = TIME_PATTERN.fullmatch(value)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3)

    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0

    return hours * 60 + minutes


def is_valid_time(value: str) -> bool:
    """Return True if the string matches the accepted time format."""
    return TIME_PATTERN.fullmatch(value) is not None
