"""
Clock and date helpers.

Times of day are handled as minute offsets from midnight and rendered as
zero-padded 24-hour "HH:MM" strings.
"""

import re
from datetime import date, datetime
from typing import Union

from techdispatch.domain.exceptions.validation_error import InvalidFormatError

DateLike = Union[date, datetime, str]

_CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def minutes_to_clock(minutes: int) -> str:
    """Convert minutes from midnight to "HH:MM"."""
    minutes = int(minutes)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def clock_to_minutes(clock: str) -> int:
    """Convert "HH:MM" (optionally "HH:MM:SS") to minutes from midnight."""
    match = _CLOCK_PATTERN.match(clock or "")
    if not match:
        raise InvalidFormatError("time", "HH:MM", clock)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 24 or minutes > 59 or (hours == 24 and minutes > 0):
        raise InvalidFormatError("time", "HH:MM", clock)
    return hours * 60 + minutes


def format_clock_display(clock: str) -> str:
    """Render "14:30" as "2:30 PM"."""
    if not clock:
        return ""
    total = clock_to_minutes(clock)
    hours, minutes = divmod(total, 60)
    suffix = "PM" if hours >= 12 else "AM"
    hour = hours % 12 or 12
    return f"{hour}:{minutes:02d} {suffix}"


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime or ISO-8601 string to a calendar date.

    No timezone conversion is applied; callers normalize beforehand.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        except ValueError:
            raise InvalidFormatError("date", "YYYY-MM-DD", value) from None
    raise InvalidFormatError("date", "date, datetime or ISO string", value)
