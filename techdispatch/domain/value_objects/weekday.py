"""
Weekday value object.
"""

from enum import Enum

from techdispatch.domain.value_objects.clock import DateLike, to_date


class Weekday(str, Enum):
    """Day of the week, ordered Monday first like date.weekday()."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_date(cls, value: DateLike) -> "Weekday":
        """Get the weekday of a date-like value."""
        return list(cls)[to_date(value).weekday()]

    @property
    def is_weekend(self) -> bool:
        """Check if the day falls on a weekend."""
        return self in [Weekday.SATURDAY, Weekday.SUNDAY]
