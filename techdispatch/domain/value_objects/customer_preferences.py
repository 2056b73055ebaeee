"""
Customer scheduling preferences.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from techdispatch.domain.value_objects.weekday import Weekday

NOON_MINUTES = 12 * 60
EVENING_MINUTES = 17 * 60


class TimeOfDay(str, Enum):
    """Coarse part of the day a customer prefers."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    @classmethod
    def of(cls, start_minutes: int) -> "TimeOfDay":
        """Classify a start time."""
        if start_minutes < NOON_MINUTES:
            return cls.MORNING
        if start_minutes < EVENING_MINUTES:
            return cls.AFTERNOON
        return cls.EVENING


@dataclass(frozen=True)
class CustomerPreferences:
    """Days and time of day a customer would like a visit."""

    preferred_days: List[Weekday] = field(default_factory=list)
    preferred_time: Optional[TimeOfDay] = None

    def prefers_day(self, day: Weekday) -> bool:
        return day in self.preferred_days

    def prefers_time(self, start_minutes: int) -> bool:
        return (
            self.preferred_time is not None
            and TimeOfDay.of(start_minutes) == self.preferred_time
        )
