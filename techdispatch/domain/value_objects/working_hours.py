"""
Working hours value objects.
"""

from dataclasses import dataclass
from enum import Enum

from techdispatch.domain.value_objects.clock import clock_to_minutes


class DayAvailability(str, Enum):
    """How a technician's calendar treats a given weekday."""

    SCHEDULED_ON = "scheduled_on"
    SCHEDULED_OFF = "scheduled_off"
    DEFAULT = "default"  # nothing configured, treated as available

    @property
    def is_working(self) -> bool:
        return self != DayAvailability.SCHEDULED_OFF


@dataclass(frozen=True)
class DayHours:
    """Configured hours for one weekday."""

    enabled: bool = True
    start: str = "08:00"
    end: str = "17:00"

    def __post_init__(self):
        """Validate clock strings."""
        if clock_to_minutes(self.end) < clock_to_minutes(self.start):
            raise ValueError("Working day cannot end before it starts")

    @property
    def start_minutes(self) -> int:
        return clock_to_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return clock_to_minutes(self.end)

    @property
    def length_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"enabled": self.enabled, "start": self.start, "end": self.end}
