"""
Technician domain entity.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from techdispatch.domain.value_objects.clock import DateLike
from techdispatch.domain.value_objects.location import Coordinates
from techdispatch.domain.value_objects.skills import matches_any_skill
from techdispatch.domain.value_objects.weekday import Weekday
from techdispatch.domain.value_objects.working_hours import DayAvailability, DayHours

DEFAULT_MAX_JOBS_PER_DAY = 4
DEFAULT_MAX_HOURS_PER_DAY = 8.0
DEFAULT_MAX_TRAVEL_MILES = 30
DEFAULT_BUFFER_MINUTES = 30


@dataclass
class Technician:
    """A schedulable field technician."""

    id: str
    name: str
    working_hours: Optional[Dict[Weekday, DayHours]] = None
    max_jobs_per_day: int = DEFAULT_MAX_JOBS_PER_DAY
    max_hours_per_day: float = DEFAULT_MAX_HOURS_PER_DAY
    skills: List[str] = field(default_factory=list)
    specialties: List[str] = field(default_factory=list)
    certifications: List[str] = field(default_factory=list)
    home_zip: Optional[str] = None
    max_travel_miles: float = DEFAULT_MAX_TRAVEL_MILES
    preferred_zones: List[str] = field(default_factory=list)
    default_buffer_minutes: int = DEFAULT_BUFFER_MINUTES
    home_base: Optional[Coordinates] = None

    def __post_init__(self):
        """Validate and apply capacity defaults."""
        if not self.id or not str(self.id).strip():
            raise ValueError("Technician id is required")
        # Unset (zero) limits fall back to the defaults
        self.max_jobs_per_day = self.max_jobs_per_day or DEFAULT_MAX_JOBS_PER_DAY
        self.max_hours_per_day = self.max_hours_per_day or DEFAULT_MAX_HOURS_PER_DAY
        self.max_travel_miles = self.max_travel_miles or DEFAULT_MAX_TRAVEL_MILES
        self.default_buffer_minutes = (
            self.default_buffer_minutes or DEFAULT_BUFFER_MINUTES
        )
        if self.working_hours is not None:
            self.working_hours = {
                Weekday(day): hours for day, hours in self.working_hours.items()
            }

    @property
    def all_skills(self) -> List[str]:
        return [*self.skills, *self.specialties]

    @property
    def is_generalist(self) -> bool:
        """A technician with no declared skills takes any job."""
        return not self.all_skills

    def has_skills(self, required_skills: List[str]) -> bool:
        """Check whether any of the required skills is covered."""
        if not required_skills or self.is_generalist:
            return True
        return matches_any_skill(required_skills, self.all_skills)

    def has_any_certification(self, required: List[str]) -> bool:
        """Check certifications; jobs without requirements always pass."""
        if not required:
            return True
        return any(cert in self.certifications for cert in required)

    def availability_on(self, day: DateLike) -> DayAvailability:
        """How this technician's calendar treats the weekday of a date."""
        if self.working_hours is None:
            return DayAvailability.DEFAULT
        hours = self.working_hours.get(Weekday.from_date(day))
        if hours is None:
            return DayAvailability.DEFAULT
        return DayAvailability.SCHEDULED_ON if hours.enabled else DayAvailability.SCHEDULED_OFF

    def is_working_on(self, day: DateLike) -> bool:
        return self.availability_on(day).is_working

    def working_hours_for(self, day: DateLike) -> Optional[DayHours]:
        """Configured hours for the weekday of a date; None if disabled or unset."""
        if self.working_hours is None:
            return None
        hours = self.working_hours.get(Weekday.from_date(day))
        if hours is None or not hours.enabled:
            return None
        return hours

    def jobs_among(self, jobs: list) -> list:
        """Jobs from a day's list that are assigned to this technician."""
        return [job for job in jobs if job.is_assigned_to(self.id)]

    def to_dict(self) -> dict:
        """Convert technician to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "working_hours": {
                day.value: hours.to_dict() for day, hours in self.working_hours.items()
            }
            if self.working_hours is not None
            else None,
            "max_jobs_per_day": self.max_jobs_per_day,
            "max_hours_per_day": self.max_hours_per_day,
            "skills": list(self.skills),
            "specialties": list(self.specialties),
            "certifications": list(self.certifications),
            "home_zip": self.home_zip,
            "max_travel_miles": self.max_travel_miles,
            "preferred_zones": list(self.preferred_zones),
            "default_buffer_minutes": self.default_buffer_minutes,
            "home_base": self.home_base.to_dict() if self.home_base else None,
        }


def working_hours_for(technician: Technician, day: DateLike) -> Optional[DayHours]:
    """Configured hours of a technician for a date; None if disabled or unset."""
    return technician.working_hours_for(day)
