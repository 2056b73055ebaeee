"""Job domain entity."""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional

from techdispatch.domain.value_objects.clock import clock_to_minutes
from techdispatch.domain.value_objects.duration import DurationInput, parse_duration
from techdispatch.domain.value_objects.location import Coordinates, extract_zip
from techdispatch.domain.value_objects.skills import required_skills_for


@dataclass
class Job:
    """A unit of field work."""

    id: str
    title: str = ""
    category: Optional[str] = None
    service_type: Optional[str] = None
    estimated_duration: DurationInput = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[str] = None  # "HH:MM"
    customer_location: Optional[str] = None  # address or zip code
    coordinates: Optional[Coordinates] = None
    required_certifications: List[str] = field(default_factory=list)
    zone: Optional[str] = None
    assigned_tech_id: Optional[str] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.id or not str(self.id).strip():
            raise ValueError("Job id is required")
        if self.scheduled_time is not None:
            # Raises InvalidFormatError on malformed clock strings
            clock_to_minutes(self.scheduled_time)

    @property
    def duration_minutes(self):
        """Estimated duration in minutes."""
        return parse_duration(self.estimated_duration)

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60

    @property
    def start_minutes(self) -> Optional[int]:
        """Scheduled start as minutes from midnight, if scheduled."""
        if not self.scheduled_time:
            return None
        return clock_to_minutes(self.scheduled_time)

    @property
    def zip_code(self) -> Optional[str]:
        return extract_zip(self.customer_location)

    @property
    def is_assigned(self) -> bool:
        return self.assigned_tech_id is not None

    @property
    def display_name(self) -> str:
        return self.title or self.service_type or "another job"

    @property
    def required_skills(self) -> List[str]:
        """Skills inferred from the job category."""
        return required_skills_for(self.category or self.service_type)

    def is_assigned_to(self, tech_id: str) -> bool:
        return self.assigned_tech_id == tech_id

    def assigned_to(self, tech_id: str) -> "Job":
        """Copy of this job bound to a technician."""
        return replace(self, assigned_tech_id=tech_id)

    def to_dict(self) -> dict:
        """Convert job to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "service_type": self.service_type,
            "estimated_duration": self.estimated_duration,
            "duration_minutes": self.duration_minutes,
            "scheduled_date": self.scheduled_date.isoformat()
            if self.scheduled_date
            else None,
            "scheduled_time": self.scheduled_time,
            "customer_location": self.customer_location,
            "coordinates": self.coordinates.to_dict() if self.coordinates else None,
            "required_certifications": list(self.required_certifications),
            "zone": self.zone,
            "assigned_tech_id": self.assigned_tech_id,
        }
