"""
Schemas for job and technician records coming from the document store.

Records use camelCase keys and loose types (durations as text or numbers,
zip codes as numbers, ISO timestamps for scheduled times). These schemas
normalize them once so the engine only sees domain entities.
"""

from datetime import date, datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.exceptions.validation_error import InvalidFormatError
from techdispatch.domain.value_objects.clock import clock_to_minutes, minutes_to_clock
from techdispatch.domain.value_objects.location import Coordinates
from techdispatch.domain.value_objects.weekday import Weekday
from techdispatch.domain.value_objects.working_hours import DayHours


def _normalize_clock(value: str) -> str:
    try:
        return minutes_to_clock(clock_to_minutes(value))
    except InvalidFormatError as e:
        raise ValueError(str(e)) from e


def _zip_from_number(value):
    """Numeric zips lose their leading zeros; restore the 5-digit form."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return str(value).zfill(5)
    return value


class RecordSchema(BaseModel):
    """Base for camelCase document records."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class CoordinatesSchema(RecordSchema):
    """Latitude/longitude schema."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_value_object(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)


class DayHoursSchema(RecordSchema):
    """Working hours for one weekday."""

    enabled: bool = True
    start: str = "08:00"
    end: str = "17:00"

    @field_validator("start", "end")
    @classmethod
    def validate_clock(cls, v):
        return _normalize_clock(v)

    @model_validator(mode="after")
    def validate_order(self):
        if clock_to_minutes(self.end) < clock_to_minutes(self.start):
            raise ValueError("Working day cannot end before it starts")
        return self

    def to_value_object(self) -> DayHours:
        return DayHours(enabled=self.enabled, start=self.start, end=self.end)


class JobRecord(RecordSchema):
    """Job record schema."""

    id: str = Field(..., min_length=1)
    title: str = ""
    category: Optional[str] = None
    service_type: Optional[str] = None
    estimated_duration: Optional[Union[int, float, str]] = Field(
        None, description="Minutes, or text such as '2 hours' / '45 min' / '1 day'"
    )
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[str] = Field(
        None, description="'HH:MM' or an ISO timestamp"
    )
    customer_location: Optional[str] = Field(
        None, description="Service address or zip code"
    )
    coordinates: Optional[CoordinatesSchema] = None
    required_certifications: List[str] = Field(default_factory=list)
    zone: Optional[str] = None
    assigned_tech_id: Optional[str] = None

    @field_validator("id", "assigned_tech_id", mode="before")
    @classmethod
    def coerce_to_string(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("customer_location", mode="before")
    @classmethod
    def coerce_zip(cls, v):
        return _zip_from_number(v)

    @model_validator(mode="after")
    def split_timestamp(self):
        """Split an ISO scheduled timestamp into date and clock time."""
        value = self.scheduled_time
        if value and "T" in value:
            try:
                moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError as e:
                raise ValueError(f"Invalid scheduled time: {value}") from e
            self.scheduled_time = moment.strftime("%H:%M")
            if self.scheduled_date is None:
                self.scheduled_date = moment.date()
        elif value:
            self.scheduled_time = _normalize_clock(value)
        return self

    def to_entity(self) -> Job:
        """Convert to the domain entity."""
        return Job(
            id=self.id,
            title=self.title,
            category=self.category,
            service_type=self.service_type,
            estimated_duration=self.estimated_duration,
            scheduled_date=self.scheduled_date,
            scheduled_time=self.scheduled_time,
            customer_location=self.customer_location,
            coordinates=self.coordinates.to_value_object() if self.coordinates else None,
            required_certifications=list(self.required_certifications),
            zone=self.zone,
            assigned_tech_id=self.assigned_tech_id,
        )


class TechnicianRecord(RecordSchema):
    """Technician record schema."""

    id: str = Field(..., min_length=1)
    name: str = ""
    working_hours: Optional[Dict[Weekday, DayHoursSchema]] = None
    max_jobs_per_day: Optional[int] = Field(None, ge=0)
    max_hours_per_day: Optional[float] = Field(None, ge=0)
    skills: List[str] = Field(default_factory=list)
    specialties: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    home_zip: Optional[str] = None
    max_travel_miles: Optional[float] = Field(None, ge=0)
    preferred_zones: List[str] = Field(default_factory=list)
    default_buffer_minutes: Optional[int] = Field(None, ge=0)
    home_base: Optional[CoordinatesSchema] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_to_string(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("home_zip", mode="before")
    @classmethod
    def coerce_zip(cls, v):
        return _zip_from_number(v)

    @field_validator("working_hours", mode="before")
    @classmethod
    def lowercase_day_names(cls, v):
        if isinstance(v, dict):
            return {str(day).strip().lower(): hours for day, hours in v.items()}
        return v

    def to_entity(self) -> Technician:
        """Convert to the domain entity; unset limits take the defaults."""
        limits = {
            "max_jobs_per_day": self.max_jobs_per_day,
            "max_hours_per_day": self.max_hours_per_day,
            "max_travel_miles": self.max_travel_miles,
            "default_buffer_minutes": self.default_buffer_minutes,
        }
        return Technician(
            id=self.id,
            name=self.name,
            working_hours={
                day: hours.to_value_object() for day, hours in self.working_hours.items()
            }
            if self.working_hours is not None
            else None,
            skills=list(self.skills),
            specialties=list(self.specialties),
            certifications=list(self.certifications),
            home_zip=self.home_zip,
            preferred_zones=list(self.preferred_zones),
            home_base=self.home_base.to_value_object() if self.home_base else None,
            **{key: value for key, value in limits.items() if value is not None},
        )
