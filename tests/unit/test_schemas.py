"""
Unit tests for record schemas.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from techdispatch.application.schemas.records import (
    DayHoursSchema,
    JobRecord,
    TechnicianRecord,
)
from techdispatch.application.services.scorer import AssignmentScorer
from techdispatch.domain.entities.technician import DEFAULT_MAX_JOBS_PER_DAY
from techdispatch.domain.value_objects.weekday import Weekday


class TestJobRecord:
    """Test JobRecord schema."""

    @pytest.fixture
    def sample_job_data(self):
        return {
            "id": "job-42",
            "title": "Water heater flush",
            "serviceType": "Plumbing",
            "estimatedDuration": "2 hours",
            "scheduledTime": "2026-10-20T09:30:00",
            "customerLocation": "12 Elm St, Austin, TX 78701",
            "assignedTechId": 7,
            "requiredCertifications": ["Backflow"],
            "unknownField": "ignored",
        }

    def test_camel_case_record(self, sample_job_data):
        job = JobRecord.model_validate(sample_job_data).to_entity()

        assert job.id == "job-42"
        assert job.service_type == "Plumbing"
        assert job.duration_minutes == 120
        assert job.scheduled_time == "09:30"
        assert job.scheduled_date == date(2026, 10, 20)
        assert job.assigned_tech_id == "7"
        assert job.zip_code == "78701"
        assert job.required_certifications == ["Backflow"]

    def test_snake_case_accepted(self):
        record = JobRecord(id="j", service_type="HVAC", scheduled_time="9:05")
        assert record.scheduled_time == "09:05"

    def test_explicit_date_wins_over_timestamp(self):
        record = JobRecord.model_validate(
            {
                "id": "j",
                "scheduledDate": "2026-10-21",
                "scheduledTime": "2026-10-20T14:00:00Z",
            }
        )
        assert record.scheduled_date == date(2026, 10, 21)
        assert record.scheduled_time == "14:00"

    def test_numeric_id_and_zip(self):
        job = JobRecord.model_validate({"id": 101, "customerLocation": 78704}).to_entity()
        assert job.id == "101"
        assert job.zip_code == "78704"

    def test_numeric_zip_keeps_leading_zero(self):
        job = JobRecord.model_validate({"id": "j", "customerLocation": 2134}).to_entity()
        assert job.customer_location == "02134"
        assert job.zip_code == "02134"

    def test_numeric_duration(self):
        job = JobRecord.model_validate({"id": "j", "estimatedDuration": 45}).to_entity()
        assert job.duration_minutes == 45

    @pytest.mark.parametrize("value", ["25:99", "noon", "2026-13-45T10:00:00"])
    def test_invalid_scheduled_time(self, value):
        with pytest.raises(ValidationError):
            JobRecord.model_validate({"id": "j", "scheduledTime": value})

    def test_id_required(self):
        with pytest.raises(ValidationError):
            JobRecord.model_validate({"title": "No id"})

    def test_coordinates(self):
        job = JobRecord.model_validate(
            {"id": "j", "coordinates": {"lat": 30.27, "lng": -97.74}}
        ).to_entity()
        assert job.coordinates.lat == 30.27

    def test_invalid_coordinates(self):
        with pytest.raises(ValidationError):
            JobRecord.model_validate({"id": "j", "coordinates": {"lat": 100, "lng": 0}})


class TestTechnicianRecord:
    """Test TechnicianRecord schema."""

    @pytest.fixture
    def sample_tech_data(self):
        return {
            "id": "tech-1",
            "name": "Dana",
            "workingHours": {
                "Tuesday": {"enabled": True, "start": "8:00", "end": "17:00"},
                "saturday": {"enabled": False},
            },
            "maxJobsPerDay": None,
            "maxHoursPerDay": 6,
            "skills": ["HVAC"],
            "homeZip": 78701,
            "preferredZones": ["North"],
        }

    def test_to_entity(self, sample_tech_data, tuesday, saturday):
        tech = TechnicianRecord.model_validate(sample_tech_data).to_entity()

        assert tech.working_hours[Weekday.TUESDAY].start == "08:00"
        assert tech.is_working_on(tuesday) is True
        assert tech.is_working_on(saturday) is False
        assert tech.max_jobs_per_day == DEFAULT_MAX_JOBS_PER_DAY
        assert tech.max_hours_per_day == 6
        assert tech.home_zip == "78701"
        assert tech.preferred_zones == ["North"]

    def test_numeric_home_zip_keeps_leading_zero(self):
        tech = TechnicianRecord.model_validate(
            {"id": "t", "name": "T", "homeZip": 2134}
        ).to_entity()
        assert tech.home_zip == "02134"

    def test_numeric_zips_drive_proximity(self, tuesday):
        tech = TechnicianRecord.model_validate(
            {"id": "t", "name": "T", "homeZip": 2134}
        ).to_entity()
        job = JobRecord.model_validate({"id": "j", "customerLocation": 2138}).to_entity()
        suggestion = AssignmentScorer().score(tech, job, [], tuesday)
        assert "Close to home base" in suggestion.reasons

    def test_zero_limits_fall_back(self):
        tech = TechnicianRecord.model_validate(
            {"id": "t", "maxJobsPerDay": 0}
        ).to_entity()
        assert tech.max_jobs_per_day == DEFAULT_MAX_JOBS_PER_DAY

    def test_missing_calendar(self, tuesday):
        tech = TechnicianRecord.model_validate({"id": "t", "name": "T"}).to_entity()
        assert tech.working_hours is None
        assert tech.is_working_on(tuesday) is True

    def test_unknown_day_rejected(self):
        with pytest.raises(ValidationError):
            TechnicianRecord.model_validate(
                {"id": "t", "workingHours": {"Funday": {"enabled": True}}}
            )

    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError):
            TechnicianRecord.model_validate({"id": "t", "maxJobsPerDay": -1})


class TestDayHoursSchema:
    """Test DayHoursSchema."""

    def test_normalizes_clock(self):
        hours = DayHoursSchema(start="7:30", end="16:00:00")
        assert (hours.start, hours.end) == ("07:30", "16:00")

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            DayHoursSchema(start="17:00", end="08:00")

    def test_invalid_clock(self):
        with pytest.raises(ValidationError):
            DayHoursSchema(start="eight")
