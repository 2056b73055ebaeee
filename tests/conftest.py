"""
Pytest configuration and fixtures.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from techdispatch.application.interfaces.repositories import (
    JobAssignmentRepositoryInterface,
)
from techdispatch.config.settings import Settings
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.weekday import Weekday
from techdispatch.domain.value_objects.working_hours import DayHours

# 2026-10-20 is a Tuesday, 2026-10-24 a Saturday
TUESDAY = date(2026, 10, 20)
SATURDAY = date(2026, 10, 24)


@pytest.fixture(scope="session")
def test_settings():
    """Test settings configuration."""
    return Settings(ENVIRONMENT="test", LOG_LEVEL="DEBUG")


@pytest.fixture
def tuesday():
    return TUESDAY


@pytest.fixture
def saturday():
    return SATURDAY


@pytest.fixture
def weekday_hours():
    """Monday-Friday 08:00-17:00, weekends off."""
    hours = {day: DayHours(enabled=True, start="08:00", end="17:00") for day in Weekday}
    hours[Weekday.SATURDAY] = DayHours(enabled=False)
    hours[Weekday.SUNDAY] = DayHours(enabled=False)
    return hours


@pytest.fixture
def make_tech(weekday_hours):
    """Factory for technicians working a regular week."""

    def _make(tech_id="tech-a", name="Tech A", **overrides):
        data = {
            "id": tech_id,
            "name": name,
            "working_hours": dict(weekday_hours),
            "skills": ["HVAC"],
        }
        data.update(overrides)
        return Technician(**data)

    return _make


@pytest.fixture
def make_job():
    """Factory for HVAC jobs on Tuesday."""

    def _make(job_id="job-1", **overrides):
        data = {
            "id": job_id,
            "title": f"Job {job_id}",
            "category": "HVAC Repair",
            "estimated_duration": 90,
            "scheduled_date": TUESDAY,
        }
        data.update(overrides)
        return Job(**data)

    return _make


@pytest.fixture
def mock_assignment_repository():
    """Mock job assignment repository."""
    mock_repo = AsyncMock(spec=JobAssignmentRepositoryInterface)

    # Mock methods
    mock_repo.assign = AsyncMock(return_value=None)
    mock_repo.clear_assignment = AsyncMock(return_value=None)

    return mock_repo
