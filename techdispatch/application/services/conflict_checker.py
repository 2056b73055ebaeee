"""
Conflict checking for manually proposed assignments.

Deliberately independent from the scorer: a dispatcher dropping a job on a
technician gets a self-contained verdict of blocking errors and advisory
warnings.
"""

from typing import List

from techdispatch.config.logging import get_logger
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.clock import DateLike
from techdispatch.domain.value_objects.conflict import (
    Conflict,
    ConflictReport,
    ConflictSeverity,
    ConflictType,
)
from techdispatch.domain.value_objects.weekday import Weekday

logger = get_logger(__name__)


class ConflictChecker:
    """Classifies problems with a prospective (job, technician) pairing."""

    def __init__(self):
        self.logger = logger

    def check_conflicts(
        self,
        tech: Technician,
        job: Job,
        existing_jobs: List[Job],
        day: DateLike,
    ) -> ConflictReport:
        """Check a prospective assignment against the technician's day."""
        conflicts: List[Conflict] = []
        tech_jobs = tech.jobs_among(existing_jobs)

        # 1. Day off
        if not tech.is_working_on(day):
            conflicts.append(
                Conflict(
                    type=ConflictType.DAY_OFF,
                    severity=ConflictSeverity.ERROR,
                    message=f"{tech.name} is scheduled off on {Weekday.from_date(day).value}s",
                    can_override=True,
                )
            )

        # 2. Job count
        if len(tech_jobs) >= tech.max_jobs_per_day:
            conflicts.append(
                Conflict(
                    type=ConflictType.MAX_JOBS,
                    severity=ConflictSeverity.ERROR,
                    message=f"{tech.name} already has {tech.max_jobs_per_day} jobs scheduled",
                )
            )

        # 3. Hours
        total_hours = sum(j.duration_hours for j in tech_jobs) + job.duration_hours
        if total_hours > tech.max_hours_per_day:
            conflicts.append(
                Conflict(
                    type=ConflictType.MAX_HOURS,
                    severity=ConflictSeverity.WARNING,
                    message=(
                        f"Would exceed {tech.max_hours_per_day:g}hr daily limit "
                        f"({total_hours:.1f}hrs total)"
                    ),
                )
            )

        # 4. Skills
        required_skills = job.required_skills
        if not tech.has_skills(required_skills):
            conflicts.append(
                Conflict(
                    type=ConflictType.SKILLS,
                    severity=ConflictSeverity.WARNING,
                    message=f"{tech.name} may not have {required_skills[0]} skills",
                )
            )

        # 5. Time slot
        if job.start_minutes is not None:
            message = self._time_slot_problem(tech, job, tech_jobs, day)
            if message:
                conflicts.append(
                    Conflict(
                        type=ConflictType.TIME_CONFLICT,
                        severity=ConflictSeverity.ERROR,
                        message=message,
                    )
                )

        report = ConflictReport(conflicts=conflicts)

        if report.has_conflicts:
            self.logger.info(
                "Assignment conflicts detected",
                job_id=job.id,
                tech_id=tech.id,
                conflict_types=[c.type.value for c in conflicts],
                has_errors=report.has_errors,
            )

        return report

    def _time_slot_problem(
        self, tech: Technician, job: Job, tech_jobs: List[Job], day: DateLike
    ) -> str:
        """Describe why the job's scheduled slot does not fit, or return ''."""
        start = job.start_minutes
        end = start + job.duration_minutes
        buffer = tech.default_buffer_minutes

        hours = tech.working_hours_for(day)
        if hours is not None and (start < hours.start_minutes or end > hours.end_minutes):
            return f"Time slot is outside working hours ({hours.start}-{hours.end})"

        for existing in tech_jobs:
            if existing.id == job.id or existing.start_minutes is None:
                continue
            existing_start = existing.start_minutes
            existing_end = existing_start + existing.duration_minutes
            # Padded by the buffer on both sides
            if not (end + buffer <= existing_start or start >= existing_end + buffer):
                return f"Time slot conflicts with existing job ({existing.display_name})"

        return ""
