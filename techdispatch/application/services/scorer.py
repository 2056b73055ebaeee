"""
Technician/job scoring.

Scores how well a technician fits a job on a given day. Each term adds to a
running score and explains itself through reasons (good) or warnings (bad),
appended in the order the terms are evaluated.
"""

from typing import List, Optional

from techdispatch.config.logging import get_logger
from techdispatch.config.settings import Settings, settings as default_settings
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.clock import DateLike
from techdispatch.domain.value_objects.duration import round_half_up
from techdispatch.domain.value_objects.location import (
    estimate_travel_minutes,
    estimate_zip_distance,
)
from techdispatch.domain.value_objects.suggestion import Suggestion
from techdispatch.domain.value_objects.weekday import Weekday
from techdispatch.domain.value_objects.working_hours import DayAvailability

logger = get_logger(__name__)

SCORING_WEIGHTS = {
    "SKILL_MATCH": 50,
    "CERTIFICATION_MATCH": 30,
    "AVAILABILITY": 40,
    "CAPACITY": 30,
    "PROXIMITY": 25,
    "WORKLOAD_BALANCE": 20,
    "PREFERRED_ZONE": 15,
    "NEARBY_JOBS": 15,
    "TRAVEL_DISTANCE": -2,  # per mile beyond the travel radius
    "DAY_OFF": -100,
    "OVER_MAX_JOBS": -50,
    "OVER_MAX_HOURS": -30,
    "TIME_CONFLICT": -500,
    "TRAVEL_INFEASIBLE": -300,  # per neighbouring job that cannot be reached
    "LONG_TRAVEL": -40,
    "MODERATE_TRAVEL": -20,
    "SLIGHT_TRAVEL": -5,
}

# Unconfigured calendars count as available, slightly below an explicit yes
DEFAULT_AVAILABILITY_FACTOR = 0.8

CLOSE_TO_HOME_MILES = 10
NEARBY_JOB_MILES = 10

# Slack required on top of the estimated drive between consecutive jobs
MIN_TRAVEL_MARGIN_MINUTES = 10

# Worst single drive (minutes) above which each travel penalty applies
LONG_TRAVEL_MINUTES = 45
MODERATE_TRAVEL_MINUTES = 30
SLIGHT_TRAVEL_MINUTES = 15


def overlaps_with_buffer(
    start: int, duration: int, other_start: int, other_duration: int, buffer: int
) -> bool:
    """Check whether two intervals overlap once each is padded by the buffer."""
    end = start + duration
    other_end = other_start + other_duration
    return not (end + buffer <= other_start or start >= other_end + buffer)


def travel_shortfall(job: Job, other: Job) -> Optional[str]:
    """
    Check that the gap between two timed jobs covers the drive between them.

    Returns:
        A description of the shortfall, or None when the gap is sufficient
    """
    first, second = sorted((job, other), key=lambda j: j.start_minutes)
    gap = second.start_minutes - (first.start_minutes + first.duration_minutes)
    travel = estimate_travel_minutes(estimate_zip_distance(first.zip_code, second.zip_code))
    if gap >= travel + MIN_TRAVEL_MARGIN_MINUTES:
        return None
    return (
        f"Only {gap} min gap but need {travel}+ min travel between "
        f"{first.title or 'Job 1'} and {second.title or 'Job 2'}"
    )


class AssignmentScorer:
    """Scores technicians for jobs."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.logger = logger

    def score(
        self,
        tech: Technician,
        job: Job,
        jobs_for_day: List[Job],
        day: DateLike,
    ) -> Suggestion:
        """
        Score one technician for one job on one day.

        Args:
            tech: Candidate technician
            job: Job being placed
            jobs_for_day: Jobs already on the calendar that day, any technician
            day: The day being scheduled

        Returns:
            Suggestion with the integer score, reasons and warnings
        """
        score = 0.0
        reasons: List[str] = []
        warnings: List[str] = []
        at_capacity = False
        has_time_conflict = False
        has_travel_conflict = False

        # 1. Skills
        required_skills = job.required_skills
        if tech.has_skills(required_skills):
            score += SCORING_WEIGHTS["SKILL_MATCH"]
            if required_skills:
                reasons.append(f"Has {required_skills[0]} skills")
        else:
            warnings.append(f"May lack {required_skills[0]} skills")

        # 2. Certifications
        if tech.has_any_certification(job.required_certifications):
            score += SCORING_WEIGHTS["CERTIFICATION_MATCH"]
        else:
            warnings.append("Missing required certification")

        # 3. Day availability
        day_name = Weekday.from_date(day).value
        availability = tech.availability_on(day)
        if availability == DayAvailability.SCHEDULED_ON:
            score += SCORING_WEIGHTS["AVAILABILITY"]
            reasons.append(f"Works {day_name}s")
        elif availability == DayAvailability.SCHEDULED_OFF:
            score += SCORING_WEIGHTS["DAY_OFF"]
            warnings.append(f"Normally off on {day_name}s")
        else:
            score += SCORING_WEIGHTS["AVAILABILITY"] * DEFAULT_AVAILABILITY_FACTOR
            reasons.append(f"Available {day_name}s")

        # 4. Capacity by job count
        tech_jobs = tech.jobs_among(jobs_for_day)
        max_jobs = tech.max_jobs_per_day
        current_jobs = len(tech_jobs)
        if current_jobs < max_jobs:
            open_slots = max_jobs - current_jobs
            score += SCORING_WEIGHTS["CAPACITY"] * open_slots / max_jobs
            reasons.append(f"{open_slots} slots available")
        else:
            score += SCORING_WEIGHTS["OVER_MAX_JOBS"]
            warnings.append("At max jobs for day")
            at_capacity = True

        # 5. Capacity by hours
        hours_booked = sum(j.duration_hours for j in tech_jobs)
        max_hours = tech.max_hours_per_day
        if hours_booked + job.duration_hours <= max_hours:
            reasons.append(f"{max_hours - hours_booked:.1f}hrs available")
        else:
            score += SCORING_WEIGHTS["OVER_MAX_HOURS"]
            warnings.append("Would exceed daily hours")
            at_capacity = True

        # 6. Workload balance
        score += SCORING_WEIGHTS["WORKLOAD_BALANCE"] * (1 - current_jobs / max_jobs)

        # 7. Proximity
        job_zip = job.zip_code
        if job_zip and tech.home_zip:
            distance = estimate_zip_distance(tech.home_zip, job_zip)
            radius = tech.max_travel_miles
            if distance <= radius:
                score += SCORING_WEIGHTS["PROXIMITY"]
                if distance <= CLOSE_TO_HOME_MILES:
                    reasons.append("Close to home base")
            else:
                score += SCORING_WEIGHTS["TRAVEL_DISTANCE"] * (distance - radius)
                warnings.append(f"{distance}mi from home base")

            other_zips = [j.zip_code for j in tech_jobs if j.zip_code]
            if any(
                estimate_zip_distance(z, job_zip) <= NEARBY_JOB_MILES for z in other_zips
            ):
                score += SCORING_WEIGHTS["NEARBY_JOBS"]
                reasons.append("Near other jobs today")

        # 8. Preferred zone
        if tech.preferred_zones and job.zone and job.zone in tech.preferred_zones:
            score += SCORING_WEIGHTS["PREFERRED_ZONE"]
            reasons.append("In preferred zone")

        # 9. Time slot conflict, then travel feasibility between neighbours
        timed_jobs = self._timed_jobs(job, tech_jobs)
        if job.start_minutes is not None:
            for existing in timed_jobs:
                if overlaps_with_buffer(
                    job.start_minutes,
                    job.duration_minutes,
                    existing.start_minutes,
                    existing.duration_minutes,
                    tech.default_buffer_minutes,
                ):
                    has_time_conflict = True
                    score += SCORING_WEIGHTS["TIME_CONFLICT"]
                    warnings.append(f"Time conflict with {existing.display_name}")
                    break

                shortfall = travel_shortfall(job, existing)
                if shortfall is not None:
                    has_travel_conflict = True
                    score += SCORING_WEIGHTS["TRAVEL_INFEASIBLE"]
                    warnings.append(f"Insufficient travel time: {shortfall}")

        # 10. Longest drive to or from the technician's other jobs
        if job.start_minutes is not None and tech_jobs:
            worst_travel = max(
                (
                    estimate_travel_minutes(estimate_zip_distance(job_zip, j.zip_code))
                    for j in timed_jobs
                    if job_zip and j.zip_code
                ),
                default=0,
            )
            if worst_travel > LONG_TRAVEL_MINUTES:
                score += SCORING_WEIGHTS["LONG_TRAVEL"]
                warnings.append(f"Long travel time ({worst_travel}+ min) between jobs")
            elif worst_travel > MODERATE_TRAVEL_MINUTES:
                score += SCORING_WEIGHTS["MODERATE_TRAVEL"]
                warnings.append(f"Moderate travel time (~{worst_travel} min) between jobs")
            elif worst_travel > SLIGHT_TRAVEL_MINUTES:
                score += SCORING_WEIGHTS["SLIGHT_TRAVEL"]

        final_score = round_half_up(score)
        suggestion = Suggestion(
            tech_id=tech.id,
            tech_name=tech.name,
            score=final_score,
            reasons=reasons,
            warnings=warnings,
            is_recommended=final_score >= self.settings.RECOMMENDATION_THRESHOLD
            and not warnings,
            has_warnings=bool(warnings),
            has_time_conflict=has_time_conflict,
            has_travel_conflict=has_travel_conflict,
            at_capacity=at_capacity,
        )

        self.logger.debug(
            "Scored technician for job",
            job_id=job.id,
            tech_id=tech.id,
            score=final_score,
            warnings=len(warnings),
        )

        return suggestion

    @staticmethod
    def _timed_jobs(job: Job, tech_jobs: List[Job]) -> List[Job]:
        """The technician's other jobs that have a start time."""
        return [
            existing
            for existing in tech_jobs
            if existing.id != job.id and existing.start_minutes is not None
        ]
