"""
Open time slot discovery.

``find_open_slot`` answers "when today can this technician fit the job";
``suggest_time_slots`` scans the coming days and ranks candidate slots.
"""

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional, Tuple

from techdispatch.config.logging import get_logger
from techdispatch.config.settings import Settings, settings as default_settings
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.clock import DateLike, minutes_to_clock, to_date
from techdispatch.domain.value_objects.customer_preferences import (
    NOON_MINUTES,
    CustomerPreferences,
    TimeOfDay,
)
from techdispatch.domain.value_objects.duration import (
    WORKDAY_MINUTES,
    DurationInput,
    parse_duration,
)
from techdispatch.domain.value_objects.weekday import Weekday

logger = get_logger(__name__)

BASE_SLOT_SCORE = 50
MAX_SLOT_SCORE = 100
RECOMMENDED_SLOT_SCORE = 80


@dataclass(frozen=True)
class DayWorkload:
    """How busy a technician's day already is."""

    job_count: int
    total_minutes: float
    max_jobs: int

    @property
    def percent_full(self) -> int:
        return round(self.job_count / self.max_jobs * 100)

    @property
    def is_full(self) -> bool:
        return self.job_count >= self.max_jobs

    @property
    def is_light(self) -> bool:
        return self.job_count <= 1

    @property
    def is_moderate(self) -> bool:
        return 1 < self.job_count < self.max_jobs - 1


@dataclass(frozen=True)
class TimeSlot:
    """A candidate start time on a specific day."""

    day: date
    start_time: str
    end_time: str
    score: int
    reasons: List[str]
    workload: DayWorkload

    @property
    def is_recommended(self) -> bool:
        return self.score >= RECOMMENDED_SLOT_SCORE

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.day.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "score": self.score,
            "is_recommended": self.is_recommended,
            "reasons": list(self.reasons),
        }


@dataclass(frozen=True)
class SlotNote:
    """Warning or insight attached to a slot search."""

    type: str
    message: str
    days: List[date] = field(default_factory=list)


@dataclass(frozen=True)
class TimeSlotSuggestions:
    """Ranked slots plus context about the searched window."""

    suggestions: List[TimeSlot]
    warnings: List[SlotNote]
    insights: List[SlotNote]
    duration_minutes: int
    analyzed_days: int
    total_slots_found: int

    @property
    def recommended(self) -> Optional[TimeSlot]:
        return self.suggestions[0] if self.suggestions else None


class SlotFinder:
    """Finds free intervals on technician calendars."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.logger = logger

    def find_open_slot(
        self,
        tech: Technician,
        duration: DurationInput,
        existing_jobs: List[Job],
        day: DateLike,
    ) -> Optional[str]:
        """
        Earliest start time that fits the job on the technician's day.

        Bookings are padded by the technician's buffer at their end, and a
        gap only counts if the job plus buffer ends before the next booking.

        Returns:
            "HH:MM" start time, or None if the day is off or fully booked
        """
        hours = tech.working_hours_for(day)
        if hours is None:
            return None

        starts = self._gap_starts(
            hours.start_minutes,
            hours.end_minutes,
            tech.jobs_among(existing_jobs),
            parse_duration(duration),
            tech.default_buffer_minutes,
        )
        return minutes_to_clock(starts[0]) if starts else None

    def suggest_time_slots(
        self,
        tech: Technician,
        job: Job,
        jobs: List[Job],
        start_date: Optional[DateLike] = None,
        customer_preferences: Optional[CustomerPreferences] = None,
        days_to_analyze: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> TimeSlotSuggestions:
        """
        Rank open slots over the days following ``start_date``.

        Args:
            tech: Technician whose calendar is searched
            job: Job to place
            jobs: Jobs on the calendar, each with a scheduled_date
            start_date: Day the search counts from (defaults to today, excluded)
            customer_preferences: Optional preferred days / time of day
            days_to_analyze: Lookahead window
            limit: Maximum number of slots returned
        """
        days_to_analyze = days_to_analyze or self.settings.SLOT_LOOKAHEAD_DAYS
        limit = limit or self.settings.SLOT_SUGGESTION_LIMIT
        origin = to_date(start_date) if start_date is not None else date.today()

        warnings: List[SlotNote] = []
        duration_minutes = job.duration_minutes
        if duration_minutes > WORKDAY_MINUTES:
            estimated_days = math.ceil(duration_minutes / WORKDAY_MINUTES)
            warnings.append(
                SlotNote(
                    type="multi_day",
                    message=(
                        f"This is a multi-day job (~{estimated_days} days). "
                        "Suggestions show potential start dates."
                    ),
                )
            )
            duration_minutes = WORKDAY_MINUTES

        buffer = tech.default_buffer_minutes
        tech_jobs = tech.jobs_among(jobs)
        slots: List[TimeSlot] = []
        full_days: List[date] = []
        light_days: List[date] = []

        for offset in range(1, days_to_analyze + 1):
            day = origin + timedelta(days=offset)
            hours = tech.working_hours_for(day)
            if hours is None:
                continue

            day_jobs = [j for j in tech_jobs if j.scheduled_date == day]
            workload = DayWorkload(
                job_count=len(day_jobs),
                total_minutes=sum(j.duration_minutes for j in day_jobs),
                max_jobs=tech.max_jobs_per_day,
            )
            if workload.is_full:
                full_days.append(day)
                continue
            if workload.is_light:
                light_days.append(day)

            # Counted from the morning after the search origin
            days_away = offset - 1

            for start in self._gap_starts(
                hours.start_minutes, hours.end_minutes, day_jobs, duration_minutes, buffer
            ):
                slots.append(
                    TimeSlot(
                        day=day,
                        start_time=minutes_to_clock(start),
                        end_time=minutes_to_clock(start + duration_minutes),
                        score=self._slot_score(
                            day, days_away, start, workload, customer_preferences
                        ),
                        reasons=self._slot_reasons(
                            day, days_away, start, workload, customer_preferences
                        ),
                        workload=workload,
                    )
                )

        ranked = sorted(slots, key=lambda s: s.score, reverse=True)

        insights: List[SlotNote] = []
        if full_days:
            insights.append(
                SlotNote(
                    type="busy",
                    message=f"{len(full_days)} day{'s' if len(full_days) > 1 else ''} fully booked",
                    days=full_days,
                )
            )
        if light_days:
            insights.append(
                SlotNote(
                    type="opportunity",
                    message=f"{len(light_days)} light day{'s' if len(light_days) > 1 else ''} available",
                    days=light_days,
                )
            )

        self.logger.debug(
            "Scanned calendar for open slots",
            tech_id=tech.id,
            job_id=job.id,
            analyzed_days=days_to_analyze,
            slots_found=len(ranked),
        )

        return TimeSlotSuggestions(
            suggestions=ranked[:limit],
            warnings=warnings,
            insights=insights,
            duration_minutes=duration_minutes,
            analyzed_days=days_to_analyze,
            total_slots_found=len(ranked),
        )

    @staticmethod
    def _booked_intervals(jobs: List[Job], buffer: int) -> List[Tuple[int, int]]:
        """Timed bookings as (start, end + buffer), sorted by start."""
        intervals = [
            (j.start_minutes, j.start_minutes + j.duration_minutes + buffer)
            for j in jobs
            if j.start_minutes is not None
        ]
        return sorted(intervals, key=lambda interval: interval[0])

    def _gap_starts(
        self,
        day_start: int,
        day_end: int,
        day_jobs: List[Job],
        duration_minutes: int,
        buffer: int,
    ) -> List[int]:
        """Earliest start of every gap long enough for the job."""
        starts = []
        booked = self._booked_intervals(day_jobs, buffer)
        search_start = day_start

        for booked_start, booked_end in booked:
            if (
                search_start + duration_minutes + buffer <= booked_start
                and search_start + duration_minutes <= day_end
            ):
                starts.append(search_start)
            search_start = max(search_start, booked_end)

        if search_start + duration_minutes <= day_end:
            starts.append(search_start)

        return starts

    @staticmethod
    def _slot_score(
        day: date,
        days_away: int,
        start_minutes: int,
        workload: DayWorkload,
        preferences: Optional[CustomerPreferences],
    ) -> int:
        score = BASE_SLOT_SCORE

        if workload.is_light:
            score += 20
        if workload.is_moderate:
            score += 10

        if start_minutes < NOON_MINUTES:
            score += 10

        if preferences is not None:
            if preferences.prefers_day(Weekday.from_date(day)):
                score += 15
            if preferences.prefers_time(start_minutes):
                score += 15

        if days_away <= 3:
            score += 15
        elif days_away <= 7:
            score += 10

        return min(MAX_SLOT_SCORE, score)

    @staticmethod
    def _slot_reasons(
        day: date,
        days_away: int,
        start_minutes: int,
        workload: DayWorkload,
        preferences: Optional[CustomerPreferences],
    ) -> List[str]:
        reasons = []

        if workload.is_light:
            reasons.append("Light schedule day")
        if workload.is_moderate:
            reasons.append("Good availability")
        if days_away <= 3:
            reasons.append("Available soon")

        reasons.append(f"{TimeOfDay.of(start_minutes).value.title()} slot")

        if preferences is not None:
            if preferences.prefers_day(Weekday.from_date(day)):
                reasons.append("Customer preferred day")
            if preferences.prefers_time(start_minutes):
                reasons.append("Customer preferred time")

        return reasons
