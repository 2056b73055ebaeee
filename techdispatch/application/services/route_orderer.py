"""
Daily route ordering.

Nearest-neighbor over straight-line coordinate distance. This is an
approximation of driving order; real routing belongs to the caller.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from techdispatch.config.logging import get_logger
from techdispatch.config.settings import Settings, settings as default_settings
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.clock import DateLike, minutes_to_clock
from techdispatch.domain.value_objects.duration import round_half_up
from techdispatch.domain.value_objects.location import Coordinates

logger = get_logger(__name__)

DEFAULT_DAY_START_MINUTES = 8 * 60


@dataclass(frozen=True)
class RouteStop:
    """One job in a planned route."""

    job: Job
    start_time: str
    end_time: str
    travel_minutes_to_next: int = 0


@dataclass(frozen=True)
class RoutePlan:
    """Ordered stops with laid-out times."""

    stops: List[RouteStop]

    @property
    def job_ids(self) -> List[str]:
        return [stop.job.id for stop in self.stops]

    @property
    def total_travel_minutes(self) -> int:
        return sum(stop.travel_minutes_to_next for stop in self.stops)


class RouteOrderer:
    """Orders and times a technician's stops for a day."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.logger = logger

    def order_route(
        self, jobs: List[Job], home_base: Optional[Coordinates] = None
    ) -> List[Job]:
        """
        Visit order starting from the home base.

        Whenever the current position or a candidate lacks coordinates the
        first remaining job is taken, so jobs without coordinates keep their
        input order.
        """
        if len(jobs) <= 1:
            return list(jobs)

        ordered: List[Job] = []
        remaining = list(jobs)
        current = home_base

        while remaining:
            nearest_index = 0
            nearest_distance = math.inf

            for index, job in enumerate(remaining):
                if job.coordinates is None or current is None:
                    nearest_index = 0
                    break

                distance = current.euclidean_to(job.coordinates)
                if distance < nearest_distance:
                    nearest_distance = distance
                    nearest_index = index

            next_job = remaining.pop(nearest_index)
            ordered.append(next_job)
            current = next_job.coordinates or current

        return ordered

    def schedule_route(
        self,
        tech: Technician,
        jobs: List[Job],
        day: DateLike,
        home_base: Optional[Coordinates] = None,
    ) -> RoutePlan:
        """
        Order a technician's jobs and lay out start/end times.

        Starts at the day's opening time (08:00 when not configured) and
        inserts estimated travel between consecutive stops that both have
        coordinates.
        """
        ordered = self.order_route(jobs, home_base or tech.home_base)
        hours = tech.working_hours_for(day)
        current = hours.start_minutes if hours else DEFAULT_DAY_START_MINUTES

        stops: List[RouteStop] = []
        for index, job in enumerate(ordered):
            start = current
            current += job.duration_minutes

            travel = 0
            following = ordered[index + 1] if index + 1 < len(ordered) else None
            if following is not None and job.coordinates and following.coordinates:
                travel = max(
                    self.settings.ROUTE_MIN_TRAVEL_MINUTES,
                    self._travel_minutes(job.coordinates, following.coordinates),
                )

            stops.append(
                RouteStop(
                    job=job,
                    start_time=minutes_to_clock(start),
                    end_time=minutes_to_clock(current),
                    travel_minutes_to_next=travel,
                )
            )
            current += travel

        plan = RoutePlan(stops=stops)

        self.logger.debug(
            "Planned route",
            tech_id=tech.id,
            stops=len(stops),
            total_travel_minutes=plan.total_travel_minutes,
        )

        return plan

    def _travel_minutes(self, origin: Coordinates, destination: Coordinates) -> int:
        miles = origin.haversine_miles_to(destination)
        return round_half_up(miles / self.settings.ROUTE_AVERAGE_SPEED_MPH * 60)
