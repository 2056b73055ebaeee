"""
Greedy batch auto-assignment.

Jobs are placed one at a time, longest first, each against a working set that
already contains the placements made earlier in the same batch. There is no
backtracking: an early placement can crowd out a later job that another order
would have fitted. The longest-first order is a packing heuristic, not an
optimality guarantee.
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import List, Optional, Tuple

from techdispatch.application.services.suggestion_ranker import SuggestionRanker
from techdispatch.config.logging import dispatch_context, get_logger
from techdispatch.domain.entities.assignment import AssignmentOutcome, AutoAssignResult
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.clock import DateLike

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssignmentState:
    """Accumulator threaded through the batch."""

    outcomes: Tuple[AssignmentOutcome, ...] = ()
    working_set: Tuple[Job, ...] = field(default_factory=tuple)


class AutoAssigner:
    """Assigns a backlog of jobs to technicians for one day."""

    def __init__(self, ranker: Optional[SuggestionRanker] = None):
        self.ranker = ranker or SuggestionRanker()
        self.logger = logger

    def auto_assign(
        self,
        unassigned_jobs: List[Job],
        technicians: List[Technician],
        existing_assignments: List[Job],
        day: DateLike,
    ) -> AutoAssignResult:
        """
        Assign every job in the backlog that some technician can take.

        Args:
            unassigned_jobs: Backlog to place
            technicians: Roster
            existing_assignments: Jobs already on the calendar that day
            day: The day being scheduled

        Returns:
            AutoAssignResult with one outcome per job in processing order
        """
        ordered_jobs = self.order_jobs(unassigned_jobs)
        initial = AssignmentState(working_set=tuple(existing_assignments))

        with dispatch_context(day=str(day), batch_size=len(ordered_jobs)):
            final = reduce(
                lambda state, job: self.step(state, job, technicians, day),
                ordered_jobs,
                initial,
            )

            result = AutoAssignResult(assignments=list(final.outcomes))
            summary = result.summary

            self.logger.info(
                "Auto-assign batch complete",
                total=summary.total,
                assigned=summary.assigned,
                unassigned=summary.unassigned,
            )

        return result

    @staticmethod
    def order_jobs(jobs: List[Job]) -> List[Job]:
        """Longest jobs first; equal durations keep their input order."""
        return sorted(jobs, key=lambda j: j.duration_minutes, reverse=True)

    def step(
        self,
        state: AssignmentState,
        job: Job,
        technicians: List[Technician],
        day: DateLike,
    ) -> AssignmentState:
        """Place one job against the working set and return the next state."""
        ranking = self.ranker.suggest(job, technicians, list(state.working_set), day)
        pick = ranking.best_assignable()

        if pick is None or pick.score <= 0:
            self.logger.info(
                "No suitable technician for job",
                job_id=job.id,
                top_score=ranking.top_pick.score if ranking.top_pick else None,
            )
            return AssignmentState(
                outcomes=state.outcomes + (AssignmentOutcome.unplaced(job),),
                working_set=state.working_set,
            )

        outcome = AssignmentOutcome(
            job_id=job.id,
            job=job,
            tech_id=pick.tech_id,
            tech_name=pick.tech_name,
            score=pick.score,
            reasons=list(pick.reasons),
            warnings=list(pick.warnings),
        )
        return AssignmentState(
            outcomes=state.outcomes + (outcome,),
            working_set=state.working_set + (job.assigned_to(pick.tech_id),),
        )
