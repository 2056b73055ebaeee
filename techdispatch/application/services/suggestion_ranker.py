"""
Ranks technicians for a job.
"""

from typing import List, Optional

from techdispatch.application.services.scorer import AssignmentScorer
from techdispatch.config.logging import get_logger
from techdispatch.domain.entities.job import Job
from techdispatch.domain.entities.technician import Technician
from techdispatch.domain.value_objects.clock import DateLike
from techdispatch.domain.value_objects.suggestion import SuggestionResult

logger = get_logger(__name__)


class SuggestionRanker:
    """Scores every technician for a job and ranks them."""

    def __init__(self, scorer: Optional[AssignmentScorer] = None):
        self.scorer = scorer or AssignmentScorer()
        self.logger = logger

    def suggest(
        self,
        job: Job,
        technicians: List[Technician],
        jobs_for_day: List[Job],
        day: DateLike,
    ) -> SuggestionResult:
        """
        Rank technicians for a job, best first.

        Ties keep the order of ``technicians``.
        """
        suggestions = [
            self.scorer.score(tech, job, jobs_for_day, day) for tech in technicians
        ]
        # Stable sort: equal scores keep roster order
        suggestions = sorted(suggestions, key=lambda s: s.score, reverse=True)

        result = SuggestionResult(job=job, suggestions=suggestions)

        self.logger.debug(
            "Ranked technicians for job",
            job_id=job.id,
            candidates=len(suggestions),
            top_score=result.top_pick.score if result.top_pick else None,
            has_good_match=result.has_good_match,
        )

        return result
