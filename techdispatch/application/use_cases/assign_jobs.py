"""Assignment write-back use cases."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from techdispatch.application.interfaces.repositories import (
    JobAssignmentRepositoryInterface,
)
from techdispatch.config.logging import get_logger
from techdispatch.domain.entities.assignment import (
    AssignmentOutcome,
    AssignmentWriteBack,
    AutoAssignResult,
)
from techdispatch.domain.exceptions.assignment_error import AssignmentWriteError
from techdispatch.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from techdispatch.domain.value_objects.assigned_by import AssignedBy

logger = get_logger(__name__)


class AssignJobUseCase:
    """Use case for recording a single accepted assignment."""

    def __init__(self, assignment_repo: JobAssignmentRepositoryInterface):
        self.assignment_repo = assignment_repo

    async def execute(
        self,
        job_id: str,
        tech_id: str,
        tech_name: str,
        assigned_by: AssignedBy = AssignedBy.MANUAL,
        assigned_at: Optional[datetime] = None,
    ) -> AssignmentWriteBack:
        """Record an assignment of a job to a technician."""
        if not job_id:
            raise RequiredFieldError("job_id")
        if not tech_id:
            raise RequiredFieldError("tech_id")

        write_back = AssignmentWriteBack(
            job_id=job_id,
            tech_id=tech_id,
            tech_name=tech_name,
            assigned_by=AssignedBy(assigned_by),
            assigned_at=assigned_at or datetime.now(timezone.utc),
        )

        try:
            await self.assignment_repo.assign(write_back)
        except Exception as e:
            logger.error(
                "Failed to record assignment",
                job_id=job_id,
                tech_id=tech_id,
                error=str(e),
            )
            raise AssignmentWriteError(job_id, str(e)) from e

        logger.info(
            "Job assigned",
            job_id=job_id,
            tech_id=tech_id,
            assigned_by=write_back.assigned_by.value,
        )

        return write_back


class UnassignJobUseCase:
    """Use case for clearing an assignment."""

    def __init__(self, assignment_repo: JobAssignmentRepositoryInterface):
        self.assignment_repo = assignment_repo

    async def execute(self, job_id: str) -> None:
        """Clear the assignment fields of a job."""
        if not job_id:
            raise RequiredFieldError("job_id")

        try:
            await self.assignment_repo.clear_assignment(job_id)
        except Exception as e:
            logger.error("Failed to clear assignment", job_id=job_id, error=str(e))
            raise AssignmentWriteError(job_id, str(e)) from e

        logger.info("Job unassigned", job_id=job_id)


@dataclass
class BulkAssignItemResult:
    """Write-back result for one auto-assigned job."""

    outcome: AssignmentOutcome
    success: bool
    error: Optional[str] = None


class BulkAssignJobsUseCase:
    """Use case for recording the successful part of an auto-assign batch."""

    def __init__(self, assignment_repo: JobAssignmentRepositoryInterface):
        self.assign_job = AssignJobUseCase(assignment_repo)

    async def execute(
        self,
        result: AutoAssignResult,
        assigned_at: Optional[datetime] = None,
    ) -> List[BulkAssignItemResult]:
        """Record each placed job; one failing write does not stop the rest."""
        if result is None:
            raise ValidationError("Auto-assign result is required")

        assigned_at = assigned_at or datetime.now(timezone.utc)
        items: List[BulkAssignItemResult] = []

        for outcome in result.successful:
            try:
                await self.assign_job.execute(
                    job_id=outcome.job_id,
                    tech_id=outcome.tech_id,
                    tech_name=outcome.tech_name,
                    assigned_by=AssignedBy.AI,
                    assigned_at=assigned_at,
                )
                items.append(BulkAssignItemResult(outcome=outcome, success=True))
            except AssignmentWriteError as e:
                items.append(
                    BulkAssignItemResult(outcome=outcome, success=False, error=e.reason)
                )

        logger.info(
            "Bulk assignment recorded",
            attempted=len(items),
            succeeded=sum(1 for i in items if i.success),
            skipped_failed=len(result.failed),
        )

        return items
