"""
Assignment outcome entities.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from techdispatch.domain.entities.job import Job
from techdispatch.domain.value_objects.assigned_by import AssignedBy

NO_SUITABLE_TECH = "No suitable tech available"


@dataclass(frozen=True)
class AssignmentOutcome:
    """Result of trying to place one job during auto-assignment."""

    job_id: str
    job: Job
    tech_id: Optional[str] = None
    tech_name: Optional[str] = None
    score: int = 0
    reasons: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failed: bool = False

    @classmethod
    def unplaced(cls, job: Job) -> "AssignmentOutcome":
        """Outcome for a job no technician could take."""
        return cls(job_id=job.id, job=job, warnings=[NO_SUITABLE_TECH], failed=True)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "job_id": self.job_id,
            "tech_id": self.tech_id,
            "tech_name": self.tech_name,
            "score": self.score,
            "reasons": list(self.reasons),
            "warnings": list(self.warnings),
            "failed": self.failed,
        }


@dataclass(frozen=True)
class AssignmentSummary:
    """Counts for an auto-assign batch."""

    total: int
    assigned: int
    unassigned: int


@dataclass(frozen=True)
class AssignmentWriteBack:
    """Assignment the persistence layer should record."""

    job_id: str
    tech_id: str
    tech_name: str
    assigned_by: AssignedBy = AssignedBy.MANUAL
    assigned_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to the field layout stored on the job record."""
        return {
            "job_id": self.job_id,
            "assigned_tech_id": self.tech_id,
            "assigned_tech_name": self.tech_name,
            "assigned_at": self.assigned_at.isoformat(),
            "assigned_by": self.assigned_by.value,
        }


@dataclass(frozen=True)
class AutoAssignResult:
    """Outcome of an auto-assign batch, in processing order."""

    assignments: List[AssignmentOutcome]

    @property
    def successful(self) -> List[AssignmentOutcome]:
        return [a for a in self.assignments if not a.failed]

    @property
    def failed(self) -> List[AssignmentOutcome]:
        return [a for a in self.assignments if a.failed]

    @property
    def summary(self) -> AssignmentSummary:
        return AssignmentSummary(
            total=len(self.assignments),
            assigned=len(self.successful),
            unassigned=len(self.failed),
        )

    def write_backs(self, assigned_at: Optional[datetime] = None) -> List[AssignmentWriteBack]:
        """Write-back records for every successful placement."""
        assigned_at = assigned_at or datetime.now(timezone.utc)
        return [
            AssignmentWriteBack(
                job_id=a.job_id,
                tech_id=a.tech_id,
                tech_name=a.tech_name,
                assigned_by=AssignedBy.AI,
                assigned_at=assigned_at,
            )
            for a in self.successful
        ]
