"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod

from techdispatch.domain.entities.assignment import AssignmentWriteBack


class JobAssignmentRepositoryInterface(ABC):
    """Persists accepted assignments on job records."""

    @abstractmethod
    async def assign(self, write_back: AssignmentWriteBack) -> None:
        """Record the technician, time and source of an assignment."""
        pass

    @abstractmethod
    async def clear_assignment(self, job_id: str) -> None:
        """Clear all assignment fields of a job."""
        pass
