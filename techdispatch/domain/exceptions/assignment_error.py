"""
Assignment write-back exceptions.
"""


class AssignmentError(Exception):
    """Base exception for assignment write-back errors."""

    pass


class AssignmentWriteError(AssignmentError):
    """Raised when the persistence layer fails to record an assignment."""

    def __init__(self, job_id: str, reason: str):
        self.job_id = job_id
        self.reason = reason
        super().__init__(f"Could not record assignment for job {job_id}: {reason}")
