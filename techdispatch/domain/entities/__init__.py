"""
Domain entities package.
"""

from .assignment import (
    AssignmentOutcome,
    AssignmentSummary,
    AssignmentWriteBack,
    AutoAssignResult,
)
from .job import Job
from .technician import Technician, working_hours_for

__all__ = [
    "AssignmentOutcome",
    "AssignmentSummary",
    "AssignmentWriteBack",
    "AutoAssignResult",
    "Job",
    "Technician",
    "working_hours_for",
]
