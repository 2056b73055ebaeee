"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "AssignmentOutcome",
    "AssignmentWriteBack",
    "AutoAssignResult",
    "Job",
    "Technician",
    # Exceptions
    "AssignmentError",
    "ValidationError",
    # Value Objects
    "AssignedBy",
    "Conflict",
    "ConflictReport",
    "Coordinates",
    "DayHours",
    "Suggestion",
    "Weekday",
]
