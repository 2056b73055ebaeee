"""
Domain exceptions package.
"""

from .assignment_error import AssignmentError, AssignmentWriteError
from .validation_error import InvalidFormatError, RequiredFieldError, ValidationError

__all__ = [
    "AssignmentError",
    "AssignmentWriteError",
    "InvalidFormatError",
    "RequiredFieldError",
    "ValidationError",
]
