"""
Application interfaces package.
"""

from .repositories import JobAssignmentRepositoryInterface

__all__ = [
    "JobAssignmentRepositoryInterface",
]
