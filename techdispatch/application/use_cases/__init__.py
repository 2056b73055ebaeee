"""
Application use cases package.
"""

from .assign_jobs import (
    AssignJobUseCase,
    BulkAssignItemResult,
    BulkAssignJobsUseCase,
    UnassignJobUseCase,
)

__all__ = [
    "AssignJobUseCase",
    "BulkAssignItemResult",
    "BulkAssignJobsUseCase",
    "UnassignJobUseCase",
]
