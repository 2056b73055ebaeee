"""
Application layer package.

This package contains the assignment engine services, record schemas,
repository interfaces and write-back use cases.
"""

from .interfaces.repositories import JobAssignmentRepositoryInterface
from .schemas.records import JobRecord, TechnicianRecord
from .services.auto_assigner import AutoAssigner
from .services.conflict_checker import ConflictChecker
from .services.route_orderer import RouteOrderer
from .services.scorer import AssignmentScorer
from .services.slot_finder import SlotFinder
from .services.suggestion_ranker import SuggestionRanker
from .use_cases.assign_jobs import (
    AssignJobUseCase,
    BulkAssignJobsUseCase,
    UnassignJobUseCase,
)

__all__ = [
    # Interfaces
    "JobAssignmentRepositoryInterface",
    # Schemas
    "JobRecord",
    "TechnicianRecord",
    # Services
    "AssignmentScorer",
    "AutoAssigner",
    "ConflictChecker",
    "RouteOrderer",
    "SlotFinder",
    "SuggestionRanker",
    # Use Cases
    "AssignJobUseCase",
    "BulkAssignJobsUseCase",
    "UnassignJobUseCase",
]
