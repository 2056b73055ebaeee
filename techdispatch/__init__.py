"""
Technician Dispatch Engine.

Scores technicians for field-service jobs, checks scheduling conflicts,
auto-assigns job backlogs, finds open time slots and orders daily routes.
"""

__version__ = "0.1.0"
__description__ = "Technician Dispatch Engine"

from .application import (
    AssignmentScorer,
    AutoAssigner,
    ConflictChecker,
    RouteOrderer,
    SlotFinder,
    SuggestionRanker,
)
from .config import configure_logging, settings

__all__ = [
    "AssignmentScorer",
    "AutoAssigner",
    "ConflictChecker",
    "RouteOrderer",
    "SlotFinder",
    "SuggestionRanker",
    "configure_logging",
    "settings",
]
