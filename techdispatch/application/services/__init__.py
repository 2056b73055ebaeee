"""
Application services package.
"""

from .auto_assigner import AssignmentState, AutoAssigner
from .conflict_checker import ConflictChecker
from .route_orderer import RouteOrderer, RoutePlan, RouteStop
from .scorer import SCORING_WEIGHTS, AssignmentScorer
from .slot_finder import SlotFinder, TimeSlot, TimeSlotSuggestions
from .suggestion_ranker import SuggestionRanker

__all__ = [
    "AssignmentScorer",
    "AssignmentState",
    "AutoAssigner",
    "ConflictChecker",
    "RouteOrderer",
    "RoutePlan",
    "RouteStop",
    "SCORING_WEIGHTS",
    "SlotFinder",
    "SuggestionRanker",
    "TimeSlot",
    "TimeSlotSuggestions",
]
