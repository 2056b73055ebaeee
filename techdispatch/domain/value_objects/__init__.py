"""
Domain value objects package.
"""

from .assigned_by import AssignedBy
from .clock import clock_to_minutes, format_clock_display, minutes_to_clock, to_date
from .conflict import Conflict, ConflictReport, ConflictSeverity, ConflictType
from .customer_preferences import CustomerPreferences, TimeOfDay
from .duration import parse_duration, sanitize_duration
from .location import (
    Coordinates,
    estimate_travel_minutes,
    estimate_zip_distance,
    extract_zip,
)
from .skills import JOB_SKILL_MAP, required_skills_for
from .suggestion import Suggestion, SuggestionResult
from .weekday import Weekday
from .working_hours import DayAvailability, DayHours

__all__ = [
    "AssignedBy",
    "Conflict",
    "ConflictReport",
    "ConflictSeverity",
    "ConflictType",
    "Coordinates",
    "CustomerPreferences",
    "DayAvailability",
    "DayHours",
    "JOB_SKILL_MAP",
    "Suggestion",
    "SuggestionResult",
    "TimeOfDay",
    "Weekday",
    # Helpers
    "clock_to_minutes",
    "estimate_travel_minutes",
    "estimate_zip_distance",
    "extract_zip",
    "format_clock_display",
    "minutes_to_clock",
    "parse_duration",
    "required_skills_for",
    "sanitize_duration",
    "to_date",
]
