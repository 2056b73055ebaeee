"""
Record schemas package.
"""

from .records import CoordinatesSchema, DayHoursSchema, JobRecord, TechnicianRecord

__all__ = [
    "CoordinatesSchema",
    "DayHoursSchema",
    "JobRecord",
    "TechnicianRecord",
]
