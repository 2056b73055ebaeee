"""
Scheduling conflict value objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConflictType(str, Enum):
    """Kinds of problems a prospective assignment can have."""

    DAY_OFF = "day_off"
    MAX_JOBS = "max_jobs"
    MAX_HOURS = "max_hours"
    SKILLS = "skills"
    TIME_CONFLICT = "time_conflict"


class ConflictSeverity(str, Enum):
    """Whether a conflict blocks the assignment or is advisory."""

    ERROR = "error"
    WARNING = "warning"

    def is_blocking(self) -> bool:
        """Check if the severity requires an explicit override."""
        return self == ConflictSeverity.ERROR


@dataclass(frozen=True)
class Conflict:
    """A single scheduling conflict."""

    type: ConflictType
    severity: ConflictSeverity
    message: str
    can_override: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
            "can_override": self.can_override,
        }


@dataclass(frozen=True)
class ConflictReport:
    """All conflicts found for one (job, technician, day)."""

    conflicts: List[Conflict] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return len(self.conflicts) > 0

    @property
    def has_errors(self) -> bool:
        return any(c.severity.is_blocking() for c in self.conflicts)

    @property
    def has_warnings(self) -> bool:
        return any(c.severity == ConflictSeverity.WARNING for c in self.conflicts)

    @property
    def requires_confirmation(self) -> bool:
        """Manual assignments need an explicit override when this is true."""
        return self.has_errors

    def of_type(self, conflict_type: ConflictType) -> List[Conflict]:
        """Get conflicts of a given type."""
        return [c for c in self.conflicts if c.type == conflict_type]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "has_conflicts": self.has_conflicts,
            "has_errors": self.has_errors,
            "has_warnings": self.has_warnings,
            "conflicts": [c.to_dict() for c in self.conflicts],
        }
