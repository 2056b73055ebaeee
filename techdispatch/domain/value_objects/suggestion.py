"""
Technician suggestion value objects.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from techdispatch.domain.entities.job import Job


@dataclass(frozen=True)
class Suggestion:
    """Score of one technician for one job on one day."""

    tech_id: str
    tech_name: str
    score: int
    reasons: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    is_recommended: bool = False
    has_warnings: bool = False
    has_time_conflict: bool = False
    has_travel_conflict: bool = False
    at_capacity: bool = False

    @property
    def is_blocked(self) -> bool:
        """Check if automatic assignment must skip this technician."""
        return self.has_time_conflict or self.has_travel_conflict or self.at_capacity

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "tech_id": self.tech_id,
            "tech_name": self.tech_name,
            "score": self.score,
            "reasons": list(self.reasons),
            "warnings": list(self.warnings),
            "is_recommended": self.is_recommended,
            "has_warnings": self.has_warnings,
            "has_time_conflict": self.has_time_conflict,
            "has_travel_conflict": self.has_travel_conflict,
            "at_capacity": self.at_capacity,
        }


@dataclass(frozen=True)
class SuggestionResult:
    """Ranked technician suggestions for a job."""

    job: "Job"
    suggestions: List[Suggestion]

    @property
    def top_pick(self) -> Optional[Suggestion]:
        return self.suggestions[0] if self.suggestions else None

    @property
    def has_good_match(self) -> bool:
        return any(s.is_recommended for s in self.suggestions)

    def best_assignable(self) -> Optional[Suggestion]:
        """Get the highest ranked suggestion that is not blocked."""
        return next((s for s in self.suggestions if not s.is_blocked), None)
