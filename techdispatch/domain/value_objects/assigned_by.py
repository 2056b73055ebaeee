"""
Assignment source value object.
"""

from enum import Enum


class AssignedBy(str, Enum):
    """Who finalized an assignment."""

    MANUAL = "manual"
    AI = "ai"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return {AssignedBy.MANUAL: "Dispatcher", AssignedBy.AI: "Auto-assign"}.get(
            self, self.value.title()
        )
