"""
Duration parsing.

Job durations arrive either as minutes or as free-form text such as
"2 hours", "1.5 hrs", "45 minutes" or "2 days".
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from techdispatch.config.logging import get_logger
from techdispatch.config.settings import settings

logger = get_logger(__name__)

DurationInput = Optional[Union[str, int, float]]

DEFAULT_DURATION_MINUTES = 60
WORKDAY_MINUTES = 480

# Decimal with optional exponent, so str(float) output such as "1e-05" parses whole
_NUMBER = r"((?:\d+(?:\.\d+)?|\.\d+)(?:e[+-]?\d+)?)"
_HOURS_PATTERN = re.compile(_NUMBER + r"\s*(?:hours?|hrs?)")
_MINUTES_PATTERN = re.compile(_NUMBER + r"\s*(?:minutes?|mins?)")
_DAYS_PATTERN = re.compile(_NUMBER + r"\s*(?:days?)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def parse_duration(duration: DurationInput) -> Union[int, float]:
    """Parse a duration into minutes.

    Hours are matched before minutes and days. Anything unparseable
    falls back to one hour.
    """
    if isinstance(duration, bool):
        return DEFAULT_DURATION_MINUTES
    if isinstance(duration, (int, float)):
        if duration > settings.MAX_REASONABLE_DURATION_MINUTES:
            logger.warning(
                "Unusually high job duration",
                duration_minutes=duration,
                max_minutes=settings.MAX_REASONABLE_DURATION_MINUTES,
            )
        return duration
    if not duration or not isinstance(duration, str):
        return DEFAULT_DURATION_MINUTES

    text = duration.lower()

    hours_match = _HOURS_PATTERN.search(text)
    if hours_match:
        return round_half_up(float(hours_match.group(1)) * 60)

    minutes_match = _MINUTES_PATTERN.search(text)
    if minutes_match:
        return round_half_up(float(minutes_match.group(1)))

    days_match = _DAYS_PATTERN.search(text)
    if days_match:
        return round_half_up(float(days_match.group(1)) * WORKDAY_MINUTES)

    return DEFAULT_DURATION_MINUTES


@dataclass(frozen=True)
class SanitizedDuration:
    """Result of capping an unrealistic duration."""

    sanitized: Union[int, float]
    was_unrealistic: bool
    original_minutes: Union[int, float]
    max_allowed: int


def sanitize_duration(duration_minutes) -> SanitizedDuration:
    """Cap durations longer than the configured maximum (likely data entry errors)."""
    if isinstance(duration_minutes, (int, float)) and not isinstance(
        duration_minutes, bool
    ):
        original = duration_minutes
    else:
        original = DEFAULT_DURATION_MINUTES

    max_allowed = settings.MAX_REASONABLE_DURATION_MINUTES
    was_unrealistic = original > max_allowed
    return SanitizedDuration(
        sanitized=max_allowed if was_unrealistic else original,
        was_unrealistic=was_unrealistic,
        original_minutes=original,
        max_allowed=max_allowed,
    )
