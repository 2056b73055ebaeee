"""
Location value objects and distance heuristics.

Distances here are rough proxies: a zip-prefix estimate for scoring and
straight-line coordinate distance for route ordering. No geocoding or road
network lookups happen in this package.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

_ZIP_PATTERN = re.compile(r"\b(\d{5})\b")

EARTH_RADIUS_MILES = 3959.0

# Miles returned by the zip-prefix heuristic
SAME_ZIP3_MILES = 5
SAME_ZIP2_MILES = 15
OTHER_ZIP_MILES = 25
UNKNOWN_ZIP_MILES = 10


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair."""

    lat: float
    lng: float

    def __post_init__(self):
        """Validate coordinate ranges."""
        if not -90 <= self.lat <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180 <= self.lng <= 180:
            raise ValueError("Longitude must be between -180 and 180")

    def euclidean_to(self, other: "Coordinates") -> float:
        """Straight-line distance in degrees."""
        return math.sqrt((self.lat - other.lat) ** 2 + (self.lng - other.lng) ** 2)

    def haversine_miles_to(self, other: "Coordinates") -> float:
        """Great-circle distance in miles."""
        d_lat = math.radians(other.lat - self.lat)
        d_lng = math.radians(other.lng - self.lng)
        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(math.radians(self.lat))
            * math.cos(math.radians(other.lat))
            * math.sin(d_lng / 2) ** 2
        )
        return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"lat": self.lat, "lng": self.lng}


def extract_zip(location: Optional[str]) -> Optional[str]:
    """Pull the first 5-digit zip code out of an address or zip string."""
    if not location:
        return None
    match = _ZIP_PATTERN.search(location)
    return match.group(1) if match else None


def estimate_zip_distance(zip1: Optional[str], zip2: Optional[str]) -> int:
    """Estimate miles between two zip codes from their shared prefix."""
    if not zip1 or not zip2:
        return UNKNOWN_ZIP_MILES
    if zip1[:3] == zip2[:3]:
        return SAME_ZIP3_MILES
    if zip1[:2] == zip2[:2]:
        return SAME_ZIP2_MILES
    return OTHER_ZIP_MILES


def estimate_travel_minutes(distance_miles: float) -> int:
    """Estimate drive minutes for a distance; short hops run slower per mile."""
    if distance_miles <= 0:
        return 0
    if distance_miles <= 5:
        return math.ceil(distance_miles * 3)
    if distance_miles <= 15:
        return math.ceil(distance_miles * 2)
    return math.ceil(distance_miles * 1.33)
