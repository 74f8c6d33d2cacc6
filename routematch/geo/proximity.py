"""Geodesic proximity checks between coordinate fixes."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from routematch.config import get_settings

logger = logging.getLogger(__name__)

EARTH_RADIUS_FEET = 20_902_231
FEET_PER_MILE = 5280


@dataclass(frozen=True)
class GeoPoint:
    """Coordinate fix in decimal degrees."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class ProximityResult:
    """Distance between two fixes."""

    distance_feet: Optional[int]
    display: str
    is_within_threshold: Optional[bool]


def has_fix(point: Optional[GeoPoint], treat_zero_as_missing: bool = True) -> bool:
    """Whether a point carries usable coordinates."""
    if point is None or point.latitude is None or point.longitude is None:
        return False
    if treat_zero_as_missing and (point.latitude == 0 or point.longitude == 0):
        return False
    return True


def distance_feet(
    a: Optional[GeoPoint],
    b: Optional[GeoPoint],
    treat_zero_as_missing: bool = True,
) -> Optional[int]:
    """
    Great-circle distance between two points in whole feet.

    Uses the haversine formula. A zero coordinate counts as "no fix"
    unless treat_zero_as_missing is False.

    Returns:
        Distance rounded to the nearest foot, or None if either fix is missing
    """
    if not (has_fix(a, treat_zero_as_missing) and has_fix(b, treat_zero_as_missing)):
        return None

    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push antipodal points just past 1
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    # Half-up, so x.5 ft does not depend on parity
    return math.floor(EARTH_RADIUS_FEET * c + 0.5)


def format_distance(feet: Optional[int]) -> str:
    """Human-readable distance: "50 ft", "2,500 ft", "1.0 mi"."""
    if feet is None:
        return "Unknown"
    if isinstance(feet, float) and feet.is_integer():
        feet = int(feet)
    if feet < 100:
        return f"{feet} ft"
    if feet < FEET_PER_MILE:
        return f"{feet:,} ft"
    return f"{feet / FEET_PER_MILE:.1f} mi"


class ProximityVerifier:
    """Corroborates address matches using the distance between fixes."""

    def __init__(self, match_radius_feet: Optional[int] = None):
        """
        Initialize verifier.

        Args:
            match_radius_feet: Max distance for two fixes to count as the
                same location; defaults to the configured radius
        """
        settings = get_settings().proximity
        self._radius = (
            match_radius_feet if match_radius_feet is not None else settings.match_radius_feet
        )
        self._zero_is_missing = settings.treat_zero_as_missing

    @property
    def match_radius_feet(self) -> int:
        return self._radius

    def distance(self, a: Optional[GeoPoint], b: Optional[GeoPoint]) -> Optional[int]:
        return distance_feet(a, b, treat_zero_as_missing=self._zero_is_missing)

    def verify(self, a: Optional[GeoPoint], b: Optional[GeoPoint]) -> ProximityResult:
        """
        Measure and classify the distance between two fixes.

        Returns:
            ProximityResult; is_within_threshold is None without a distance
        """
        feet = self.distance(a, b)
        within = None if feet is None else feet <= self._radius

        logger.debug(f"Proximity check: {feet} ft (radius {self._radius} ft)")

        return ProximityResult(
            distance_feet=feet,
            display=format_distance(feet),
            is_within_threshold=within,
        )
