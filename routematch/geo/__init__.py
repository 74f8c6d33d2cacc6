"""Geodesic proximity and device location."""

from .proximity import (
    GeoPoint,
    ProximityResult,
    ProximityVerifier,
    distance_feet,
    format_distance,
    has_fix,
)
from .location import (
    LocationError,
    LocationErrorCode,
    LocationProvider,
    LocationService,
    Position,
)

__all__ = [
    "GeoPoint",
    "ProximityResult",
    "ProximityVerifier",
    "distance_feet",
    "format_distance",
    "has_fix",
    "LocationError",
    "LocationErrorCode",
    "LocationProvider",
    "LocationService",
    "Position",
]
