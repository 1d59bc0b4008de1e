"""Geographic calculations - Pure functions.

Distances are ellipsoidal geodesics on WGS84, computed with pyproj.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Sequence

from pyproj import Geod


# Meters in one international mile
METERS_PER_MILE = 1609.344

_GEOD = Geod(ellps="WGS84")


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in decimal degrees.

    Attributes:
        latitude: Latitude, -90 to 90
        longitude: Longitude, -180 to 180
    """
    latitude: float
    longitude: float


def calculate_distance(a: Coordinate, b: Coordinate) -> float:
    """Calculate the geodesic distance between two points.

    Pure function.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in meters
    """
    _, _, distance = _GEOD.inv(a.longitude, a.latitude, b.longitude, b.latitude)
    return float(distance)


def distances_from(origin: Coordinate, points: Sequence[Coordinate]) -> list[float]:
    """Calculate distances from one point to many points in a single call.

    Pure function.

    Args:
        origin: Point to measure from
        points: Points to measure to

    Returns:
        Distances in meters, in the same order as points
    """
    if not points:
        return []
    count = len(points)
    _, _, distances = _GEOD.inv(
        [origin.longitude] * count,
        [origin.latitude] * count,
        [p.longitude for p in points],
        [p.latitude for p in points],
    )
    return [float(d) for d in distances]


def meters_to_miles(meters: float) -> float:
    """Convert meters to miles."""
    return meters / METERS_PER_MILE


def miles_to_meters(miles: float) -> float:
    """Convert miles to meters."""
    return miles * METERS_PER_MILE
