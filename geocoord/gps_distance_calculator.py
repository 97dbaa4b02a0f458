#!/usr/bin/env python3
"""
Calculate great-circle distance and bearing between GPS coordinates using
the Haversine formula.

The Earth is treated as a sphere with the WGS84 equatorial radius
(6,378,137 m):

    a = sin²(Δφ/2) + cos(φ1)·cos(φ2)·sin²(Δλ/2)
    c = 2·atan2(√a, √(1-a))
    distance = R·c

    bearing = atan2(sin(Δλ)·cos(φ2), cos(φ1)·sin(φ2) - sin(φ1)·cos(φ2)·cos(Δλ))
"""

import logging
import math

from geocoord.converter import parse_any_coordinate
from geocoord.models import Coordinate, GeodesicResult
from geocoord.outcome import Failure, OperationOutcome, Success
from geocoord.types import Degrees, Meters
from geocoord.utm_projection import WGS84_EQUATORIAL_RADIUS_M

logger = logging.getLogger(__name__)

EARTH_RADIUS_M = WGS84_EQUATORIAL_RADIUS_M

CARDINAL_DIRECTIONS = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
                       "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> Meters:
    """
    Calculate distance between two GPS coordinates using Haversine formula.

    Args:
        lat1, lon1: First point (decimal degrees)
        lat2, lon2: Second point (decimal degrees)

    Returns:
        Distance in meters (unrounded)
    """
    R = EARTH_RADIUS_M

    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = math.sin(delta_lat/2)**2 + \
        math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon/2)**2
    # Guard against a creeping past 1.0 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))

    return Meters(R * c)


def bearing_between_points(lat1: float, lon1: float, lat2: float, lon2: float) -> Degrees:
    """
    Calculate initial bearing from point 1 to point 2.

    Returns:
        Bearing in degrees [0, 360) (0° = North, 90° = East, 180° = South, 270° = West)
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lon = math.radians(lon2 - lon1)

    x = math.sin(delta_lon) * math.cos(lat2_rad)
    y = math.cos(lat1_rad) * math.sin(lat2_rad) - \
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(delta_lon)

    bearing_rad = math.atan2(x, y)
    bearing_deg = math.degrees(bearing_rad)

    # Normalize to 0-360
    return Degrees((bearing_deg + 360) % 360)


def _round_bearing(bearing: float) -> Degrees:
    # 359.996 rounds to 360.0, which is outside [0, 360)
    return Degrees(round(bearing, 2) % 360)


def calculate_distance(coord1: Coordinate, coord2: Coordinate) -> GeodesicResult:
    """
    Calculate distance, forward bearing and reverse bearing between two points.

    All three values are rounded to 2 decimals. Coincident points give a
    distance of 0 and a bearing of 0.

    Args:
        coord1: Start point
        coord2: End point

    Returns:
        GeodesicResult

    Example:
        >>> result = calculate_distance(Coordinate(40.7128, -74.0060),
        ...                             Coordinate(34.0522, -118.2437))
        >>> round(result.distance_meters / 1000)
        3940

    The sphere uses the WGS84 equatorial radius (6378137 m). The often quoted
    3936 km for this pair comes from the 6371 km mean radius.
    """
    distance = haversine_distance(
        coord1.latitude, coord1.longitude, coord2.latitude, coord2.longitude
    )
    bearing = bearing_between_points(
        coord1.latitude, coord1.longitude, coord2.latitude, coord2.longitude
    )
    reverse_bearing = (bearing + 180) % 360

    return GeodesicResult(
        distance_meters=Meters(round(distance, 2)),
        forward_bearing_deg=_round_bearing(bearing),
        reverse_bearing_deg=_round_bearing(reverse_bearing),
    )


def distance_between(point1: str, point2: str) -> OperationOutcome[GeodesicResult]:
    """
    Parse two coordinate strings (decimal or DMS pair) and measure between them.

    Returns:
        Success with a GeodesicResult, or Failure naming which input was invalid
    """
    first = parse_any_coordinate(point1)
    if not first.success:
        logger.debug(f"First coordinate rejected: {first.message}")
        return Failure("Invalid format for first coordinate", first.kind)

    second = parse_any_coordinate(point2)
    if not second.success:
        logger.debug(f"Second coordinate rejected: {second.message}")
        return Failure("Invalid format for second coordinate", second.kind)

    return Success(calculate_distance(first.data, second.data))


def get_cardinal_direction(bearing: float) -> str:
    """Convert bearing to 16-point cardinal direction."""
    index = round(bearing / 22.5) % 16
    return CARDINAL_DIRECTIONS[index]


def format_distance(meters: float) -> str:
    """Render a distance in m, km or Mm depending on magnitude."""
    if meters < 1000:
        return f"{meters:.2f} m"
    elif meters < 1000000:
        return f"{meters / 1000:.2f} km"
    else:
        return f"{meters / 1000000:.2f} Mm"


def format_bearing(bearing: float) -> str:
    """Render a bearing with its cardinal direction, e.g. ``273.5° (W)``."""
    return f"{bearing:.1f}° ({get_cardinal_direction(bearing)})"


def bearing_error(expected: float, actual: float) -> float:
    """Smallest absolute angular difference between two bearings, in degrees."""
    diff = abs(expected - actual) % 360
    return min(diff, 360 - diff)
