#!/usr/bin/env python3
"""
Forward UTM projection using the truncated closed-form series.

Converts a WGS84 latitude/longitude into a UTM zone, hemisphere, easting and
northing without an external projection library. The series is the classic
Transverse Mercator expansion:

    M = a[(1 - e²/4 - 3e⁴/64)φ - (3e²/8 + 3e⁴/32)sin2φ + (15e⁴/256)sin4φ]

    E = k0·N·[A + (1 - T + C)A³/6 + (5 - 18T + T² + 72C - 58e²)A⁵/120] + 500000

    N = k0·[M + N·tanφ·(A²/2 + (5 - T + 9C + 4C²)A⁴/24
                        + (61 - 58T + T² + 600C - 330e²)A⁶/720)]

where:
    N = a / √(1 - e²sin²φ)   (radius of curvature in the prime vertical)
    T = tan²φ
    C = e²cos²φ
    A = cosφ·(λ - λ0)        (λ0 = zone central meridian)

Accuracy Notes:
    - Sub-meter agreement with a full projection library inside a zone
    - The meridian arc is truncated at e⁴ (drops ~5 cm at high latitudes)
    - Polar inputs are not special-cased; they return a degenerate but finite
      result rather than raising
"""

import logging
import math

from geocoord.models import UTMCoordinate
from geocoord.types import Degrees, Meters

logger = logging.getLogger(__name__)

# WGS84 ellipsoid
WGS84_EQUATORIAL_RADIUS_M = 6378137.0
WGS84_FLATTENING = 1 / 298.257223563

UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING_M = 500000.0
UTM_FALSE_NORTHING_M = 10000000.0
UTM_ZONE_WIDTH_DEG = 6
UTM_ZONE_COUNT = 60


def utm_zone(longitude: float) -> int:
    """
    Return the UTM zone number (1-60) for a longitude.

    Longitude 180 would compute zone 61; it is folded back into zone 60.
    """
    zone = math.floor((longitude + 180) / UTM_ZONE_WIDTH_DEG) + 1
    return max(1, min(zone, UTM_ZONE_COUNT))


def central_meridian(zone: int) -> Degrees:
    """Longitude of the central meridian of a UTM zone."""
    return Degrees((zone - 1) * UTM_ZONE_WIDTH_DEG - 180 + 3)


def to_utm(latitude: float, longitude: float) -> UTMCoordinate:
    """
    Project a validated WGS84 coordinate to UTM.

    Args:
        latitude: Latitude in decimal degrees [-90, 90]
        longitude: Longitude in decimal degrees [-180, 180]

    Returns:
        UTMCoordinate with easting/northing rounded to whole meters

    Example:
        >>> utm = to_utm(40.7128, -74.0060)
        >>> utm.zone, utm.hemisphere
        (18, 'N')
    """
    zone = utm_zone(longitude)
    hemisphere = "N" if latitude >= 0 else "S"

    a = WGS84_EQUATORIAL_RADIUS_M
    k0 = UTM_SCALE_FACTOR
    e2 = WGS84_FLATTENING * (2 - WGS84_FLATTENING)

    lat_rad = math.radians(latitude)
    lon_rad = math.radians(longitude)
    lon_origin_rad = math.radians(central_meridian(zone))

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    tan_lat = math.tan(lat_rad)

    n = a / math.sqrt(1 - e2 * sin_lat * sin_lat)
    t = tan_lat * tan_lat
    c = e2 * cos_lat * cos_lat
    big_a = cos_lat * (lon_rad - lon_origin_rad)

    m = a * (
        (1 - e2 / 4 - 3 * e2 * e2 / 64) * lat_rad
        - (3 * e2 / 8 + 3 * e2 * e2 / 32) * math.sin(2 * lat_rad)
        + (15 * e2 * e2 / 256) * math.sin(4 * lat_rad)
    )

    easting = k0 * n * (
        big_a
        + (1 - t + c) * big_a ** 3 / 6
        + (5 - 18 * t + t * t + 72 * c - 58 * e2) * big_a ** 5 / 120
    ) + UTM_FALSE_EASTING_M

    northing = k0 * (
        m + n * tan_lat * (
            big_a ** 2 / 2
            + (5 - t + 9 * c + 4 * c * c) * big_a ** 4 / 24
            + (61 - 58 * t + t * t + 600 * c - 330 * e2) * big_a ** 6 / 720
        )
    )

    if latitude < 0:
        northing += UTM_FALSE_NORTHING_M

    result = UTMCoordinate(
        zone=zone,
        hemisphere=hemisphere,
        easting=Meters(round(easting)),
        northing=Meters(round(northing)),
    )
    logger.debug(f"Projected ({latitude:.6f}, {longitude:.6f}) -> {result}")
    return result
