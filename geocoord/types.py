"""
Unit type annotations for type-safe numeric parameters.

This module defines NewType aliases for the physical units used across the
geocoord package. They are zero-overhead type hints that document expected
units in function signatures and let static type checkers catch unit
mismatches, while remaining plain floats at runtime.

Usage Example:
    >>> from geocoord.types import Degrees, Meters
    >>>
    >>> def distance(lat1: Degrees, lon1: Degrees,
    ...              lat2: Degrees, lon2: Degrees) -> Meters:
    ...     pass
"""

from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Angle in degrees (e.g., latitude, longitude, bearing)"""

# Distance/position units
Meters = NewType('Meters', float)
"""Distance or position in meters (e.g., easting, northing, great-circle distance)"""
