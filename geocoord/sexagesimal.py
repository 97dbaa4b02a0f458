"""
Sexagesimal (degrees, minutes, seconds) parsing and formatting.

Parsing accepts two grammars for a single angle, tried in order:

1. Compact, fixed-width fields: ``N453015.5``, ``W1224030``
   (direction, 2-3 degree digits, 2 minute digits, 2 second digits with an
   optional fraction).
2. Loose: the direction letter leads or trails, and the fields are separated
   by any mix of symbol markers (° ' " ′ ″), the letters d/m/s, or
   whitespace. Seconds are optional. ``N45°30'15"``, ``45d30m15sN``,
   ``N45 30 15``, ``45°30'N``.

Formatting is the inverse: a decimal latitude/longitude pair becomes
``N45°30'15" W122°40'30"``.
"""

import logging
import math
import re

from geocoord.models import SexagesimalValue
from geocoord.outcome import CoordinateError, ErrorKind, OperationOutcome, capture

logger = logging.getLogger(__name__)

MAX_DEGREES = 180.0

COMPACT_PATTERN = re.compile(
    r"([NSEW])(\d{2,3})(\d{2})(\d{2}(?:\.\d+)?)",
    re.IGNORECASE,
)

LOOSE_LEADING_PATTERN = re.compile(
    r"\s*([NSEW])[\s°d]*(\d{1,3})[°d\s]*(\d{1,2})['′m\s]*(\d{1,2}(?:\.\d+)?)?[\"″s\s]*",
    re.IGNORECASE,
)

LOOSE_TRAILING_PATTERN = re.compile(
    r"[\s°d]*(\d{1,3})[°d\s]*(\d{1,2})['′m\s]*(\d{1,2}(?:\.\d+)?)?[\"″s\s]*([NSEW])\s*",
    re.IGNORECASE,
)


def build_sexagesimal(degrees: str, minutes: str | None, seconds: str | None,
                      direction: str) -> SexagesimalValue:
    """
    Validate raw DMS fields and build a SexagesimalValue.

    Checks run in order and the first failure is reported:
    degrees in [0, 180], minutes in [0, 60), seconds in [0, 60).

    Raises:
        CoordinateError: OUT_OF_RANGE naming the offending field and value
    """
    deg = float(degrees)
    mins = float(minutes) if minutes else 0.0
    secs = float(seconds) if seconds else 0.0

    if not 0 <= deg <= MAX_DEGREES:
        raise CoordinateError(
            ErrorKind.OUT_OF_RANGE,
            f"Degrees must be between 0 and 180, got {deg}",
        )
    if not 0 <= mins < 60:
        raise CoordinateError(
            ErrorKind.OUT_OF_RANGE,
            f"Minutes must be in [0, 60), got {mins}",
        )
    if not 0 <= secs < 60:
        raise CoordinateError(
            ErrorKind.OUT_OF_RANGE,
            f"Seconds must be in [0, 60), got {secs}",
        )

    return SexagesimalValue(
        degrees=deg,
        minutes=mins,
        seconds=secs,
        direction=direction.upper(),
    )


def parse_compact_dms(token: str) -> SexagesimalValue | None:
    """Parse the fixed-width grammar; returns None when it does not match."""
    match = COMPACT_PATTERN.fullmatch(token.strip())
    if not match:
        return None
    direction, degrees, minutes, seconds = match.groups()
    return build_sexagesimal(degrees, minutes, seconds, direction)


def parse_loose_dms(token: str) -> SexagesimalValue | None:
    """Parse the separator-tolerant grammar; returns None when it does not match."""
    cleaned = token.strip()

    match = LOOSE_LEADING_PATTERN.fullmatch(cleaned)
    if match:
        direction, degrees, minutes, seconds = match.groups()
        return build_sexagesimal(degrees, minutes, seconds, direction)

    match = LOOSE_TRAILING_PATTERN.fullmatch(cleaned)
    if match:
        degrees, minutes, seconds, direction = match.groups()
        return build_sexagesimal(degrees, minutes, seconds, direction)

    return None


def parse_dms(token: str) -> SexagesimalValue:
    """
    Parse a single DMS angle, trying the compact grammar before the loose one.

    The first grammar that matches decides the result; a range error from that
    grammar is reported as-is.

    Args:
        token: One angle such as ``N45°30'15"`` or ``W1224030``

    Returns:
        The validated SexagesimalValue

    Raises:
        CoordinateError: UNRECOGNIZED_FORMAT when no grammar matches,
            OUT_OF_RANGE when a field violates its bound

    Example:
        >>> value = parse_dms("N45°30'15\\"")
        >>> round(value.decimal, 6)
        45.504167
    """
    value = parse_compact_dms(token)
    if value is None:
        value = parse_loose_dms(token)
    if value is None:
        raise CoordinateError(
            ErrorKind.UNRECOGNIZED_FORMAT,
            f"Unrecognized DMS format: {token}",
        )

    logger.debug(f"Parsed DMS {token!r} -> {value.decimal:.9f}")
    return value


def parse_dms_outcome(token: str) -> OperationOutcome[SexagesimalValue]:
    """Outcome-returning form of :func:`parse_dms`."""
    return capture(parse_dms, token)


def dms_to_dd(token: str) -> float:
    """Convert one DMS angle to signed decimal degrees (negative for S/W)."""
    return parse_dms(token).decimal


def _split_angle(value: float, precision: int) -> tuple[int, int, float]:
    abs_value = abs(value)
    degrees = math.floor(abs_value)
    minutes_float = (abs_value - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = round((minutes_float - minutes) * 60, precision)

    # Rounding may push seconds to 60; carry so the output re-parses
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    return degrees, minutes, seconds


def _format_seconds(seconds: float, precision: int) -> str:
    text = f"{seconds:.{max(precision, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_dms(value: float, is_latitude: bool, precision: int = 2) -> str:
    """
    Format one decimal angle as ``<dir><deg>°<min>'<sec>"``.

    Args:
        value: Decimal degrees
        is_latitude: True for N/S, False for E/W
        precision: Fractional digits kept for the seconds field

    Returns:
        DMS string like ``N45°30'15"``
    """
    if is_latitude:
        direction = "N" if value >= 0 else "S"
    else:
        direction = "E" if value >= 0 else "W"

    degrees, minutes, seconds = _split_angle(value, precision)
    return f"{direction}{degrees}°{minutes}'{_format_seconds(seconds, precision)}\""


def decimal_to_dms(latitude: float, longitude: float, precision: int = 2) -> str:
    """
    Convert a decimal coordinate pair to a DMS display string.

    Example:
        >>> print(decimal_to_dms(45.504167, -122.675))
        N45°30'15" W122°40'30"
    """
    return (
        f"{format_dms(latitude, True, precision)} "
        f"{format_dms(longitude, False, precision)}"
    )


def format_decimal_degrees(latitude: float, longitude: float, precision: int = 9) -> str:
    """Render a coordinate pair as two fixed-point numbers: ``"lat lon"``.

    A negative ``precision`` is treated as zero digits.
    """
    digits = max(precision, 0)
    return f"{latitude:.{digits}f} {longitude:.{digits}f}"
