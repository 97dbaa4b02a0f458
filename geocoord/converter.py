"""
Single-item coordinate operations.

Each function takes raw coordinate text, classifies it, routes it to the
matching parser and returns an ``OperationOutcome``. None of them raises for
bad input; the outcome's ``Failure`` carries the message to show the user.

Supported conversions:

    ============  ==================================
    Source        Targets
    ============  ==================================
    DMS pair      decimal, DMS (normalized), UTM
    decimal       decimal, DMS, UTM
    UTM / MGRS    detection only (UNSUPPORTED_OPERATION)
    ============  ==================================
"""

import logging
import re
from typing import Optional

from geocoord.config import EngineConfig, get_default_config
from geocoord.format_classifier import detect_format
from geocoord.models import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    Coordinate,
    CoordinateFormat,
    UTMCoordinate,
    ValidationReport,
)
from geocoord.outcome import (
    CoordinateError,
    ErrorKind,
    Failure,
    OperationOutcome,
    Success,
    capture,
)
from geocoord.pair_resolver import parse_coordinate_pair
from geocoord.sexagesimal import decimal_to_dms, format_decimal_degrees
from geocoord.types import Degrees
from geocoord.utm_projection import to_utm

logger = logging.getLogger(__name__)

DECIMAL_SEPARATOR = re.compile(r"[,\s]+")
DECIMAL_PAIR_PATTERN = re.compile(r"^(-?\d+\.?\d*)[,\s]+(-?\d+\.?\d*)$")


def _empty_failure() -> Failure:
    return Failure("Input cannot be empty.", ErrorKind.EMPTY_INPUT)


def _check_range(latitude: float, longitude: float) -> None:
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise CoordinateError(
            ErrorKind.OUT_OF_RANGE,
            f"Latitude must be between -90 and 90 degrees, got {latitude}",
        )
    if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise CoordinateError(
            ErrorKind.OUT_OF_RANGE,
            f"Longitude must be between -180 and 180 degrees, got {longitude}",
        )


def parse_decimal_pair(text: str) -> Coordinate:
    """
    Parse ``"lat, lon"`` or ``"lat lon"`` decimal degrees.

    Raises:
        CoordinateError: UNRECOGNIZED_FORMAT when the text is not exactly two
            numbers, OUT_OF_RANGE when a value is outside its geographic range
    """
    parts = [part for part in DECIMAL_SEPARATOR.split(text.strip()) if part]
    try:
        values = [float(part) for part in parts]
    except ValueError:
        values = []
    if len(values) != 2:
        raise CoordinateError(
            ErrorKind.UNRECOGNIZED_FORMAT, "Invalid decimal degree format"
        )

    latitude, longitude = values
    _check_range(latitude, longitude)
    return Coordinate(latitude=Degrees(latitude), longitude=Degrees(longitude))


def _to_coordinate(text: str, config: EngineConfig) -> Coordinate:
    detected = detect_format(text)

    if detected is CoordinateFormat.DMS:
        return parse_coordinate_pair(text, config.pair_split)
    if detected is CoordinateFormat.DECIMAL:
        return parse_decimal_pair(text)
    if detected is CoordinateFormat.UNKNOWN:
        raise CoordinateError(
            ErrorKind.UNRECOGNIZED_FORMAT, "Unknown coordinate format"
        )
    raise CoordinateError(
        ErrorKind.UNSUPPORTED_OPERATION,
        f"Conversion from {detected.value} not yet implemented",
    )


def validate_input(text: str) -> OperationOutcome[ValidationReport]:
    """Report whether the text is written in any recognized notation."""
    if not text.strip():
        return _empty_failure()

    detected = detect_format(text)
    if detected is CoordinateFormat.UNKNOWN:
        return Failure("Unknown coordinate format", ErrorKind.UNRECOGNIZED_FORMAT)
    return Success(ValidationReport(format=detected))


def convert_coordinate(text: str,
                       config: Optional[EngineConfig] = None) -> OperationOutcome[Coordinate]:
    """
    Convert DMS or decimal text into a validated Coordinate.

    Example:
        >>> outcome = convert_coordinate('N45°30\\'15" W122°40\\'30"')
        >>> f"{outcome.data.latitude:.6f}"
        '45.504167'
    """
    if not text.strip():
        return _empty_failure()
    config = config or get_default_config()
    return capture(_to_coordinate, text.strip(), config)


def convert_to_decimal_string(text: str,
                              config: Optional[EngineConfig] = None,
                              precision: Optional[int] = None) -> OperationOutcome[str]:
    """Convert text to the ``"lat lon"`` fixed-point display string."""
    config = config or get_default_config()
    outcome = convert_coordinate(text, config)
    if not outcome.success:
        return outcome

    digits = config.decimal_precision if precision is None else precision
    coord = outcome.data
    return Success(format_decimal_degrees(coord.latitude, coord.longitude, digits))


def convert_to_utm(text: str,
                   config: Optional[EngineConfig] = None) -> OperationOutcome[UTMCoordinate]:
    """Convert text to a UTM zone/hemisphere/easting/northing record."""
    outcome = convert_coordinate(text, config)
    if not outcome.success:
        return outcome

    coord = outcome.data
    return Success(to_utm(coord.latitude, coord.longitude))


def convert_to_dms(text: str,
                   config: Optional[EngineConfig] = None,
                   precision: Optional[int] = None) -> OperationOutcome[str]:
    """Convert text to the DMS display string."""
    config = config or get_default_config()
    outcome = convert_coordinate(text, config)
    if not outcome.success:
        return outcome

    digits = config.dms_precision if precision is None else precision
    coord = outcome.data
    return Success(decimal_to_dms(coord.latitude, coord.longitude, digits))


def parse_any_coordinate(text: str,
                         config: Optional[EngineConfig] = None) -> OperationOutcome[Coordinate]:
    """
    Parse a single point typed as decimal degrees or as a DMS pair.

    Decimal degrees are tried first; anything else goes through the DMS pair
    resolver.
    """
    trimmed = text.strip()
    if not trimmed:
        return _empty_failure()
    config = config or get_default_config()

    match = DECIMAL_PAIR_PATTERN.match(trimmed)
    if match:
        latitude, longitude = float(match.group(1)), float(match.group(2))
        return capture(_checked_coordinate, latitude, longitude)

    return capture(parse_coordinate_pair, trimmed, config.pair_split)


def _checked_coordinate(latitude: float, longitude: float) -> Coordinate:
    _check_range(latitude, longitude)
    return Coordinate(latitude=Degrees(latitude), longitude=Degrees(longitude))
