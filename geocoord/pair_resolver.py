"""
Latitude/longitude pair resolution for DMS text.

A pair such as ``N45°30'15" W122°40'30"`` or ``N45 30 15 W122 40 30`` is
split into a latitude half and a longitude half, each half is parsed with
:func:`geocoord.sexagesimal.parse_dms`, and the two angles are cross-checked
(latitude must carry N/S, longitude E/W, and both must be inside their
geographic ranges).

Splitting strategies:
    MIDPOINT: split the token list at ``len(tokens) // 2``. Only correct when
        both halves tokenize to the same number of tokens; ``N45 30 W122 40 30``
        is mis-split.
    DIRECTION: split at the hemisphere letter of the longitude (the first
        later token that starts with a letter when letters lead, or right after
        the first token that ends with one when letters trail). Falls back to
        MIDPOINT when no anchor is found.
"""

import logging
import re
from enum import Enum

from geocoord.models import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    Coordinate,
)
from geocoord.outcome import CoordinateError, ErrorKind, OperationOutcome, capture
from geocoord.sexagesimal import parse_dms
from geocoord.types import Degrees

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = re.compile(r"[\s,]+")
HEMISPHERE_LETTERS = "NSEW"


class PairSplitStrategy(Enum):
    """How a tokenized DMS pair is divided into latitude and longitude."""

    MIDPOINT = "midpoint"
    DIRECTION = "direction"


def tokenize(text: str) -> list[str]:
    """Split on runs of whitespace and commas, dropping empty pieces."""
    return [part for part in TOKEN_SEPARATOR.split(text) if part]


def _direction_split_index(tokens: list[str]) -> int | None:
    if tokens[0][0].upper() in HEMISPHERE_LETTERS:
        for i in range(1, len(tokens)):
            if tokens[i][0].upper() in HEMISPHERE_LETTERS:
                return i
        return None

    for i in range(len(tokens) - 1):
        # lowercase s is the seconds marker, not south
        if tokens[i][-1] in "NSEWnew":
            return i + 1
    return None


def split_pair(tokens: list[str],
               strategy: PairSplitStrategy = PairSplitStrategy.MIDPOINT) -> tuple[str, str]:
    """
    Divide tokens into latitude and longitude text.

    Args:
        tokens: At least two tokens from :func:`tokenize`
        strategy: Splitting strategy

    Returns:
        Tuple of (latitude_text, longitude_text), each re-joined with single spaces
    """
    split_at = None
    if strategy is PairSplitStrategy.DIRECTION:
        split_at = _direction_split_index(tokens)
        if split_at is None:
            logger.debug("No hemisphere anchor found, falling back to midpoint split")
    if split_at is None:
        split_at = len(tokens) // 2

    return " ".join(tokens[:split_at]), " ".join(tokens[split_at:])


def parse_coordinate_pair(text: str,
                          strategy: PairSplitStrategy = PairSplitStrategy.MIDPOINT) -> Coordinate:
    """
    Parse a string holding a DMS latitude followed by a DMS longitude.

    Args:
        text: Pair text such as ``45°30'15"N 122°40'30"W``
        strategy: How to split the tokens into the two halves

    Returns:
        Validated Coordinate

    Raises:
        CoordinateError: EMPTY_INPUT, MISSING_COMPONENT, UNRECOGNIZED_FORMAT,
            WRONG_AXIS_DIRECTION or OUT_OF_RANGE

    Example:
        >>> coord = parse_coordinate_pair('N45°30\\'15" W122°40\\'30"')
        >>> f"{coord.latitude:.6f} {coord.longitude:.6f}"
        '45.504167 -122.675000'
    """
    if not text.strip():
        raise CoordinateError(ErrorKind.EMPTY_INPUT, "Input cannot be empty.")

    tokens = tokenize(text)
    if len(tokens) < 2:
        raise CoordinateError(
            ErrorKind.MISSING_COMPONENT,
            "Input must include both latitude and longitude.",
        )

    lat_text, lon_text = split_pair(tokens, strategy)
    lat_value = parse_dms(lat_text)
    lon_value = parse_dms(lon_text)

    if lat_value.direction not in ("N", "S"):
        raise CoordinateError(
            ErrorKind.WRONG_AXIS_DIRECTION,
            f"Invalid latitude direction: {lat_value.direction}. Must be N or S.",
        )
    if lon_value.direction not in ("E", "W"):
        raise CoordinateError(
            ErrorKind.WRONG_AXIS_DIRECTION,
            f"Invalid longitude direction: {lon_value.direction}. Must be E or W.",
        )

    latitude = lat_value.decimal
    longitude = lon_value.decimal

    # The degrees field is only bounded to 180, so 95°N gets this far
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

    return Coordinate(latitude=Degrees(latitude), longitude=Degrees(longitude))


def resolve_pair(text: str,
                 strategy: PairSplitStrategy = PairSplitStrategy.MIDPOINT) -> OperationOutcome[Coordinate]:
    """Outcome-returning form of :func:`parse_coordinate_pair`."""
    return capture(parse_coordinate_pair, text, strategy)
