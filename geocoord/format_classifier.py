"""
Coordinate notation detection.

Classifies a piece of coordinate text as DMS, decimal degrees, UTM, MGRS or
unknown. The grammars overlap (a decimal-looking token can also satisfy a loose
DMS pattern), so the tests run in a fixed priority order:

    DMS -> UTM -> MGRS -> decimal degrees -> unknown
"""

import logging
import re

from geocoord.models import CoordinateFormat

logger = logging.getLogger(__name__)

# UTM latitude bands skip I and O
UTM_BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
# MGRS 100 km square letters skip I and O
MGRS_SQUARE_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"

DMS_PATTERNS = (
    re.compile(r"[NSEW].*[°'\"′″]"),
    re.compile(r"\d+°\d+['′]\d+[\"″]"),
    re.compile(r"[NSEW]\d+\s+\d+\s+\d+"),
    # compact token such as N453015 or W1224030.5
    re.compile(r"(?:^|[\s,])[NSEW]\d{4,7}(?:\.\d+)?(?=[\s,]|$)"),
    # whitespace groups with the hemisphere letter at the end, e.g. 45 30 15N
    re.compile(r"(?:^|[\s,])\d+\s+\d+(?:\s+\d+(?:\.\d+)?)?\s*[NSEW](?=[\s,]|$)"),
)

UTM_PATTERN = re.compile(
    rf"^\d{{1,2}}[{UTM_BAND_LETTERS}]\s+\d+\.?\d*\s+\d+\.?\d*$"
)

MGRS_PATTERN = re.compile(
    rf"^\d{{1,2}}[{UTM_BAND_LETTERS}][{MGRS_SQUARE_LETTERS}]{{2}}\d{{2,10}}$"
)

DECIMAL_PATTERN = re.compile(r"^-?\d+\.?\d*\s*,?\s*-?\d+\.?\d*$")


def detect_format(text: str) -> CoordinateFormat:
    """
    Detect which coordinate notation a string is written in.

    Never raises: text that matches no grammar (including an empty string)
    is reported as ``CoordinateFormat.UNKNOWN``.

    Args:
        text: Raw coordinate text

    Returns:
        The detected CoordinateFormat

    Example:
        >>> detect_format('N45°30\\'15" W122°40\\'30"')
        <CoordinateFormat.DMS: 'dms'>
        >>> detect_format("18T 585628 4511322")
        <CoordinateFormat.UTM: 'utm'>
        >>> detect_format("40.7128, -74.0060")
        <CoordinateFormat.DECIMAL: 'decimal'>
    """
    cleaned = text.strip().upper()

    if any(pattern.search(cleaned) for pattern in DMS_PATTERNS):
        detected = CoordinateFormat.DMS
    elif UTM_PATTERN.match(cleaned):
        detected = CoordinateFormat.UTM
    elif MGRS_PATTERN.match(cleaned):
        detected = CoordinateFormat.MGRS
    elif DECIMAL_PATTERN.match(cleaned):
        detected = CoordinateFormat.DECIMAL
    else:
        detected = CoordinateFormat.UNKNOWN

    logger.debug(f"Detected {detected.value} format for {cleaned!r}")
    return detected
