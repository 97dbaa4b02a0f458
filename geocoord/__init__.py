"""
Geographic coordinate interpretation and conversion.

This package detects the notation of free-form coordinate text, parses it into
validated decimal coordinates and converts between representations:

    - DMS (degrees, minutes, seconds) in compact or loose notation
    - Decimal degrees
    - UTM (forward projection by closed-form series)
    - Great-circle distance and bearings (Haversine)

MGRS text is recognized but not converted.

Every public operation returns an ``OperationOutcome`` (``Success`` or
``Failure``) rather than raising on bad input.

Example Usage:
    >>> from geocoord import convert_coordinate, convert_to_utm
    >>>
    >>> outcome = convert_coordinate('N45°30\\'15" W122°40\\'30"')
    >>> if outcome.success:
    ...     print(f"{outcome.data.latitude:.6f}, {outcome.data.longitude:.6f}")
    45.504167, -122.675000
    >>>
    >>> utm = convert_to_utm("40.7128, -74.0060").data
    >>> utm.zone, utm.hemisphere
    (18, 'N')
"""

from geocoord.batch import (
    BatchOperation,
    BatchSummary,
    batch_process,
    batch_process_threaded,
    process_in_chunks,
    run_batch,
    summarize,
)
from geocoord.config import EngineConfig, get_default_config
from geocoord.converter import (
    convert_coordinate,
    convert_to_decimal_string,
    convert_to_dms,
    convert_to_utm,
    parse_any_coordinate,
    parse_decimal_pair,
    validate_input,
)
from geocoord.format_classifier import detect_format
from geocoord.gps_distance_calculator import (
    bearing_between_points,
    bearing_error,
    calculate_distance,
    distance_between,
    format_bearing,
    format_distance,
    get_cardinal_direction,
    haversine_distance,
)
from geocoord.models import (
    Coordinate,
    CoordinateFormat,
    GeodesicResult,
    SexagesimalValue,
    UTMCoordinate,
    ValidationReport,
    is_valid_coordinate,
)
from geocoord.outcome import (
    BatchItemOutcome,
    CoordinateError,
    ErrorKind,
    Failure,
    OperationOutcome,
    Success,
)
from geocoord.pair_resolver import PairSplitStrategy, parse_coordinate_pair, resolve_pair
from geocoord.sexagesimal import (
    decimal_to_dms,
    dms_to_dd,
    format_decimal_degrees,
    parse_dms,
    parse_dms_outcome,
)
from geocoord.utm_projection import to_utm

__all__ = [
    # Data model
    'Coordinate',
    'CoordinateFormat',
    'GeodesicResult',
    'SexagesimalValue',
    'UTMCoordinate',
    'ValidationReport',
    'is_valid_coordinate',

    # Outcomes
    'OperationOutcome',
    'Success',
    'Failure',
    'ErrorKind',
    'CoordinateError',
    'BatchItemOutcome',

    # Parsing and formatting
    'detect_format',
    'parse_dms',
    'parse_dms_outcome',
    'dms_to_dd',
    'parse_coordinate_pair',
    'resolve_pair',
    'PairSplitStrategy',
    'decimal_to_dms',
    'format_decimal_degrees',

    # Conversions
    'validate_input',
    'convert_coordinate',
    'convert_to_decimal_string',
    'convert_to_dms',
    'convert_to_utm',
    'parse_any_coordinate',
    'parse_decimal_pair',
    'to_utm',

    # Distance and bearing
    'calculate_distance',
    'distance_between',
    'haversine_distance',
    'bearing_between_points',
    'get_cardinal_direction',
    'format_distance',
    'format_bearing',
    'bearing_error',

    # Batch
    'BatchOperation',
    'BatchSummary',
    'batch_process',
    'batch_process_threaded',
    'process_in_chunks',
    'run_batch',
    'summarize',

    # Configuration
    'EngineConfig',
    'get_default_config',
]

__version__ = '0.1.0'
__description__ = 'Coordinate notation detection, parsing and conversion'
