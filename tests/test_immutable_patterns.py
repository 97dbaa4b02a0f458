#!/usr/bin/env python3
"""
Tests for the immutable value types and outcome helpers.

Classes tested:
    - Coordinate, SexagesimalValue, UTMCoordinate, GeodesicResult (frozen dataclasses)
    - Success, Failure, BatchItemOutcome (frozen outcome records)
    - capture() error boundary

Run with: python -m pytest tests/test_immutable_patterns.py -v
"""

from dataclasses import FrozenInstanceError

import pytest

from geocoord.models import (
    Coordinate,
    GeodesicResult,
    SexagesimalValue,
    UTMCoordinate,
    is_valid_coordinate,
)
from geocoord.outcome import (
    BatchItemOutcome,
    CoordinateError,
    ErrorKind,
    Failure,
    Success,
    capture,
)
from geocoord.types import Degrees, Meters

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def portland() -> Coordinate:
    return Coordinate(latitude=Degrees(45.504167), longitude=Degrees(-122.675))


# ============================================================================
# Frozen dataclasses
# ============================================================================


class TestFrozenModels:
    """Value types reject mutation."""

    def test_coordinate(self, portland: Coordinate) -> None:
        with pytest.raises(FrozenInstanceError):
            portland.latitude = Degrees(0.0)

    def test_sexagesimal_value(self) -> None:
        value = SexagesimalValue(degrees=45.0, minutes=30.0, seconds=15.0, direction="N")
        with pytest.raises(FrozenInstanceError):
            value.direction = "S"

    def test_utm_coordinate(self) -> None:
        utm = UTMCoordinate(zone=18, hemisphere="N", easting=Meters(583960.0), northing=Meters(4507523.0))
        with pytest.raises(FrozenInstanceError):
            utm.zone = 19

    def test_outcomes(self) -> None:
        with pytest.raises(FrozenInstanceError):
            Success(1).data = 2
        with pytest.raises(FrozenInstanceError):
            Failure("bad").message = "worse"


class TestCoordinate:
    """Coordinate helpers."""

    def test_to_dict_omits_missing_altitude(self, portland: Coordinate) -> None:
        assert portland.to_dict() == {"latitude": 45.504167, "longitude": -122.675}

    def test_dict_round_trip_with_altitude(self) -> None:
        coord = Coordinate(Degrees(10.0), Degrees(20.0), altitude=Meters(150.5))

        assert Coordinate.from_dict(coord.to_dict()) == coord

    @pytest.mark.parametrize(
        "lat,lon,valid",
        [(90.0, 180.0, True), (-90.0, -180.0, True), (90.1, 0.0, False), (0.0, -180.1, False)],
        ids=["max", "min", "latitude-over", "longitude-under"],
    )
    def test_validity(self, lat: float, lon: float, valid: bool) -> None:
        assert is_valid_coordinate(lat, lon) is valid
        assert Coordinate(Degrees(lat), Degrees(lon)).is_valid is valid


class TestSexagesimalValue:
    @pytest.mark.parametrize(
        "direction,sign,is_latitude",
        [("N", 1, True), ("S", -1, True), ("E", 1, False), ("W", -1, False)],
        ids=["north", "south", "east", "west"],
    )
    def test_decimal_sign(self, direction: str, sign: int, is_latitude: bool) -> None:
        value = SexagesimalValue(degrees=12.0, minutes=30.0, seconds=0.0, direction=direction)

        assert value.decimal == pytest.approx(sign * 12.5)
        assert value.is_latitude is is_latitude


class TestGeodesicResult:
    def test_to_dict(self) -> None:
        result = GeodesicResult(Meters(1000.0), Degrees(90.0), Degrees(270.0))

        assert result.to_dict() == {
            "distance_meters": 1000.0,
            "forward_bearing_deg": 90.0,
            "reverse_bearing_deg": 270.0,
        }


# ============================================================================
# Outcomes
# ============================================================================


class TestCapture:
    """capture() turns CoordinateError into Failure and nothing else."""

    def test_success(self) -> None:
        assert capture(int, "42") == Success(42)

    def test_coordinate_error(self) -> None:
        def reject() -> None:
            raise CoordinateError(ErrorKind.MISSING_COMPONENT, "half a pair")

        assert capture(reject) == Failure("half a pair", ErrorKind.MISSING_COMPONENT)

    def test_other_errors_propagate(self) -> None:
        with pytest.raises(ZeroDivisionError):
            capture(lambda: 1 / 0)

    def test_coordinate_error_is_value_error(self) -> None:
        assert issubclass(CoordinateError, ValueError)


class TestBatchItemOutcome:
    def test_success_accessors(self) -> None:
        item = BatchItemOutcome(index=3, outcome=Success("ok"))

        assert item.success
        assert item.data == "ok"
        assert item.message is None
        assert item.to_dict() == {"index": 3, "success": True, "data": "ok"}

    def test_failure_accessors(self) -> None:
        item = BatchItemOutcome(index=0, outcome=Failure("Empty input", ErrorKind.EMPTY_INPUT))

        assert not item.success
        assert item.data is None
        assert item.message == "Empty input"
        assert item.to_dict()["kind"] == "empty_input"
