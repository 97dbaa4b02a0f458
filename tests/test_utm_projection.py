"""
Tests for the closed-form UTM forward projection.

The series is cross-checked against pyproj's WGS84 / UTM zone CRSs
(EPSG:326xx north, EPSG:327xx south).
"""

import math

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st
from pyproj import Transformer

from geocoord.models import UTMCoordinate
from geocoord.utm_projection import (
    UTM_FALSE_EASTING_M,
    UTM_FALSE_NORTHING_M,
    central_meridian,
    to_utm,
    utm_zone,
)

_transformers: dict[int, Transformer] = {}


def _reference_utm(latitude: float, longitude: float, zone: int, hemisphere: str):
    epsg = (32600 if hemisphere == "N" else 32700) + zone
    if epsg not in _transformers:
        _transformers[epsg] = Transformer.from_crs("EPSG:4326", f"EPSG:{epsg}", always_xy=True)
    return _transformers[epsg].transform(longitude, latitude)


class TestUtmZone:
    """Tests for zone numbering and central meridians."""

    @pytest.mark.parametrize(
        "longitude,zone",
        [
            (-180.0, 1),
            (-177.0, 1),
            (-174.0, 2),
            (-74.006, 18),
            (0.0, 31),
            (3.0, 31),
            (6.0, 32),
            (151.2093, 56),
            (179.99, 60),
            (180.0, 60),
        ],
        ids=["antimeridian-west", "zone-1", "zone-2", "new-york", "greenwich",
             "zone-31-center", "zone-32-edge", "sydney", "zone-60", "antimeridian-east"],
    )
    def test_zone(self, longitude: float, zone: int) -> None:
        assert utm_zone(longitude) == zone

    @pytest.mark.parametrize(
        "zone,meridian",
        [(1, -177), (18, -75), (31, 3), (60, 177)],
        ids=["zone-1", "zone-18", "zone-31", "zone-60"],
    )
    def test_central_meridian(self, zone: int, meridian: float) -> None:
        assert central_meridian(zone) == meridian


class TestToUtm:
    """Tests for the projected values."""

    def test_new_york(self) -> None:
        utm = to_utm(40.7128, -74.0060)

        assert utm.zone == 18
        assert utm.hemisphere == "N"
        ref_e, ref_n = _reference_utm(40.7128, -74.0060, 18, "N")
        np.testing.assert_allclose([utm.easting, utm.northing], [ref_e, ref_n], atol=2.0)

    def test_sydney_southern_hemisphere(self) -> None:
        utm = to_utm(-33.8688, 151.2093)

        assert utm.zone == 56
        assert utm.hemisphere == "S"
        assert 6.2e6 < utm.northing < 6.3e6

    def test_origin_on_central_meridian(self) -> None:
        utm = to_utm(0.0, 3.0)

        assert utm.hemisphere == "N"
        assert utm.easting == UTM_FALSE_EASTING_M
        assert utm.northing == 0

    def test_easting_symmetric_about_central_meridian(self) -> None:
        east = to_utm(10.0, 4.0)
        west = to_utm(10.0, 2.0)

        assert east.northing == west.northing
        assert east.easting - UTM_FALSE_EASTING_M == pytest.approx(
            UTM_FALSE_EASTING_M - west.easting, abs=1
        )

    def test_values_rounded_to_meters(self) -> None:
        utm = to_utm(45.5041666667, -122.675)

        assert utm.easting == round(utm.easting)
        assert utm.northing == round(utm.northing)

    @pytest.mark.parametrize("latitude", [90.0, -90.0], ids=["north-pole", "south-pole"])
    def test_poles_do_not_raise(self, latitude: float) -> None:
        """Test the series stays finite at the poles even though UTM is undefined there."""
        utm = to_utm(latitude, 10.0)

        assert math.isfinite(utm.easting)
        assert math.isfinite(utm.northing)

    def test_str(self) -> None:
        utm = UTMCoordinate(zone=18, hemisphere="N", easting=583960.0, northing=4507523.0)

        assert str(utm) == "18N 583960 4507523"


class TestToUtmAgainstPyproj:
    """Property: the series agrees with pyproj inside the UTM latitude band."""

    @given(
        latitude=st.floats(min_value=-80.0, max_value=84.0, allow_nan=False),
        longitude=st.floats(min_value=-179.9, max_value=179.9, allow_nan=False),
    )
    @settings(max_examples=200, deadline=None)
    def test_matches_reference(self, latitude: float, longitude: float) -> None:
        utm = to_utm(latitude, longitude)
        ref_e, ref_n = _reference_utm(latitude, longitude, utm.zone, utm.hemisphere)

        assert 1 <= utm.zone <= 60
        assert utm.hemisphere == ("N" if latitude >= 0 else "S")
        np.testing.assert_allclose([utm.easting, utm.northing], [ref_e, ref_n], atol=2.0)

    @given(latitude=st.floats(min_value=-80.0, max_value=-1e-6, allow_nan=False))
    @settings(max_examples=50)
    def test_southern_false_northing(self, latitude: float) -> None:
        utm = to_utm(latitude, 3.0)

        assert utm.hemisphere == "S"
        assert 0 < utm.northing <= UTM_FALSE_NORTHING_M
