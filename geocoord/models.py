"""Coordinate value objects shared by the parsers, projector and calculator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from geocoord.types import Degrees, Meters

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class CoordinateFormat(Enum):
    """Notation a piece of coordinate text is written in."""

    DMS = "dms"
    DECIMAL = "decimal"
    UTM = "utm"
    MGRS = "mgrs"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Coordinate:
    """A geographic position in decimal degrees.

    Attributes:
        latitude: Latitude in [-90, 90], positive north.
        longitude: Longitude in [-180, 180], positive east.
        altitude: Optional height in meters.
    """

    latitude: Degrees
    longitude: Degrees
    altitude: Meters | None = None

    @property
    def is_valid(self) -> bool:
        return is_valid_coordinate(self.latitude, self.longitude)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary; exporters rely on the latitude/longitude keys."""
        result: dict[str, Any] = {
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        if self.altitude is not None:
            result["altitude"] = self.altitude
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Coordinate:
        altitude = data.get("altitude")
        return cls(
            latitude=Degrees(float(data["latitude"])),
            longitude=Degrees(float(data["longitude"])),
            altitude=Meters(float(altitude)) if altitude is not None else None,
        )


@dataclass(frozen=True)
class SexagesimalValue:
    """One parsed degrees/minutes/seconds angle with its hemisphere letter."""

    degrees: float
    minutes: float
    seconds: float
    direction: str

    @property
    def decimal(self) -> Degrees:
        """Signed decimal degrees (negative for S and W)."""
        value = self.degrees + self.minutes / 60 + self.seconds / 3600
        if self.direction in ("S", "W"):
            value = -value
        return Degrees(value)

    @property
    def is_latitude(self) -> bool:
        return self.direction in ("N", "S")


@dataclass(frozen=True)
class UTMCoordinate:
    """Universal Transverse Mercator position.

    Attributes:
        zone: Longitudinal zone number, 1-60.
        hemisphere: 'N' or 'S'.
        easting: Meters east, including the 500 km false easting.
        northing: Meters north, including the 10 000 km false northing south
            of the equator.
    """

    zone: int
    hemisphere: str
    easting: Meters
    northing: Meters

    def __str__(self) -> str:
        return f"{self.zone}{self.hemisphere} {self.easting:.0f} {self.northing:.0f}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "zone": self.zone,
            "hemisphere": self.hemisphere,
            "easting": self.easting,
            "northing": self.northing,
        }


@dataclass(frozen=True)
class GeodesicResult:
    """Great-circle relationship between two coordinates."""

    distance_meters: Meters
    forward_bearing_deg: Degrees
    reverse_bearing_deg: Degrees

    def to_dict(self) -> dict[str, Any]:
        return {
            "distance_meters": self.distance_meters,
            "forward_bearing_deg": self.forward_bearing_deg,
            "reverse_bearing_deg": self.reverse_bearing_deg,
        }


@dataclass(frozen=True)
class ValidationReport:
    """Result of a successful format validation."""

    format: CoordinateFormat
    valid: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "format": self.format.value}


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Check latitude and longitude against their geographic ranges."""
    return (
        MIN_LATITUDE <= latitude <= MAX_LATITUDE
        and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE
    )
