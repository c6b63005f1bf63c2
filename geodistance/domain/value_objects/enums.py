"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class DistanceUnit(str, Enum):
    MILES = "mi"
    KILOMETERS = "km"

    @property
    def earth_radius(self) -> int:
        """Mean Earth radius expressed in this unit."""
        return EARTH_RADIUS[self]


EARTH_RADIUS: dict[DistanceUnit, int] = {
    DistanceUnit.MILES: 3959,
    DistanceUnit.KILOMETERS: 6371,
}

# Long names accepted on input alongside the enum values
UNIT_ALIASES: dict[str, DistanceUnit] = {
    "miles": DistanceUnit.MILES,
    "kilometers": DistanceUnit.KILOMETERS,
}


class ErrorKind(str, Enum):
    INVALID_COORDINATES = "invalid_coordinates"
    INVALID_LATITUDE = "invalid_latitude"
    INVALID_LONGITUDE = "invalid_longitude"
    INVALID_UNIT = "invalid_unit"
    CALCULATION_ERROR = "calculation_error"
