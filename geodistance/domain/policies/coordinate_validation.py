"""CoordinateValidationPolicy — turn raw caller input into domain values.

Checks run in a fixed order: existence, then numeric type, then range. A
non-numeric latitude is therefore reported as ``invalid_latitude``, not as a
missing coordinate.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any

from geodistance.domain.exceptions import (
    InvalidCoordinatesError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidUnitError,
)
from geodistance.domain.value_objects.enums import UNIT_ALIASES, DistanceUnit
from geodistance.domain.value_objects.geo_point import GeoPoint

LATITUDE_RANGE = (-90, 90)
LONGITUDE_RANGE = (-180, 180)


def _is_real(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, Real) and not isinstance(value, bool)


def _in_range(value: Any, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    # NaN fails both comparisons; large ints compare without float conversion
    return _is_real(value) and low <= value <= high


def validate_coordinates(point: GeoPoint | Mapping[str, Any], label: str) -> GeoPoint:
    """Validate a point and return it as a GeoPoint.

    Args:
        point: a GeoPoint or a mapping with ``latitude`` and ``longitude`` keys.
        label: name used in error messages, e.g. "Point A".

    Returns:
        GeoPoint holding the validated coordinates.

    Raises:
        InvalidCoordinatesError: a coordinate is missing.
        InvalidLatitudeError: latitude is non-numeric or outside [-90, 90].
        InvalidLongitudeError: longitude is non-numeric or outside [-180, 180].
    """
    if isinstance(point, GeoPoint):
        lat, lon = point.latitude, point.longitude
    elif isinstance(point, Mapping):
        lat, lon = point.get("latitude"), point.get("longitude")
    else:
        lat = lon = None

    if lat is None or lon is None:
        raise InvalidCoordinatesError(f"{label} must contain 'latitude' and 'longitude' keys")

    if not _in_range(lat, LATITUDE_RANGE):
        raise InvalidLatitudeError(f"{label} latitude must be between -90 and 90 degrees")

    if not _in_range(lon, LONGITUDE_RANGE):
        raise InvalidLongitudeError(f"{label} longitude must be between -180 and 180 degrees")

    if isinstance(point, GeoPoint):
        return point
    return GeoPoint(latitude=float(lat), longitude=float(lon))


def validate_unit(unit: DistanceUnit | str) -> DistanceUnit:
    """Resolve a unit value or alias to a DistanceUnit.

    Raises:
        InvalidUnitError: the unit is not supported.
    """
    if isinstance(unit, DistanceUnit):
        return unit
    if isinstance(unit, str):
        if unit in UNIT_ALIASES:
            return UNIT_ALIASES[unit]
        for candidate in DistanceUnit:
            if candidate.value == unit:
                return candidate

    supported = ", ".join(u.value for u in DistanceUnit)
    raise InvalidUnitError(f"Invalid unit. Supported units are: {supported}")
