"""DistanceCalculator entity — great-circle distance between two points.

Example:
    calculator = DistanceCalculator(
        {"latitude": 40.7128, "longitude": -74.0060},
        {"latitude": 51.5074, "longitude": -0.1278},
        "km",
    )
    calculator.get_distance()

Instances are not safe for concurrent mutation; guard setters with a lock if
an instance is shared between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any, Callable

from geodistance.config import settings
from geodistance.domain.exceptions import CalculationError, GeoDistanceError
from geodistance.domain.policies.coordinate_validation import (
    validate_coordinates,
    validate_unit,
)
from geodistance.domain.value_objects.enums import DistanceUnit
from geodistance.domain.value_objects.geo_point import GeoPoint
from geodistance.domain.value_objects.outcome import Outcome

logger = logging.getLogger(__name__)

PointInput = GeoPoint | Mapping[str, Any]


class DistanceCalculator:
    """Holds two points and a unit; computes the Haversine distance on demand.

    Every public operation that can fail raises a GeoDistanceError subclass
    and records it as the last error. A successful operation clears it.
    """

    def __init__(
        self,
        point_a: PointInput,
        point_b: PointInput,
        unit: DistanceUnit | str | None = None,
    ):
        self._last_error: GeoDistanceError | None = None
        if unit is None:
            unit = settings.default_unit

        self._point_a: GeoPoint = self._run(lambda: validate_coordinates(point_a, "Point A"))
        self._point_b: GeoPoint = self._run(lambda: validate_coordinates(point_b, "Point B"))
        self._unit: DistanceUnit = self._run(lambda: validate_unit(unit))

    # ─── Points ──────────────────────────────────────────────────────

    def get_point_a(self) -> GeoPoint:
        return self._point_a

    def get_point_b(self) -> GeoPoint:
        return self._point_b

    def set_point_a(self, point_a: PointInput) -> bool:
        """Replace point A. The stored point is kept if validation fails."""
        self._point_a = self._run(lambda: validate_coordinates(point_a, "Point A"))
        return True

    def set_point_b(self, point_b: PointInput) -> bool:
        """Replace point B. The stored point is kept if validation fails."""
        self._point_b = self._run(lambda: validate_coordinates(point_b, "Point B"))
        return True

    # ─── Unit ────────────────────────────────────────────────────────

    def get_unit(self) -> DistanceUnit:
        return self._unit

    def set_unit(self, unit: DistanceUnit | str) -> bool:
        self._unit = self._run(lambda: validate_unit(unit))
        return True

    # ─── Distance ────────────────────────────────────────────────────

    def get_distance(self) -> float:
        """Distance between point A and point B in the current unit, rounded to 2 places."""
        return self._run(lambda: self._distance_between(self._point_a, self._point_b))

    def is_within_radius(self, point: PointInput, radius: float) -> bool:
        """Check whether *point* lies within *radius* of point A.

        The radius must be a real number; it is read in the current unit and
        compared against the rounded distance. Point B is not involved.

        Raises:
            TypeError: radius is not a real number.
        """
        if not isinstance(radius, Real) or isinstance(radius, bool):
            raise TypeError(f"radius must be a real number, got {type(radius).__name__}")

        def check() -> bool:
            target = validate_coordinates(point, "Point")
            return self._distance_between(self._point_a, target) <= radius

        return self._run(check)

    def get_last_error(self) -> GeoDistanceError | None:
        return self._last_error

    # ─── Internals ───────────────────────────────────────────────────

    def _distance_between(self, origin: GeoPoint, target: GeoPoint) -> float:
        try:
            distance = origin.haversine(target, self._unit.earth_radius)
        except (ValueError, ArithmeticError) as exc:
            logger.exception(
                "Distance calculation failed for %s -> %s", origin.as_dict(), target.as_dict()
            )
            raise CalculationError(str(exc)) from exc
        return round(distance, 2)

    def _run(self, operation: Callable[[], Any]) -> Any:
        """Run an operation, record its error as last error, and raise on failure."""
        outcome = Outcome.capture(operation)
        self._last_error = outcome.error
        if not outcome.ok:
            logger.debug("Rejected: [%s] %s", outcome.error.kind.value, outcome.error.message)
        return outcome.unwrap()
