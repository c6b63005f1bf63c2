"""Domain exceptions — one class per error kind."""

from geodistance.domain.value_objects.enums import ErrorKind


class GeoDistanceError(ValueError):
    """Base exception for distance calculator errors.

    Carries a machine-readable ``kind`` next to the human-readable message so
    callers can branch on the failure without parsing text.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Code/message pair for host applications with their own error objects."""
        return {"code": self.kind.value, "message": self.message}


class InvalidCoordinatesError(GeoDistanceError):
    """Raised when a point lacks a latitude or longitude."""
    kind = ErrorKind.INVALID_COORDINATES


class InvalidLatitudeError(GeoDistanceError):
    """Raised when a latitude is non-numeric or outside [-90, 90]."""
    kind = ErrorKind.INVALID_LATITUDE


class InvalidLongitudeError(GeoDistanceError):
    """Raised when a longitude is non-numeric or outside [-180, 180]."""
    kind = ErrorKind.INVALID_LONGITUDE


class InvalidUnitError(GeoDistanceError):
    """Raised when a unit is not one of the supported units."""
    kind = ErrorKind.INVALID_UNIT


class CalculationError(GeoDistanceError):
    """Raised when the distance arithmetic itself fails."""
    kind = ErrorKind.CALCULATION_ERROR
