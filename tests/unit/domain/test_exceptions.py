"""Tests for domain exceptions."""

import pytest

from geodistance.domain.exceptions import (
    CalculationError,
    GeoDistanceError,
    InvalidCoordinatesError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidUnitError,
)
from geodistance.domain.value_objects.enums import ErrorKind


@pytest.mark.parametrize(
    ("exc_class", "kind"),
    [
        (InvalidCoordinatesError, ErrorKind.INVALID_COORDINATES),
        (InvalidLatitudeError, ErrorKind.INVALID_LATITUDE),
        (InvalidLongitudeError, ErrorKind.INVALID_LONGITUDE),
        (InvalidUnitError, ErrorKind.INVALID_UNIT),
        (CalculationError, ErrorKind.CALCULATION_ERROR),
    ],
)
def test_each_error_carries_its_kind(exc_class, kind):
    err = exc_class("boom")
    assert err.kind is kind
    assert isinstance(err, GeoDistanceError)
    assert isinstance(err, ValueError)


def test_error_message_and_str():
    err = InvalidUnitError("Invalid unit. Supported units are: mi, km")
    assert err.message == "Invalid unit. Supported units are: mi, km"
    assert str(err) == err.message


def test_to_dict():
    err = InvalidLatitudeError("Point A latitude must be between -90 and 90 degrees")
    assert err.to_dict() == {
        "code": "invalid_latitude",
        "message": "Point A latitude must be between -90 and 90 degrees",
    }
