"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def new_york():
    return {"latitude": 40.7128, "longitude": -74.0060}


@pytest.fixture
def london():
    return {"latitude": 51.5074, "longitude": -0.1278}
