"""
Pytest configuration and shared fixtures for geocoord tests.
"""

import pytest

from geocoord.models.coordinate import Coordinate
from geocoord.schemas.coordinate import AxisKind


@pytest.fixture
def latitude():
    """Factory for latitude coordinates."""
    def _make(value=None):
        return Coordinate(value, AxisKind.LATITUDE)
    return _make


@pytest.fixture
def longitude():
    """Factory for longitude coordinates."""
    def _make(value=None):
        return Coordinate(value, AxisKind.LONGITUDE)
    return _make


@pytest.fixture
def moscow_latitude(latitude):
    """55°45′21″N"""
    return latitude({"degrees": 55, "minutes": 45, "seconds": 21, "direction": "N"})
