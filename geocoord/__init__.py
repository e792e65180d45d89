"""
Latitude and longitude values with decimal and degree/minute/second forms.
"""

from geocoord.exceptions import GeoCoordException, InvalidInputError, UnsupportedFormatError
from geocoord.models.coordinate import Coordinate
from geocoord.schemas.coordinate import AxisKind, Direction, DMSComponents, OutputKind
from geocoord.services.normalizer import default_direction

__version__ = "1.0.0"

__all__ = [
    "Coordinate",
    "AxisKind",
    "Direction",
    "DMSComponents",
    "OutputKind",
    "GeoCoordException",
    "InvalidInputError",
    "UnsupportedFormatError",
    "default_direction"
]
