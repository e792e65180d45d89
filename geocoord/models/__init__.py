"""
Domain models for the geocoord package.
"""

from .coordinate import Coordinate, CoordinateInput

__all__ = ["Coordinate", "CoordinateInput"]
