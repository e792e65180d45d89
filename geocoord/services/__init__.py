"""
Conversion and rendering services for coordinate values.
"""

from .formatter import CoordinateFormatter
from .normalizer import (
    axis_limit,
    components_to_decimal,
    decimal_to_components,
    default_direction,
    directions_for,
    is_negative,
    normalize_components
)

__all__ = [
    "CoordinateFormatter",
    "axis_limit",
    "components_to_decimal",
    "decimal_to_components",
    "default_direction",
    "directions_for",
    "is_negative",
    "normalize_components"
]
