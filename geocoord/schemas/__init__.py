"""
Pydantic schemas for the geocoord package.
"""

from .coordinate import (
    AxisKind,
    Direction,
    OutputKind,
    DMSComponents,
    DIRECTION_LETTERS,
    DIRECTION_ALIASES
)

__all__ = [
    "AxisKind",
    "Direction",
    "OutputKind",
    "DMSComponents",
    "DIRECTION_LETTERS",
    "DIRECTION_ALIASES"
]
