"""
Pydantic schemas and enumerations for single-axis coordinates.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class AxisKind(str, Enum):
    """Which geographic axis a coordinate measures."""
    LATITUDE = "Latitude"
    LONGITUDE = "Longitude"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class Direction(str, Enum):
    """Cardinal direction letter carried by a DMS value."""
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return DIRECTION_ALIASES.get(value.strip().upper())
        return None


class OutputKind(str, Enum):
    """Shapes a coordinate can be rendered into."""
    STRING = "string"
    OBJECT = "object"
    NUMBER = "number"


# Latin and Cyrillic letters accepted per axis
DIRECTION_LETTERS: Dict[AxisKind, Dict[str, Direction]] = {
    AxisKind.LATITUDE: {
        "N": Direction.NORTH,
        "С": Direction.NORTH,
        "S": Direction.SOUTH,
        "Ю": Direction.SOUTH,
    },
    AxisKind.LONGITUDE: {
        "E": Direction.EAST,
        "В": Direction.EAST,
        "W": Direction.WEST,
        "З": Direction.WEST,
    },
}

DIRECTION_ALIASES: Dict[str, Direction] = {
    letter: direction
    for letters in DIRECTION_LETTERS.values()
    for letter, direction in letters.items()
}


class DMSComponents(BaseModel):
    """Degree/minute/second components with an optional direction letter."""
    model_config = ConfigDict(frozen=True)

    degrees: int = Field(
        ...,
        ge=0,
        description="Whole degrees",
        validation_alias=AliasChoices("degrees", "deg")
    )
    minutes: int = Field(
        0,
        ge=0,
        description="Arc minutes, values of 60 and above are carried",
        validation_alias=AliasChoices("minutes", "min")
    )
    seconds: int = Field(
        0,
        ge=0,
        description="Arc seconds, values of 60 and above are carried",
        validation_alias=AliasChoices("seconds", "sec")
    )
    direction: Optional[Direction] = Field(
        None,
        description="Cardinal direction, keeps the current one when omitted",
        validation_alias=AliasChoices("direction", "dir")
    )

    @field_validator("minutes", "seconds", mode="before")
    @classmethod
    def default_missing_units(cls, v):
        """Treat absent finer units as zero."""
        if v is None or v == "":
            return 0
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, v):
        """Accept Latin or Cyrillic letters in any case."""
        if v is None or isinstance(v, Direction):
            return v
        if isinstance(v, str):
            letter = v.strip().upper()
            if not letter:
                return None
            return DIRECTION_ALIASES.get(letter, letter)
        return v

    def to_dict(self) -> dict:
        """Convert to the plain object shape used by format('object')."""
        return {
            "direction": self.direction.value if self.direction else None,
            "degrees": self.degrees,
            "minutes": self.minutes,
            "seconds": self.seconds
        }
