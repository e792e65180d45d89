"""
Single geographic coordinate axis: a latitude or a longitude value.

Latitude ranges over -90°..90°: North is positive (27°51′00″N == 27.85),
South is negative (40°00′56″S == -40.0155556).
Longitude ranges over -180°..180°: East is positive (131°57′50″E == 131.9638889),
West is negative (070°22′25″W == -70.3736111).
"""

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from geocoord.config import settings
from geocoord.exceptions import InvalidInputError
from geocoord.schemas.coordinate import AxisKind, Direction, DMSComponents, OutputKind
from geocoord.services.formatter import CoordinateFormatter
from geocoord.services.normalizer import (
    axis_limit,
    components_to_decimal,
    decimal_to_components,
    default_direction,
    normalize_components
)
from geocoord.utils.coordinate_parser import parse_coordinate_string

logger = logging.getLogger(__name__)

CoordinateInput = Union[None, str, float, int, Decimal, DMSComponents, Mapping]


class Coordinate:
    """
    Mutable holder of one latitude or longitude value.

    The value is kept both as signed decimal degrees and as
    degree/minute/second components with a direction; the two are always
    populated together or both empty. The axis kind is fixed at construction.

    Accepted input:
        - empty: None or a blank string, clears the value
        - string: "[0-90] [0-59] [0-59] [N|S]" or "[0-180] [0-59] [0-59] [E|W]",
          Cyrillic С/Ю/В/З letters accepted
        - object: {"degrees": .., "minutes": .., "seconds": .., "direction": ..}
        - number: signed decimal degrees
    """

    def __init__(
        self,
        value: CoordinateInput = None,
        axis_kind: Union[AxisKind, str] = AxisKind.LATITUDE
    ):
        self._axis_kind = AxisKind(axis_kind)
        self._value: Optional[float] = None
        self._components: Optional[DMSComponents] = None
        self._direction: Direction = default_direction(self._axis_kind)
        self.default_format: str = settings.default_template

        self.set_value(value)

    @classmethod
    def empty(cls, axis_kind: Union[AxisKind, str]) -> "Coordinate":
        """Create a coordinate holding no value."""
        return cls(None, axis_kind)

    @classmethod
    def from_string(cls, text: str, axis_kind: Union[AxisKind, str]) -> "Coordinate":
        """
        Create a coordinate from DMS text.

        Raises:
            InvalidInputError: If text is not a string or does not parse
        """
        axis_kind = AxisKind(axis_kind)
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError(axis_kind, text)
        return cls(text, axis_kind)

    @classmethod
    def from_components(
        cls,
        components: Union[DMSComponents, Mapping],
        axis_kind: Union[AxisKind, str]
    ) -> "Coordinate":
        """
        Create a coordinate from degree/minute/second components.

        Raises:
            InvalidInputError: If components are not a mapping or fail validation
        """
        axis_kind = AxisKind(axis_kind)
        if not isinstance(components, (DMSComponents, Mapping)):
            raise InvalidInputError(axis_kind, components)
        return cls(components, axis_kind)

    @classmethod
    def from_decimal(
        cls,
        value: Union[float, int, Decimal],
        axis_kind: Union[AxisKind, str],
        seconds_step: int = 1
    ) -> "Coordinate":
        """
        Create a coordinate from signed decimal degrees.

        Raises:
            InvalidInputError: If value is not a finite number
        """
        coordinate = cls.empty(axis_kind)
        if not _is_number(value):
            raise InvalidInputError(coordinate.axis_kind, value)
        coordinate.set_value(value, seconds_step=seconds_step)
        return coordinate

    @property
    def axis_kind(self) -> AxisKind:
        return self._axis_kind

    @property
    def value(self) -> Optional[float]:
        """Signed decimal degrees, None when empty."""
        return self._value

    @value.setter
    def value(self, value: CoordinateInput):
        self.set_value(value)

    @property
    def degrees(self) -> Optional[int]:
        return self._components.degrees if self._components is not None else None

    @property
    def minutes(self) -> Optional[int]:
        return self._components.minutes if self._components is not None else None

    @property
    def seconds(self) -> Optional[int]:
        return self._components.seconds if self._components is not None else None

    @property
    def direction(self) -> Direction:
        """Current direction; kept while empty, North/East by default."""
        return self._direction

    def set_value(self, value: CoordinateInput, seconds_step: int = 1):
        """
        Replace the stored value, dispatching on the kind of input.

        Out-of-range components are carried and clamped rather than rejected.
        On failure the coordinate keeps its previous state.

        Args:
            value: Empty value, DMS string, components object or decimal number
            seconds_step: Seconds rounding step for numeric input; the stored
                decimal is re-derived from the rounded components

        Raises:
            InvalidInputError: If the value cannot be interpreted
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            self.clear()
            return

        if isinstance(value, str):
            components = parse_coordinate_string(value, self._axis_kind)
            if components is None:
                logger.debug(f"Rejected {self._axis_kind.value} string {value!r}")
                raise InvalidInputError(self._axis_kind, value)
            self._set_components(components, raw=value)
        elif isinstance(value, (DMSComponents, Mapping)):
            self._set_components(value, raw=value)
        elif _is_number(value):
            self._set_decimal(value, seconds_step)
        else:
            raise InvalidInputError(self._axis_kind, value)

    def clear(self):
        """Drop the value; the direction is kept."""
        self._value = None
        self._components = None

    def is_empty(self) -> bool:
        return self._value is None and self._components is None

    def format(
        self,
        output_kind: Union[OutputKind, str] = OutputKind.STRING,
        template: Optional[str] = None
    ) -> Union[str, Dict[str, Any], float, None]:
        """
        Render the coordinate.

        Args:
            output_kind: "string", "object" or "number"
            template: Positional template for "string", defaults to default_format

        Returns:
            str for "string" ("" when empty), dict for "object" (units None when
            empty), float rounded to the configured precision for "number" (None
            when empty)

        Raises:
            UnsupportedFormatError: If output_kind is unknown
        """
        return CoordinateFormatter.format(
            output_kind,
            components=self._components,
            value=self._value,
            axis_kind=self._axis_kind,
            direction=self._direction,
            template=template or self.default_format,
            precision=settings.number_precision
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.format(OutputKind.OBJECT)

    def _set_components(self, components: Union[DMSComponents, Mapping], raw: Any):
        try:
            if not isinstance(components, DMSComponents):
                components = DMSComponents.model_validate(dict(components))
            normalized = normalize_components(components, self._axis_kind, self._direction)
        except (ValidationError, ValueError) as e:
            raise InvalidInputError(
                self._axis_kind,
                raw,
                f"Invalid {self._axis_kind.value} components {raw!r}: {e}"
            ) from e

        value = components_to_decimal(normalized, self._axis_kind)

        self._components = normalized
        self._direction = normalized.direction
        self._value = value

    def _set_decimal(self, raw: Union[float, int, Decimal], seconds_step: int):
        if not _is_finite(raw):
            raise InvalidInputError(self._axis_kind, raw)

        limit = axis_limit(self._axis_kind)
        try:
            value = float(raw)
        except OverflowError:
            value = math.inf if raw > 0 else -math.inf
        if abs(value) > limit:
            logger.debug(f"Clamping {self._axis_kind.value} {raw} to ±{limit}")
            value = math.copysign(limit, value)

        components = decimal_to_components(value, self._axis_kind, seconds_step=seconds_step)
        if seconds_step > 1:
            # Keep the decimal in step with the rounded seconds
            value = components_to_decimal(components, self._axis_kind)

        self._components = components
        self._direction = components.direction
        self._value = value

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (
            self._axis_kind == other._axis_kind
            and self._components == other._components
            and (self.is_empty() or self._direction == other._direction)
        )

    __hash__ = None

    def __str__(self):
        return self.format(OutputKind.STRING)

    def __repr__(self):
        if self.is_empty():
            return f"<Coordinate({self._axis_kind.value}, empty, dir={self._direction.value})>"
        return f"<Coordinate({self._axis_kind.value}, {self.format(OutputKind.STRING)!r}, value={self._value})>"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_finite(value: Union[float, int, Decimal]) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True
