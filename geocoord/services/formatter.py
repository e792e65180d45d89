"""
Rendering of coordinate values as strings, plain objects or numbers.
"""

from typing import Any, Dict, Optional, Union

from geocoord.exceptions import UnsupportedFormatError
from geocoord.schemas.coordinate import AxisKind, Direction, DMSComponents, OutputKind
from geocoord.services.normalizer import DEGREE_WIDTHS
from geocoord.utils.text import left_pad, substitute


class CoordinateFormatter:
    """Service class for turning stored coordinate state into output values."""

    @staticmethod
    def to_string(
        components: Optional[DMSComponents],
        axis_kind: AxisKind,
        template: str
    ) -> str:
        """
        Render components through a positional template.

        Args:
            components: Normalized components, None when the coordinate is empty
            axis_kind: Axis, decides the degree padding width
            template: Template with {0}..{3} for degrees, minutes, seconds, direction

        Returns:
            str: Rendered text, empty string for an empty coordinate
        """
        if components is None:
            return ""

        return substitute(
            template,
            left_pad(components.degrees, DEGREE_WIDTHS[axis_kind], "0"),
            left_pad(components.minutes, 2, "0"),
            left_pad(components.seconds, 2, "0"),
            components.direction.value
        )

    @staticmethod
    def to_object(
        components: Optional[DMSComponents],
        direction: Direction
    ) -> Dict[str, Any]:
        """Plain dict of components; units are None for an empty coordinate."""
        if components is None:
            return {
                "direction": direction.value,
                "degrees": None,
                "minutes": None,
                "seconds": None
            }
        return components.to_dict()

    @staticmethod
    def to_number(value: Optional[float], precision: int) -> Optional[float]:
        if value is None:
            return None
        return round(value, precision)

    @classmethod
    def format(
        cls,
        output_kind: Union[OutputKind, str],
        components: Optional[DMSComponents],
        value: Optional[float],
        axis_kind: AxisKind,
        direction: Direction,
        template: str,
        precision: int
    ) -> Union[str, Dict[str, Any], float, None]:
        """
        Dispatch to the renderer for the requested output kind.

        Raises:
            UnsupportedFormatError: If output_kind is not string, object or number
        """
        try:
            kind = OutputKind(output_kind)
        except ValueError as e:
            raise UnsupportedFormatError(output_kind) from e

        if kind is OutputKind.STRING:
            return cls.to_string(components, axis_kind, template)
        if kind is OutputKind.OBJECT:
            return cls.to_object(components, direction)
        return cls.to_number(value, precision)
