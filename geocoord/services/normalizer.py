"""
Conversions between signed decimal degrees and degree/minute/second components.

Both directions resolve carries (60 seconds -> 1 minute, 60 minutes -> 1 degree)
and saturate degrees at the axis limit: 90 for latitude, 180 for longitude.
"""

import logging
import math
from typing import Dict, Optional, Tuple

from geocoord.schemas.coordinate import AxisKind, Direction, DMSComponents

logger = logging.getLogger(__name__)

AXIS_LIMITS: Dict[AxisKind, int] = {
    AxisKind.LATITUDE: 90,
    AxisKind.LONGITUDE: 180,
}

# Zero-padded width of the degrees field
DEGREE_WIDTHS: Dict[AxisKind, int] = {
    AxisKind.LATITUDE: 2,
    AxisKind.LONGITUDE: 3,
}

# (positive, negative) direction for each axis
AXIS_DIRECTIONS: Dict[AxisKind, Tuple[Direction, Direction]] = {
    AxisKind.LATITUDE: (Direction.NORTH, Direction.SOUTH),
    AxisKind.LONGITUDE: (Direction.EAST, Direction.WEST),
}

SECONDS_STEPS = (1, 2, 3, 4, 5, 6, 10, 12, 15, 20, 30)


def axis_limit(axis_kind: AxisKind) -> int:
    """Largest whole degree value allowed on the axis."""
    return AXIS_LIMITS[AxisKind(axis_kind)]


def directions_for(axis_kind: AxisKind) -> Tuple[Direction, Direction]:
    """Return the (positive, negative) direction pair of an axis."""
    return AXIS_DIRECTIONS[AxisKind(axis_kind)]


def default_direction(axis_kind: AxisKind) -> Direction:
    """Direction assumed when none has been set: North or East."""
    return directions_for(axis_kind)[0]


def is_negative(direction: Direction) -> bool:
    """True for directions that carry a negative decimal sign."""
    return direction in (Direction.SOUTH, Direction.WEST)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def decimal_to_components(
    value: float,
    axis_kind: AxisKind,
    seconds_step: int = 1
) -> DMSComponents:
    """
    Split signed decimal degrees into degrees, minutes, seconds and direction.

    Components are computed on the signed value and made absolute afterwards;
    a rounded 60 seconds or a resulting 60 minutes carries into the next unit.

    Args:
        value: Signed decimal degrees, negative for South/West
        axis_kind: Axis the value belongs to
        seconds_step: Round seconds to a multiple of this divisor of 60

    Returns:
        DMSComponents: Normalized components with direction set

    Raises:
        ValueError: If seconds_step does not divide 60
    """
    if seconds_step not in SECONDS_STEPS:
        raise ValueError(f"seconds_step must divide 60, got {seconds_step}")

    positive, negative = directions_for(axis_kind)

    degrees = math.trunc(value)
    minutes = math.trunc((value - degrees) * 60)
    seconds = _round_half_up(((value - degrees) * 60 - minutes) * 60)
    if seconds_step > 1:
        seconds = _round_half_up(seconds / seconds_step) * seconds_step

    # Sign comes from the raw value so that (-1, 0) stays South/West
    direction = negative if value < 0 else positive

    degrees = abs(degrees)
    minutes = abs(minutes)
    seconds = abs(seconds)

    if seconds == 60:
        seconds = 0
        minutes += 1
    if minutes == 60:
        minutes = 0
        degrees += 1

    return DMSComponents(
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        direction=direction
    )


def normalize_components(
    components: DMSComponents,
    axis_kind: AxisKind,
    current_direction: Optional[Direction] = None
) -> DMSComponents:
    """
    Resolve out-of-range input units and saturate at the axis limit.

    Seconds carry into minutes first, then minutes into degrees, so an
    overflowing seconds value can cascade all the way up to the clamp.

    Args:
        components: Raw components, units may exceed 59
        axis_kind: Axis the components belong to
        current_direction: Direction kept when components carry none

    Returns:
        DMSComponents: Components within range with a direction set

    Raises:
        ValueError: If the direction does not belong to the axis
    """
    axis_kind = AxisKind(axis_kind)
    limit = axis_limit(axis_kind)
    degrees = components.degrees
    minutes = components.minutes
    seconds = components.seconds

    if seconds >= 60:
        minutes += 1
        seconds %= 60
    if minutes >= 60:
        degrees += 1
        minutes %= 60
    if degrees >= limit:
        if (degrees, minutes, seconds) != (limit, 0, 0):
            logger.debug(f"Clamping {axis_kind.value} {components.degrees}°{components.minutes}′"
                         f"{components.seconds}″ to {limit}°")
        degrees, minutes, seconds = limit, 0, 0

    direction = components.direction or current_direction or default_direction(axis_kind)
    if direction not in directions_for(axis_kind):
        raise ValueError(f"Direction {direction.value} is not valid for {axis_kind.value}")

    return DMSComponents(
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        direction=direction
    )


def components_to_decimal(
    components: DMSComponents,
    axis_kind: AxisKind,
    current_direction: Optional[Direction] = None
) -> float:
    """
    Convert components to signed decimal degrees.

    Args:
        components: Components, normalized first via normalize_components
        axis_kind: Axis the components belong to
        current_direction: Direction used when components carry none

    Returns:
        float: Signed decimal degrees, negative for South/West
    """
    normalized = normalize_components(components, axis_kind, current_direction)

    value = normalized.seconds / 3600 + normalized.minutes / 60 + normalized.degrees
    if is_negative(normalized.direction):
        value = -value
    return value
