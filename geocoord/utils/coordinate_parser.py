"""
Parser for loosely formatted degree/minute/second strings.

Accepted input is up to three digit groups separated by anything that is
neither a digit nor a direction letter, optionally followed by a Latin or
Cyrillic direction letter of the axis as the very last character:

    "27°51′00″N", "27 51 00 N", "27 51 00 С", "275100N", "131-57-50 В"

A contiguous run of digits is split across the groups, so "275100" reads
as 27°51′00″. Degrees take at most two digits for latitude and three for
longitude; minutes and seconds take at most two.
"""

import logging
from typing import List, Optional

from geocoord.schemas.coordinate import (
    AxisKind,
    DIRECTION_ALIASES,
    DIRECTION_LETTERS,
    DMSComponents
)
from geocoord.services.normalizer import DEGREE_WIDTHS

logger = logging.getLogger(__name__)

UNIT_WIDTH = 2
GROUP_COUNT = 3
DIGITS = "0123456789"


def _group_widths(axis_kind: AxisKind) -> List[int]:
    return [DEGREE_WIDTHS[axis_kind]] + [UNIT_WIDTH] * (GROUP_COUNT - 1)


def parse_coordinate_string(value: str, axis_kind: AxisKind) -> Optional[DMSComponents]:
    """
    Parse a coordinate string into components.

    Args:
        value: Raw coordinate text
        axis_kind: Axis whose direction letters are recognized

    Returns:
        Optional[DMSComponents]: Parsed components with missing groups set to
        0 and direction set only when a letter was present, or None if the
        string does not match
    """
    axis_kind = AxisKind(axis_kind)
    letters = DIRECTION_LETTERS[axis_kind]
    widths = _group_widths(axis_kind)

    text = value.strip().upper()
    if not text or text[0] not in DIGITS:
        return None

    direction = None
    if text[-1] in letters:
        direction = letters[text[-1]]
        text = text[:-1]

    groups = [""] * GROUP_COUNT
    slot = 0
    in_run = False
    for char in text:
        if char in DIGITS:
            if in_run and len(groups[slot]) == widths[slot]:
                slot += 1
            elif not in_run and groups[slot]:
                slot += 1
            if slot >= GROUP_COUNT:
                logger.debug(f"Too many digits in {axis_kind.value} string {value!r}")
                return None
            groups[slot] += char
            in_run = True
        elif char in DIRECTION_ALIASES:
            logger.debug(f"Unexpected direction letter in {axis_kind.value} string {value!r}")
            return None
        else:
            in_run = False

    degrees, minutes, seconds = (int(group) if group else 0 for group in groups)
    return DMSComponents(
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        direction=direction
    )
