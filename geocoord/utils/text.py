"""
Small string helpers used when rendering coordinates.
"""

import re
from typing import Any

_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")


def left_pad(value: Any, width: int, fill: str = " ") -> str:
    """
    Pad the string form of a value on the left up to a given width.

    Args:
        value: Value to pad, converted with str()
        width: Minimum length of the result
        fill: Single padding character

    Returns:
        str: Padded string, unchanged if already wide enough
    """
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return str(value).rjust(width, fill)


def substitute(template: str, *args: Any) -> str:
    """
    Replace positional ``{n}`` placeholders with the matching argument.

    Placeholders without a matching argument and any other braces are
    left untouched.

    Args:
        template: Template such as "{0}°{1}′{2}″ {3}"
        *args: Values substituted in order

    Returns:
        str: Rendered string
    """
    def replace(match):
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(replace, template)
