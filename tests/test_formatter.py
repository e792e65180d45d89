"""Tests for coordinate rendering and text helpers."""
import pytest

from geocoord.exceptions import UnsupportedFormatError
from geocoord.schemas.coordinate import AxisKind, Direction, DMSComponents, OutputKind
from geocoord.services.formatter import CoordinateFormatter
from geocoord.utils.text import left_pad, substitute

TEMPLATE = "{0}°{1}′{2}″ {3}"


class TestTextHelpers:
    """Test left_pad and substitute."""

    def test_left_pad(self):
        assert left_pad(5, 3, "0") == "005"
        assert left_pad("abc", 2, "0") == "abc"
        assert left_pad(7, 2) == " 7"

    def test_left_pad_rejects_multi_char_fill(self):
        with pytest.raises(ValueError):
            left_pad(5, 3, "00")

    def test_substitute_in_order(self):
        assert substitute("{0}-{1}-{0}", "a", "b") == "a-b-a"

    def test_substitute_leaves_unknown_placeholders(self):
        assert substitute("{0} {5} {name}", "x") == "x {5} {name}"


class TestCoordinateFormatter:
    """Test CoordinateFormatter renderers."""

    def test_latitude_string_pads_to_two_digits(self):
        components = DMSComponents(degrees=5, minutes=3, seconds=7, direction=Direction.NORTH)
        assert CoordinateFormatter.to_string(components, AxisKind.LATITUDE, TEMPLATE) == "05°03′07″ N"

    def test_longitude_string_pads_to_three_digits(self):
        components = DMSComponents(degrees=70, minutes=22, seconds=25, direction=Direction.WEST)
        assert CoordinateFormatter.to_string(components, AxisKind.LONGITUDE, TEMPLATE) == "070°22′25″ W"

    def test_custom_template(self):
        components = DMSComponents(degrees=27, minutes=51, seconds=0, direction=Direction.NORTH)
        result = CoordinateFormatter.to_string(components, AxisKind.LATITUDE, "{3}{0}{1}{2}")
        assert result == "N275100"

    def test_empty_string(self):
        assert CoordinateFormatter.to_string(None, AxisKind.LATITUDE, TEMPLATE) == ""

    def test_empty_object_keeps_direction(self):
        assert CoordinateFormatter.to_object(None, Direction.WEST) == {
            "direction": "W",
            "degrees": None,
            "minutes": None,
            "seconds": None
        }

    def test_number_rounding(self):
        assert CoordinateFormatter.to_number(-40.01555555555, 7) == -40.0155556
        assert CoordinateFormatter.to_number(None, 7) is None

    def test_format_dispatch_accepts_strings(self):
        components = DMSComponents(degrees=1, minutes=2, seconds=3, direction=Direction.EAST)
        result = CoordinateFormatter.format(
            "object",
            components=components,
            value=1.0341667,
            axis_kind=AxisKind.LONGITUDE,
            direction=Direction.EAST,
            template=TEMPLATE,
            precision=7
        )
        assert result == {"direction": "E", "degrees": 1, "minutes": 2, "seconds": 3}

    @pytest.mark.parametrize("kind", ["xml", None, ["string"]])
    def test_unknown_kind(self, kind):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            CoordinateFormatter.format(
                kind,
                components=None,
                value=None,
                axis_kind=AxisKind.LATITUDE,
                direction=Direction.NORTH,
                template=TEMPLATE,
                precision=7
            )
        assert exc_info.value.code == "UNSUPPORTED_FORMAT"

    def test_output_kind_enum(self):
        assert OutputKind("number") is OutputKind.NUMBER
