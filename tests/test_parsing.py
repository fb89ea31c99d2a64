from __future__ import annotations

import pytest

from colourformats.colour import Colour
from colourformats.errors import ArgOutOfBoundsError, InvalidColourFormat
from colourformats.formats import HSV, RGB, Hex
from colourformats.parsing import FormatNotRecognisedError, parse, parse_colour


@pytest.mark.parametrize(
    "text,expected",
    [
        ("rgb(255, 0, 255)", RGB(255, 0, 255)),
        ("rgb(1,2,3)", RGB(1, 2, 3)),
        ("  RGB( 10 , 20 , 30 ) ", RGB(10, 20, 30)),
        ("hsv(300, 100, 100)", HSV(300, 100, 100)),
        ("hsv(300, 100%, 100%)", HSV(300, 100, 100)),
        ("hsv(12.5, 40.25%, 3)", HSV(12.5, 40.25, 3)),
        ("#ff00ff", Hex("ff00ff")),
        ("#FF00FF", Hex("ff00ff")),
    ],
)
def test_parse_known_forms(text, expected):
    assert parse(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "red", "ff00ff", "#fff", "rgb(1, 2)", "rgb(-1, 0, 0)", "hsv(a, b, c)", "cmyk(0, 0, 0, 0)"],
)
def test_parse_rejects_unknown(text):
    with pytest.raises(FormatNotRecognisedError):
        parse(text)


def test_parse_range_errors_come_from_constructors():
    with pytest.raises(ArgOutOfBoundsError):
        parse("rgb(300, 0, 0)")
    with pytest.raises(ArgOutOfBoundsError):
        parse("hsv(400, 0, 0)")


def test_not_recognised_is_part_of_taxonomy():
    assert issubclass(FormatNotRecognisedError, InvalidColourFormat)


def test_parse_colour_wraps():
    c = parse_colour("#00ff00")
    assert isinstance(c, Colour)
    assert c.hsv == HSV(120, 100, 100)
