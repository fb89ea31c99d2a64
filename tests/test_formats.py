from __future__ import annotations

import pytest

from colourformats.errors import (
    ArgOutOfBoundsError,
    HexParseError,
    InvalidColourFormat,
    MalformedHexError,
)
from colourformats.formats import HSV, RGB, Hex


# =========================
# RGB
# =========================
def test_rgb_new_works():
    rgb = RGB(255, 0, 255)
    assert (rgb.r, rgb.g, rgb.b) == (255, 0, 255)
    assert rgb == RGB(255, 0, 255)


def test_rgb_to_string_works():
    assert RGB(255, 0, 255).to_string() == "rgb(255, 0, 255)"
    assert str(RGB(1, 2, 3)) == "rgb(1, 2, 3)"


@pytest.mark.parametrize(
    "r,g,b",
    [(-1, 0, 0), (256, 0, 0), (0, -1, 0), (0, 256, 0), (0, 0, -1), (0, 0, 256)],
)
def test_rgb_out_of_range_raises(r, g, b):
    with pytest.raises(ArgOutOfBoundsError):
        RGB(r, g, b)


@pytest.mark.parametrize("bad", [1.5, "10", True, None])
def test_rgb_rejects_non_integers(bad):
    with pytest.raises(ArgOutOfBoundsError):
        RGB(bad, 0, 0)


def test_rgb_is_immutable():
    rgb = RGB(1, 2, 3)
    with pytest.raises(AttributeError):
        rgb.r = 5
    assert rgb.r == 1


def test_rgb_hashable():
    assert len({RGB(1, 2, 3), RGB(1, 2, 3), RGB(3, 2, 1)}) == 2


# =========================
# HSV
# =========================
def test_hsv_new_works():
    hsv = HSV(300.0, 100.0, 100.0)
    assert (hsv.h, hsv.s, hsv.v) == (300.0, 100.0, 100.0)


def test_hsv_new_fails_with_invalid_input():
    with pytest.raises(ArgOutOfBoundsError):
        HSV(999.0, 999.0, 999.0)


@pytest.mark.parametrize(
    "h,s,v",
    [(-0.1, 0, 0), (360.1, 0, 0), (0, -0.1, 0), (0, 100.1, 0), (0, 0, -0.1), (0, 0, 100.1)],
)
def test_hsv_each_field_bounded(h, s, v):
    with pytest.raises(ArgOutOfBoundsError):
        HSV(h, s, v)


@pytest.mark.parametrize("h,s,v", [(0, 0, 0), (360, 100, 100), (0.0, 100.0, 0.0)])
def test_hsv_accepts_exact_boundaries(h, s, v):
    HSV(h, s, v)


def test_hsv_keeps_360_distinct_from_0():
    assert HSV(360, 50, 50).h == 360.0
    assert HSV(360, 50, 50) != HSV(0, 50, 50)


def test_hsv_rejects_nan():
    with pytest.raises(ArgOutOfBoundsError):
        HSV(float("nan"), 0, 0)


def test_hsv_to_string_works():
    assert HSV(300.0, 100.0, 100.0).to_string() == "hsv(300, 100, 100)"


def test_hsv_to_string_as_percent_works():
    assert HSV(300.0, 100.0, 100.0).to_string_as_percent() == "hsv(300, 100%, 100%)"


def test_hsv_to_string_keeps_fractions():
    assert HSV(12.5, 33.25, 0).to_string() == "hsv(12.5, 33.25, 0)"


def test_hsv_is_immutable():
    with pytest.raises(AttributeError):
        HSV(0, 0, 0).h = 10.0


# =========================
# Hex
# =========================
def test_hex_new_works():
    hex = Hex("#ff00ff")
    assert (hex.r, hex.g, hex.b) == ("ff", "00", "ff")


def test_hex_hash_is_optional():
    a = Hex("ff00ff")
    b = Hex("#ff00ff")
    assert a == b
    for h in (a, b):
        assert h.to_string() == "ff00ff"
        assert h.to_string_with_hash() == "#ff00ff"


def test_hex_normalises_case():
    assert Hex("#FF00Ff") == Hex("ff00ff")
    assert Hex("FF00FF").to_string_with_hash() == "#ff00ff"


def test_hex_new_fails_with_invalid_input():
    with pytest.raises(HexParseError) as info:
        Hex("#gggggg")
    assert info.value.text == "gg"
    assert isinstance(info.value.cause, ValueError)
    assert info.value.__cause__ is info.value.cause


@pytest.mark.parametrize("text", ["+f00ff", " f00ff", "0x00ff", "f_00ff"])
def test_hex_rejects_int_literal_quirks(text):
    with pytest.raises(HexParseError):
        Hex(text)


@pytest.mark.parametrize("text", ["", "#", "#fff", "ff00f", "ff00ff0", "##ff00ff"])
def test_hex_wrong_length_is_malformed(text):
    with pytest.raises(MalformedHexError):
        Hex(text)


def test_hex_errors_share_base():
    for text in ("#zzzzzz", "#abc"):
        with pytest.raises(InvalidColourFormat):
            Hex(text)
    with pytest.raises(ValueError):
        Hex("#abc")


@pytest.mark.parametrize("text,bad", [("#zz00ff", "zz"), ("12zz56", "zz"), ("#1234g6", "g6")])
def test_hex_constructor_parses_every_pair(text, bad):
    # the constructor itself must reject the pair, not a later conversion
    with pytest.raises(HexParseError) as info:
        Hex(text)
    assert info.value.text == bad


@pytest.mark.parametrize("bad", ["300", True, None, b"1"])
def test_hsv_rejects_non_numbers(bad):
    with pytest.raises(ArgOutOfBoundsError):
        HSV(bad, 0, 0)
    with pytest.raises(ArgOutOfBoundsError):
        HSV(0, bad, 0)


def test_hsv_accepts_ints_and_floats():
    assert HSV(300, 100.0, 50) == HSV(300.0, 100.0, 50.0)


def test_hsv_to_string_has_no_exponent():
    assert HSV(0, 0.00001, 0).to_string() == "hsv(0, 0.00001, 0)"
    assert HSV(0.5, 1e-07, 0).to_string_as_percent() == "hsv(0.5, 0.0000001%, 0%)"
