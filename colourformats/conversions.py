from __future__ import annotations

import math

from colourformats.errors import FailedConversionError
from colourformats.formats import (
    CHANNEL_MAX,
    HUE_MAX,
    PERCENT_MAX,
    HSV,
    RGB,
    Hex,
    parse_hex_byte,
)


def _to_channel(x: float) -> int:
    """Unit-scale float -> 0..255 int, rounding half away from zero."""
    n = math.floor(x * CHANNEL_MAX + 0.5)
    return 0 if n < 0 else CHANNEL_MAX if n > CHANNEL_MAX else int(n)


def rgb_to_hsv(rgb: RGB) -> HSV:
    r = rgb.r / CHANNEL_MAX
    g = rgb.g / CHANNEL_MAX
    b = rgb.b / CHANNEL_MAX

    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn

    if mx == mn:
        h = 0.0  # achromatic
    elif mx == r:
        h = (60.0 * ((g - b) / d) + 360.0) % 360.0
    elif mx == g:
        h = (60.0 * ((b - r) / d) + 120.0) % 360.0
    elif mx == b:
        h = (60.0 * ((r - g) / d) + 240.0) % 360.0
    else:
        raise FailedConversionError(f"no maximum channel found for {rgb!r}")

    s = 0.0 if mx == 0.0 else (d / mx) * PERCENT_MAX
    v = mx * PERCENT_MAX

    return HSV(h, s, v)


def hsv_to_rgb(hsv: HSV) -> RGB:
    """
    HSV (percent scale, as stored on the type) -> RGB.

    Saturation and value are brought to 0..1 here before the chroma math,
    so callers pass the HSV value exactly as constructed.
    """
    h = 0.0 if hsv.h == HUE_MAX else hsv.h  # 360 is the same angle as 0
    s = hsv.s / PERCENT_MAX
    v = hsv.v / PERCENT_MAX

    c = v * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = v - c

    i = math.floor(h / 60.0) if math.isfinite(h) else None
    if i == 0:
        r_prime, g_prime, b_prime = c, x, 0.0
    elif i == 1:
        r_prime, g_prime, b_prime = x, c, 0.0
    elif i == 2:
        r_prime, g_prime, b_prime = 0.0, c, x
    elif i == 3:
        r_prime, g_prime, b_prime = 0.0, x, c
    elif i == 4:
        r_prime, g_prime, b_prime = x, 0.0, c
    elif i == 5:
        r_prime, g_prime, b_prime = c, 0.0, x
    else:
        raise FailedConversionError(f"hue sector {i} outside 0..5 for {hsv!r}")

    return RGB(
        _to_channel(r_prime + m),
        _to_channel(g_prime + m),
        _to_channel(b_prime + m),
    )


def rgb_to_hex(rgb: RGB) -> Hex:
    return Hex(f"{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}")


def hex_to_rgb(hex: Hex) -> RGB:
    return RGB(parse_hex_byte(hex.r), parse_hex_byte(hex.g), parse_hex_byte(hex.b))


def hsv_to_hex(hsv: HSV) -> Hex:
    return rgb_to_hex(hsv_to_rgb(hsv))


def hex_to_hsv(hex: Hex) -> HSV:
    return rgb_to_hsv(hex_to_rgb(hex))
