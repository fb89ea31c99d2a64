from __future__ import annotations

import math

from colourformats.colour import Colour
from colourformats.errors import ArgOutOfBoundsError
from colourformats.formats import CHANNEL_MAX, PERCENT_MAX


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def multiply_brightness(colour: Colour, multiplier: float) -> Colour:
    """Scale HSV value by ``multiplier``, clamped to 0..100; hue and saturation kept."""
    if multiplier < 0:
        raise ArgOutOfBoundsError(f"brightness multiplier must be >= 0, got {multiplier}")
    hsv = colour.hsv
    return Colour.from_hsv(hsv.h, hsv.s, _clamp(hsv.v * multiplier, 0.0, PERCENT_MAX))


def lighten(colour: Colour, amount: float) -> Colour:
    """lighten(c, 0.2) raises brightness by 20%."""
    if amount < 0:
        raise ArgOutOfBoundsError(f"lighten amount must be >= 0, got {amount}")
    return multiply_brightness(colour, 1.0 + amount)


def darken(colour: Colour, amount: float) -> Colour:
    """darken(c, 0.2) lowers brightness by 20%; 1.0 gives black."""
    if not 0.0 <= amount <= 1.0:
        raise ArgOutOfBoundsError(f"darken amount must be in 0..1, got {amount}")
    return multiply_brightness(colour, 1.0 - amount)


def invert_colour(colour: Colour) -> Colour:
    rgb = colour.rgb
    return Colour.from_rgb(CHANNEL_MAX - rgb.r, CHANNEL_MAX - rgb.g, CHANNEL_MAX - rgb.b)


def invert_brightness(colour: Colour) -> Colour:
    hsv = colour.hsv
    return Colour.from_hsv(hsv.h, hsv.s, PERCENT_MAX - hsv.v)


def blend(colour1: Colour, colour2: Colour, ratio: float) -> Colour:
    """Mix in RGB space; ratio 0 gives colour1, ratio 1 gives colour2."""
    if not 0.0 <= ratio <= 1.0:
        raise ArgOutOfBoundsError(f"blend ratio must be in 0..1, got {ratio}")
    a, b = colour1.rgb, colour2.rgb
    return Colour.from_rgb(
        _round_half_up(a.r * (1.0 - ratio) + b.r * ratio),
        _round_half_up(a.g * (1.0 - ratio) + b.g * ratio),
        _round_half_up(a.b * (1.0 - ratio) + b.b * ratio),
    )
