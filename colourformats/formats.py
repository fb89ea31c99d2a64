from __future__ import annotations

import logging
import math
import numbers
import re
from decimal import Decimal
from typing import Tuple

from colourformats.errors import (
    ArgOutOfBoundsError,
    HexParseError,
    MalformedHexError,
)

logger = logging.getLogger(__name__)

# ===== BOUNDS =====
CHANNEL_MAX = 255
HUE_MAX = 360.0
PERCENT_MAX = 100.0
HEX_DIGITS = 6

_HEX_BYTE = re.compile(r"[0-9a-fA-F]{2}")


def within_bounds(val, lo, hi) -> bool:
    return lo <= val <= hi


def format_number(x: float) -> str:
    """Render 300.0 as '300', 12.5 as '12.5' and 1e-05 as '0.00001'."""
    if float(x).is_integer():
        return str(int(x))
    return format(Decimal(repr(float(x))), "f")


class Frozen:
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")


class RGB(Frozen):
    __slots__ = ("_r", "_g", "_b")

    def __init__(self, r: int, g: int, b: int):
        for c in (r, g, b):
            if isinstance(c, bool) or not isinstance(c, int) or not within_bounds(c, 0, CHANNEL_MAX):
                logger.debug("rejected RGB channels %r", (r, g, b))
                raise ArgOutOfBoundsError("RGB components must be integers in 0..255")
        object.__setattr__(self, "_r", r)
        object.__setattr__(self, "_g", g)
        object.__setattr__(self, "_b", b)

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self._r, self._g, self._b)

    def to_string(self) -> str:
        return f"rgb({self._r}, {self._g}, {self._b})"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"RGB(r={self._r}, g={self._g}, b={self._b})"

    def __eq__(self, other):
        if not isinstance(other, RGB):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(("RGB",) + self.as_tuple())


class HSV(Frozen):
    """
    Hue in degrees (0..360), saturation and value in percent (0..100).

    Bounds are inclusive at both ends and out of range input is rejected,
    never clamped. Hue 360 is kept as given rather than folded to 0.
    """

    __slots__ = ("_h", "_s", "_v")

    def __init__(self, h: float, s: float, v: float):
        for c in (h, s, v):
            if isinstance(c, bool) or not isinstance(c, numbers.Real):
                logger.debug("rejected HSV fields %r", (h, s, v))
                raise ArgOutOfBoundsError("HSV components must be real numbers")
        h, s, v = float(h), float(s), float(v)
        if (
            not within_bounds(h, 0.0, HUE_MAX)
            or not within_bounds(s, 0.0, PERCENT_MAX)
            or not within_bounds(v, 0.0, PERCENT_MAX)
        ):
            logger.debug("rejected HSV fields %r", (h, s, v))
            raise ArgOutOfBoundsError(
                f"HSV out of bounds: h={h} (0..360), s={s} (0..100), v={v} (0..100)"
            )
        object.__setattr__(self, "_h", h)
        object.__setattr__(self, "_s", s)
        object.__setattr__(self, "_v", v)

    @property
    def h(self) -> float:
        return self._h

    @property
    def s(self) -> float:
        return self._s

    @property
    def v(self) -> float:
        return self._v

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self._h, self._s, self._v)

    def to_string(self) -> str:
        return f"hsv({format_number(self._h)}, {format_number(self._s)}, {format_number(self._v)})"

    def to_string_as_percent(self) -> str:
        return f"hsv({format_number(self._h)}, {format_number(self._s)}%, {format_number(self._v)}%)"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"HSV(h={self._h}, s={self._s}, v={self._v})"

    def __eq__(self, other):
        if not isinstance(other, HSV):
            return NotImplemented
        return (
            math.isclose(self._h, other._h, abs_tol=1e-9)
            and math.isclose(self._s, other._s, abs_tol=1e-9)
            and math.isclose(self._v, other._v, abs_tol=1e-9)
        )

    # isclose equality cannot be hashed consistently
    __hash__ = None


def parse_hex_byte(pair: str) -> int:
    """Parse a two character channel like 'ff' into 255."""
    try:
        if not _HEX_BYTE.fullmatch(pair):
            raise ValueError(f"invalid literal for base 16: {pair!r}")
        return int(pair, 16)
    except ValueError as e:
        logger.debug("hex byte parse failed for %r", pair)
        raise HexParseError(pair, e) from e


class Hex(Frozen):
    __slots__ = ("_hashed", "_unhashed", "_r", "_g", "_b")

    def __init__(self, text: str):
        unhashed = text[1:] if text.startswith("#") else text
        if len(unhashed) != HEX_DIGITS:
            logger.debug("rejected hex literal %r", text)
            raise MalformedHexError(f"hex colour must be exactly 6 hex digits, got {text!r}")
        unhashed = unhashed.lower()

        r_pair, g_pair, b_pair = unhashed[0:2], unhashed[2:4], unhashed[4:6]
        for pair in (r_pair, g_pair, b_pair):
            byte = parse_hex_byte(pair)
            assert within_bounds(byte, 0, CHANNEL_MAX)

        object.__setattr__(self, "_hashed", "#" + unhashed)
        object.__setattr__(self, "_unhashed", unhashed)
        object.__setattr__(self, "_r", r_pair)
        object.__setattr__(self, "_g", g_pair)
        object.__setattr__(self, "_b", b_pair)

    @property
    def r(self) -> str:
        return self._r

    @property
    def g(self) -> str:
        return self._g

    @property
    def b(self) -> str:
        return self._b

    def to_string(self) -> str:
        return self._unhashed

    def to_string_with_hash(self) -> str:
        return self._hashed

    def __str__(self):
        return self._hashed

    def __repr__(self):
        return f"Hex({self._hashed!r})"

    def __eq__(self, other):
        if not isinstance(other, Hex):
            return NotImplemented
        return self._unhashed == other._unhashed

    def __hash__(self):
        return hash(("Hex", self._unhashed))
