from __future__ import annotations

from colourformats.conversions import (
    hex_to_hsv,
    hex_to_rgb,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
)
from colourformats.formats import HSV, RGB, Frozen, Hex


class Colour(Frozen):
    """
    One colour held in all three formats at once.

    Pass one RGB, HSV or Hex value, or use a ``from_*`` factory. The format
    you start from is kept exactly as given and the other two are derived
    right away, so the three always describe the same colour.
    """

    __slots__ = ("_rgb", "_hsv", "_hex")

    def __init__(self, value):
        if isinstance(value, RGB):
            rgb, hsv, hex = value, rgb_to_hsv(value), rgb_to_hex(value)
        elif isinstance(value, HSV):
            rgb = hsv_to_rgb(value)
            hsv, hex = value, rgb_to_hex(rgb)
        elif isinstance(value, Hex):
            rgb, hsv, hex = hex_to_rgb(value), hex_to_hsv(value), value
        else:
            raise TypeError(f"expected RGB, HSV or Hex, got {type(value).__name__}")
        object.__setattr__(self, "_rgb", rgb)
        object.__setattr__(self, "_hsv", hsv)
        object.__setattr__(self, "_hex", hex)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Colour:
        return cls.of(RGB(r, g, b))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Colour:
        return cls.of(HSV(h, s, v))

    @classmethod
    def from_hex(cls, text: str) -> Colour:
        return cls.of(Hex(text))

    @classmethod
    def from_string(cls, text: str) -> Colour:
        from colourformats.parsing import parse  # lazy import

        return cls.of(parse(text))

    @classmethod
    def of(cls, value) -> Colour:
        """Wrap an RGB, HSV or Hex value."""
        return cls(value)

    @property
    def rgb(self) -> RGB:
        return self._rgb

    @property
    def hsv(self) -> HSV:
        return self._hsv

    @property
    def hex(self) -> Hex:
        return self._hex

    def to_string(self) -> str:
        return self._hex.to_string_with_hash()

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Colour({self._hex.to_string_with_hash()!r})"

    def __eq__(self, other):
        if not isinstance(other, Colour):
            return NotImplemented
        return self._rgb == other._rgb

    def __hash__(self):
        return hash(self._rgb)
