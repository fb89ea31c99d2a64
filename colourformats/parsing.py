from __future__ import annotations

import logging
import re
from typing import Union

from colourformats.errors import InvalidColourFormat
from colourformats.formats import HSV, RGB, Hex

logger = logging.getLogger(__name__)

_NUM = r"(\d+(?:\.\d+)?)"

RGB_PATTERN = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE)
HSV_PATTERN = re.compile(
    rf"hsv\(\s*{_NUM}\s*,\s*{_NUM}\s*%?\s*,\s*{_NUM}\s*%?\s*\)", re.IGNORECASE
)
HEX_PATTERN = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)


class FormatNotRecognisedError(InvalidColourFormat):
    default_message = "colour string not recognised"


def parse(text: str) -> Union[RGB, HSV, Hex]:
    """
    Read 'rgb(255, 0, 255)', 'hsv(300, 100%, 100%)' or '#ff00ff'.

    Only the shape is checked here; ranges are left to the format
    constructors, so 'rgb(300, 0, 0)' raises ArgOutOfBoundsError.
    """
    s = text.strip()

    m = RGB_PATTERN.fullmatch(s)
    if m:
        return RGB(*(int(g) for g in m.groups()))

    m = HSV_PATTERN.fullmatch(s)
    if m:
        return HSV(*(float(g) for g in m.groups()))

    if HEX_PATTERN.fullmatch(s):
        return Hex(s)

    logger.debug("no colour format matched %r", text)
    raise FormatNotRecognisedError(f"colour string not recognised: {text!r}")


def parse_colour(text: str):
    from colourformats.colour import Colour  # lazy import

    return Colour.of(parse(text))
