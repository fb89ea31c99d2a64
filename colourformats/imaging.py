from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from PIL import Image, ImageOps, ImageStat

from colourformats.colour import Colour
from colourformats.conversions import hsv_to_rgb
from colourformats.formats import CHANNEL_MAX, HSV, HUE_MAX, RGB

logger = logging.getLogger(__name__)

# ===== SWATCH DEFAULTS (EDIT HERE) =====
SWATCH_CELL_PX = 32
SWEEP_WIDTH = 360          # one column per degree
SWEEP_HEIGHT = 50
PALETTE_SIZE = 5


@contextmanager
def _rgb_image(path: str | Path):
    """Yield the image at ``path`` upright and in RGB mode."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    try:
        with Image.open(p) as im:
            yield ImageOps.exif_transpose(im).convert("RGB")
    except OSError as e:
        raise ValueError(f"not a readable image: {p.name}") from e


def colour_histogram(path: str | Path) -> Dict[RGB, int]:
    """Count how many pixels carry each distinct colour."""
    with _rgb_image(path) as im:
        w, h = im.size
        counts = im.getcolors(maxcolors=w * h)
    logger.debug("%d distinct colours in %s", len(counts), path)
    return {RGB(*rgb): n for n, rgb in counts}


def dominant_colours(path: str | Path, count: int = PALETTE_SIZE) -> List[Tuple[Colour, int]]:
    """
    Reduce the image to at most ``count`` colours and return them with
    their pixel counts, most common first.
    """
    if not 1 <= count <= 256:
        raise ValueError("count must be in 1..256")
    with _rgb_image(path) as im:
        q = im.quantize(colors=count)
        palette = q.getpalette()
        used = q.getcolors()

    out = []
    for n, idx in sorted(used, key=lambda item: -item[0]):
        r, g, b = palette[idx * 3: idx * 3 + 3]
        out.append((Colour.from_rgb(r, g, b), n))
    return out


def average_colour(path: str | Path) -> Colour:
    """Per-channel mean over every pixel, rounded half up."""
    with _rgb_image(path) as im:
        means = ImageStat.Stat(im).mean
    return Colour.from_rgb(*(min(CHANNEL_MAX, int(math.floor(m + 0.5))) for m in means))


def _save(img, output_path: str | Path) -> Path:
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(out)
    logger.debug("wrote %s", out)
    return out


def write_swatch(colours: Iterable[Colour], output_path: str | Path, cell: int = SWATCH_CELL_PX) -> Path:
    """Save one square cell per colour, left to right."""
    cells = [c.rgb.as_tuple() for c in colours]
    if not cells:
        raise ValueError("need at least one colour for a swatch")
    if cell <= 0:
        raise ValueError("cell must be positive")

    img = Image.new("RGB", (cell * len(cells), cell))
    for i, rgb in enumerate(cells):
        img.paste(rgb, (i * cell, 0, (i + 1) * cell, cell))
    return _save(img, output_path)


def make_hue_sweep(
    output_path: str | Path,
    width: int = SWEEP_WIDTH,
    height: int = SWEEP_HEIGHT,
    saturation: float = 100.0,
    value: float = 100.0,
) -> Path:
    """Column x has hue x * 360 / width; the last column stops short of 360."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")

    img = Image.new("RGB", (width, height))
    for x in range(width):
        rgb = hsv_to_rgb(HSV(x * HUE_MAX / width, saturation, value))
        img.paste(rgb.as_tuple(), (x, 0, x + 1, height))
    return _save(img, output_path)
