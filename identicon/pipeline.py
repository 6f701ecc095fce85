"""Pipeline orchestration.

Composes the stages in :mod:`identicon.systems` into the two public entry
points. Order matters; each stage reads fields written by the previous ones:

1. ``hash_input`` creates the record from the input string.
2. ``pick_color`` reads the first three hash bytes.
3. ``build_grid`` mirrors 15 hash bytes into 25 squares.
4. ``filter_odd_squares`` drops odd squares.
5. ``build_pixel_map`` maps the survivors onto the canvas.
6. ``render_png`` paints and encodes (only in :func:`generate_identicon`).

Every call is independent; nothing is cached between inputs.
"""

import logging

from identicon.image import Image
from identicon.renderer.raster import render_png
from identicon.systems.color import pick_color
from identicon.systems.filter import filter_odd_squares
from identicon.systems.grid import build_grid
from identicon.systems.hasher import hash_input
from identicon.systems.pixel_map import build_pixel_map

logger = logging.getLogger(__name__)


def generate(input: str, encoding: str = "utf-8") -> Image:
    """Run every stage up to the pixel map.

    Args:
        input (str): Text to derive the identicon from.
        encoding (str): Codec used by the hasher.

    Returns:
        Image: Final record with ``hash``, ``color``, filtered ``grid`` and
            ``pixel_map`` populated.
    """
    image = hash_input(input, encoding=encoding)
    for stage in (pick_color, build_grid, filter_odd_squares, build_pixel_map):
        image = stage(image)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s(%r): %s", stage.__name__, input, dict(image.description))
    return image


def generate_identicon(input: str, encoding: str = "utf-8") -> bytes:
    """Return the PNG bytes of the identicon for ``input``.

    Deterministic: the same input and encoding always give identical bytes.
    """
    return render_png(generate(input, encoding=encoding))
