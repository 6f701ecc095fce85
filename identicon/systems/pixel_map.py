"""Pixel map stage.

Maps each surviving grid square onto the 50x50 canvas rectangle it covers.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.errors import PreconditionError
from identicon.image import Image
from identicon.square import PixelRect
from identicon.types import CELL_SIZE, GRID_SIZE


def cell_rect(row: int, col: int) -> PixelRect:
    """Return the canvas rectangle covering grid cell ``(row, col)``."""
    horizontal = col * CELL_SIZE
    vertical = row * CELL_SIZE
    return PixelRect(
        top_left=(horizontal, vertical),
        bottom_right=(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def index_to_rect(index: int) -> PixelRect:
    """Return the canvas rectangle for a row-major grid ``index``.

    Raises:
        ValueError: If ``index`` lies outside the 5x5 grid.
    """
    if not 0 <= index < GRID_SIZE * GRID_SIZE:
        raise ValueError(f"Grid index out of range: {index}")
    return cell_rect(*divmod(index, GRID_SIZE))


def build_pixel_map(image: Image) -> Image:
    """Set ``pixel_map`` to one rectangle per square, in grid order.

    Args:
        image (Image): Record with a (normally filtered) ``grid``.

    Returns:
        Image: New record with ``pixel_map`` populated.

    Raises:
        PreconditionError: If ``grid`` is missing.
    """
    if image.grid is None:
        raise PreconditionError("Grid must be built before mapping pixels")
    pixel_map = pvector(cell_rect(square.row, square.col) for square in image.grid)
    return replace(image, pixel_map=pixel_map)
