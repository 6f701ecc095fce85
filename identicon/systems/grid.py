"""Grid construction stage.

Chunks the hash into rows of three bytes and mirrors each row so the
finished identicon is symmetric about its vertical axis::

    [a, b, c] -> [a, b, c, b, a]

Five rows consume the first 15 bytes; the 16th byte is never used.
"""

from dataclasses import replace
from typing import Iterator, List, Sequence, TypeVar

from pyrsistent import pvector

from identicon.errors import PreconditionError
from identicon.image import Image
from identicon.square import Square
from identicon.types import GRID_SIZE, ROW_SOURCE_LENGTH

T = TypeVar("T")


def chunk(values: Sequence[T], size: int) -> Iterator[List[T]]:
    """Yield consecutive ``size``-long chunks, dropping a short remainder."""
    for start in range(0, len(values) - size + 1, size):
        yield list(values[start : start + size])


def mirror_row(row: Sequence[T]) -> List[T]:
    """Return ``[a, b, c, b, a]`` for a three element ``row``.

    Raises:
        ValueError: If ``row`` does not hold exactly three elements.
    """
    if len(row) != ROW_SOURCE_LENGTH:
        raise ValueError(f"Row must have {ROW_SOURCE_LENGTH} elements, got {len(row)}")
    a, b, c = row
    return [a, b, c, b, a]


def build_grid(image: Image) -> Image:
    """Expand ``image.hash`` into 25 row-major ``Square`` values.

    Args:
        image (Image): Record with ``hash`` populated.

    Returns:
        Image: New record with ``grid`` set; ``hash`` and ``color`` unchanged.

    Raises:
        PreconditionError: If the hash is too short to fill five rows.
    """
    rows = list(chunk(image.hash, ROW_SOURCE_LENGTH))[:GRID_SIZE]
    if len(rows) < GRID_SIZE:
        raise PreconditionError(
            f"Need {GRID_SIZE * ROW_SOURCE_LENGTH} hash bytes to build the grid, "
            f"got {len(image.hash)}"
        )
    values = [value for row in rows for value in mirror_row(row)]
    grid = pvector(Square(value, index) for index, value in enumerate(values))
    return replace(image, grid=grid)
