"""Odd square filter.

Only even-valued squares are painted; this stage drops the rest while keeping
the survivors in their original order.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.errors import PreconditionError
from identicon.image import Image


def filter_odd_squares(image: Image) -> Image:
    """Keep only the squares whose value is even.

    An all-odd grid leaves an empty ``grid``; later stages render that as a
    blank canvas.

    Raises:
        PreconditionError: If ``build_grid`` has not run yet.
    """
    if image.grid is None:
        raise PreconditionError("Grid must be built before filtering odd squares")
    even_squares = pvector(square for square in image.grid if square.value % 2 == 0)
    return replace(image, grid=even_squares)
