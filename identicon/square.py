"""Grid square and pixel rectangle value objects."""

from dataclasses import dataclass

from identicon.types import GRID_SIZE, Point


@dataclass(frozen=True)
class Square:
    """One cell of the 5x5 grid.

    Attributes:
        value: Hash byte driving this cell (even values get painted).
        index: Row-major position, 0 at top left, 24 at bottom right.
    """

    value: int
    index: int

    @property
    def row(self) -> int:
        return self.index // GRID_SIZE

    @property
    def col(self) -> int:
        return self.index % GRID_SIZE


@dataclass(frozen=True)
class PixelRect:
    """Canvas rectangle for a painted square.

    ``top_left`` is inclusive and ``bottom_right`` exclusive, so neighbouring
    rectangles share an edge coordinate without overlapping.

    Attributes:
        top_left: ``(x, y)`` of the first painted pixel.
        bottom_right: ``(x, y)`` one past the last painted pixel.
    """

    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right[0] - self.top_left[0]

    @property
    def height(self) -> int:
        return self.bottom_right[1] - self.top_left[1]
