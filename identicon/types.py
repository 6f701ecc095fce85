"""Common type aliases and fixed geometry constants.

The identicon layout is not configurable: a 16 byte MD5 digest drives a 5x5
grid of 50px cells on a 250px square canvas.
"""

from typing import Tuple

Color = Tuple[int, int, int]
Point = Tuple[int, int]

HASH_LENGTH = 16
ROW_SOURCE_LENGTH = 3
GRID_SIZE = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE

BACKGROUND_COLOR: Color = (255, 255, 255)
