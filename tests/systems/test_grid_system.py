import random

import pytest

from identicon.errors import PreconditionError
from identicon.square import Square
from identicon.systems.grid import build_grid, chunk, mirror_row
from tests.test_utils import HASH_DIGEST, make_image


@pytest.mark.parametrize(
    "row, expected",
    [
        ([1, 2, 3], [1, 2, 3, 2, 1]),
        ([0, 0, 0], [0, 0, 0, 0, 0]),
        ([255, 7, 128], [255, 7, 128, 7, 255]),
    ],
)
def test_mirror_row(row: list[int], expected: list[int]) -> None:
    assert mirror_row(row) == expected


@pytest.mark.parametrize("row", [[], [1, 2], [1, 2, 3, 4]])
def test_mirror_row_rejects_wrong_length(row: list[int]) -> None:
    with pytest.raises(ValueError):
        mirror_row(row)


def test_chunk_drops_short_remainder() -> None:
    assert list(chunk(list(range(16)), 3)) == [
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        [9, 10, 11],
        [12, 13, 14],
    ]


def test_build_grid_known_hash() -> None:
    grid = build_grid(make_image()).grid
    assert grid is not None
    assert list(grid) == [
        Square(value, index)
        for index, value in enumerate(
            [8, 0, 252, 0, 8,
             87, 114, 148, 114, 87,
             195, 78, 11, 78, 195,
             40, 173, 40, 173, 40,
             57, 67, 89, 67, 57]
        )
    ]
    assert list(grid[:5]) == [Square(8, 0), Square(0, 1), Square(252, 2), Square(0, 3), Square(8, 4)]


def test_last_hash_byte_unused() -> None:
    grid = build_grid(make_image()).grid
    assert grid is not None
    assert HASH_DIGEST[15] not in [square.value for square in grid]


def test_build_grid_keeps_other_fields() -> None:
    before = make_image(color=(8, 0, 252))
    after = build_grid(before)
    assert after.color == before.color
    assert after.hash == before.hash
    assert before.grid is None


@pytest.mark.parametrize("seed", range(5))
def test_grid_is_25_ordered_mirrored_squares(seed: int) -> None:
    rng = random.Random(seed)
    hash = [rng.randrange(256) for _ in range(16)]
    grid = build_grid(make_image(hash)).grid
    assert grid is not None
    assert len(grid) == 25
    assert [square.index for square in grid] == list(range(25))
    for square in grid:
        mirrored = grid[square.row * 5 + (4 - square.col)]
        assert square.value == mirrored.value
    for row in range(5):
        assert [grid[row * 5 + col].value for col in range(3)] == hash[3 * row : 3 * row + 3]


def test_build_grid_short_hash_raises() -> None:
    with pytest.raises(PreconditionError):
        build_grid(make_image(list(range(14))))
