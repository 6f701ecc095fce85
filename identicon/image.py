"""Immutable ``Image`` record threaded through the identicon pipeline.

Every stage in :mod:`identicon.systems` is a pure function that accepts an
``Image`` and returns a *new* ``Image`` built with ``dataclasses.replace``;
no stage mutates its input. Fields start empty and are filled in pipeline
order:

* ``hash`` by :func:`identicon.systems.hasher.hash_input`
* ``color`` by :func:`identicon.systems.color.pick_color`
* ``grid`` by :func:`identicon.systems.grid.build_grid`, then narrowed by
    :func:`identicon.systems.filter.filter_odd_squares`
* ``pixel_map`` by :func:`identicon.systems.pixel_map.build_pixel_map`

Sequences are persistent vectors (``pyrsistent.PVector``) so a record can be
shared freely between callers without defensive copies.

See :mod:`identicon.pipeline` for how the stages are composed.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from identicon.square import PixelRect, Square
from identicon.types import Color


@dataclass(frozen=True)
class Image:
    """Accumulating identicon record.

    Attributes:
        hash (PVector[int]): 16 digest bytes, each in [0, 255].
        color (Color | None): Fill color picked from the first three bytes.
        grid (PVector[Square] | None): Grid squares in row-major order; 25 before
            filtering, only even-valued squares after.
        pixel_map (PVector[PixelRect] | None): One canvas rectangle per
            surviving square, in grid order.
    """

    hash: PVector[int] = pvector()
    color: Optional[Color] = None
    grid: Optional[PVector[Square]] = None
    pixel_map: Optional[PVector[PixelRect]] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the populated fields.

        Unset (``None``) and empty fields are left out, which keeps debug
        output readable between stages.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or (isinstance(value, type(pvector())) and len(value) == 0):
                continue
            description = description.set(field, value)
        return description
