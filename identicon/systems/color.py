from dataclasses import replace

from identicon.errors import PreconditionError
from identicon.image import Image


def pick_color(image: Image) -> Image:
    """Use the first three hash bytes as the ``(r, g, b)`` fill color."""
    if len(image.hash) < 3:
        raise PreconditionError(
            f"Need at least 3 hash bytes to pick a color, got {len(image.hash)}"
        )
    r, g, b = image.hash[:3]
    return replace(image, color=(r, g, b))
