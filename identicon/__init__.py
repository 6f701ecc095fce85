"""Deterministic 5x5 identicons.

``generate_identicon("alice")`` hashes the text with MD5, picks a color from
the first three bytes, mirrors 15 bytes into a symmetric 5x5 grid, keeps the
even squares and paints them onto a 250x250 PNG.
"""

from identicon.errors import (
    IdenticonError,
    InputEncodingError,
    PreconditionError,
    RenderError,
)
from identicon.image import Image
from identicon.pipeline import generate, generate_identicon
from identicon.square import PixelRect, Square
from identicon.storage import save_identicon, save_image

__all__ = [
    "IdenticonError",
    "Image",
    "InputEncodingError",
    "PixelRect",
    "PreconditionError",
    "RenderError",
    "Square",
    "generate",
    "generate_identicon",
    "save_identicon",
    "save_image",
]
