from PIL import Image, ImageDraw

from identicon.errors import RenderError
from identicon.image import Image as IdenticonImage
from identicon.types import BACKGROUND_COLOR, CANVAS_SIZE
from identicon.utils.image import UInt8Array, encode_png, to_array


def draw_image(image: IdenticonImage) -> Image.Image:
    """
    Paint every rectangle of ``image.pixel_map`` onto a blank canvas.

    ``ImageDraw.rectangle`` includes both corners, so the far corner is pulled
    in by one pixel to keep each cell exactly 50x50.
    """
    if image.color is None:
        raise RenderError("Cannot render an identicon without a color")
    if image.pixel_map is None:
        raise RenderError("Cannot render an identicon without a pixel map")

    canvas = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(canvas)
    for rect in image.pixel_map:
        (x0, y0), (x1, y1) = rect.top_left, rect.bottom_right
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=image.color)
    return canvas


def render_png(image: IdenticonImage) -> bytes:
    return encode_png(draw_image(image))


def render_array(image: IdenticonImage) -> UInt8Array:
    """
    Render as a (250, 250, 3) uint8 array, handy for pixel-level checks.
    """
    return to_array(draw_image(image))
