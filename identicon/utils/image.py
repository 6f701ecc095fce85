import io

import numpy as np
import numpy.typing as npt
from PIL import Image

UInt8Array = npt.NDArray[np.uint8]


def to_array(image: Image.Image) -> UInt8Array:
    """
    Convert a PIL image into an (H, W, C) uint8 array. RGB images give C == 3.
    """
    return np.asarray(image, dtype=np.uint8)


def encode_png(image: Image.Image) -> bytes:
    """
    Encode a PIL image as PNG bytes without touching the filesystem.
    """
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
