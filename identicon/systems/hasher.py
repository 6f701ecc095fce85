"""Hasher stage.

Turns an input string into the 16 digest bytes every later stage reads.
"""

import hashlib

from pyrsistent import pvector

from identicon.errors import InputEncodingError
from identicon.image import Image


def hash_input(input: str, encoding: str = "utf-8") -> Image:
    """Create a fresh ``Image`` holding the MD5 digest of ``input``.

    The empty string is valid input; its digest is still 16 bytes.

    Args:
        input (str): Arbitrary text.
        encoding (str): Codec used to turn ``input`` into bytes.

    Returns:
        Image: New record with only ``hash`` populated.

    Raises:
        TypeError: If ``input`` is not a string.
        InputEncodingError: If ``input`` cannot be encoded with ``encoding``, or
            ``encoding`` names an unknown codec.
    """
    if not isinstance(input, str):
        raise TypeError(f"Identicon input must be a string, got {type(input).__name__}")
    try:
        data = input.encode(encoding)
    except (LookupError, UnicodeError) as e:
        raise InputEncodingError(f"Cannot encode {input!r} as {encoding}: {e}") from e
    digest = hashlib.md5(data).digest()
    return Image(hash=pvector(digest))
