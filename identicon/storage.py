"""Write rendered identicons to disk.

A plain byte sink: ``{input}.png`` in the target directory, overwritten if it
already exists.
"""

import logging
from pathlib import Path
from typing import Union

from identicon.pipeline import generate_identicon

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def image_path(input: str, directory: PathLike = ".") -> Path:
    return Path(directory) / f"{input}.png"


def save_image(data: bytes, input: str, directory: PathLike = ".") -> Path:
    """Write PNG ``data`` to ``{directory}/{input}.png`` and return the path."""
    path = image_path(input, directory)
    path.write_bytes(data)
    logger.info("Wrote identicon for %r to %s", input, path)
    return path


def save_identicon(input: str, directory: PathLike = ".", encoding: str = "utf-8") -> Path:
    """Generate the identicon for ``input`` and save it next to its siblings."""
    return save_image(generate_identicon(input, encoding=encoding), input, directory)
