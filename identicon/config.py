"""Runtime configuration.

Only ambient settings live here. Grid geometry, hash algorithm and colors are
fixed in :mod:`identicon.types`.
"""

import argparse
from dataclasses import dataclass


DEFAULT_ENCODING = "utf-8"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class IdenticonConfig:
    """Settings for generating and saving identicons.

    Attributes:
        encoding: Codec used to turn input text into hash bytes.
        output_dir: Directory PNG files are written to.
        log_level: Name of the root logging level used by the CLI.
    """

    encoding: str = DEFAULT_ENCODING
    output_dir: str = DEFAULT_OUTPUT_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "IdenticonConfig":
        return cls(
            encoding=getattr(args, "encoding", DEFAULT_ENCODING),
            output_dir=getattr(args, "output_dir", DEFAULT_OUTPUT_DIR),
            log_level=getattr(args, "log_level", DEFAULT_LOG_LEVEL).upper(),
        )
