"""Command line entry point.

Usage::

    identicon alice bob --output-dir avatars/

Writes ``alice.png`` and ``bob.png``. Exits with status 1 if any input failed.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from identicon.config import DEFAULT_ENCODING, DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT_DIR, IdenticonConfig
from identicon.errors import IdenticonError
from identicon.storage import save_identicon

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate a 5x5 symmetric identicon PNG for each input string",
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help="Text to derive an identicon from")
    parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR, help="Directory to write PNG files to")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Text encoding used before hashing")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = IdenticonConfig.from_args(args)
    logging.basicConfig(level=config.log_level, format="%(levelname)s: %(message)s")

    Path(config.output_dir).mkdir(parents=True, exist_ok=True)

    failed = 0
    for input in args.inputs:
        try:
            path = save_identicon(input, config.output_dir, encoding=config.encoding)
        except (IdenticonError, OSError) as e:
            logger.error("Failed to generate identicon for %r: %s", input, e)
            failed += 1
            continue
        print(path)
    return 1 if failed else 0
