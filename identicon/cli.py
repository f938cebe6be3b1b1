"""Command-line wrapper.

Writes ``<INPUT>.png`` for every key given on the command line::

    identicon alice bob -o avatars/

File output lives here so the pipeline itself never touches the filesystem.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from identicon.pipeline import generate
from identicon.types import IMAGE_FORMAT


logger = logging.getLogger(__name__)

FILE_SUFFIX = f".{IMAGE_FORMAT.lower()}"


def save_image(image: bytes, name: str, directory: Path = Path(".")) -> Path:
    """Write ``image`` to ``directory/<name>.png`` and return the path."""
    path = directory / f"{name}{FILE_SUFFIX}"
    path.write_bytes(image)
    logger.debug("wrote %d bytes to %s", len(image), path)
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate a 250x250 PNG identicon for each input string.",
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help="Identicon key(s)")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write <INPUT>.png files into (default: current directory)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log pipeline details"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    failures: List[str] = []
    for name in args.inputs:
        try:
            path = save_image(generate(name), name, args.output_dir)
        except OSError as exc:
            print(f"identicon: cannot write {name!r}: {exc}", file=sys.stderr)
            failures.append(name)
            continue
        print(path)
    return 1 if failures else 0
