"""Command-line entrypoint for the newline converter."""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from . import __version__
from .converters import ConversionError
from .services.file_conversion import _default_settings, convert_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="newline-converter",
        description="Replaces \\n with newlines",
    )
    parser.add_argument("in_file", help="Input file")
    parser.add_argument("-o", "--out-file", help="Output file")
    parser.add_argument("-e", "--encoding", help="Text encoding for input and output")
    parser.add_argument(
        "--no-sync",
        action="store_true",
        help="Do not flush the output to disk before exiting",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = _default_settings()
    if args.encoding:
        settings = replace(settings, encoding=args.encoding)
    if args.no_sync:
        settings = replace(settings, sync=False)

    try:
        result = convert_file(args.in_file, args.out_file, settings=settings)
    except ConversionError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(exc)
        return 1

    logger.info("Wrote %s", result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
