"""Command-line entry point.

Usage:
  svg2css icons/ icons.css
  svg2css --prefix icon- --write-dimensions icons/ icons.scss
  svg2css -vv icons/ icons.css
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from svg2css import __version__
from svg2css.config import Settings, get_settings
from svg2css.engine.config import PipelineConfig
from svg2css.engine.pipeline import convert_directory
from svg2css.engine.verbosity import VerbosityLog
from svg2css.errors import Svg2CssError

logger = logging.getLogger("svg2css")

DESCRIPTION = "\n".join([
    f"SVG to inline CSS converter, Version {__version__}",
    "",
    "Takes a folder of SVG-files and translates them into a single CSS-file with inline background-images.",
    "The filenames will be used as CSS-selectors for the generated rules.",
])


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg2css",
        usage="%(prog)s [options] <source-dir> <target-file>",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source_dir", metavar="source-dir", help="Folder containing the SVG files")
    parser.add_argument("target_file", metavar="target-file", help="Stylesheet to write")
    parser.add_argument(
        "--prefix",
        default=settings.svg2css_prefix,
        help="Prepended string to each selector in the resulting css.",
    )
    parser.add_argument(
        "--write-dimensions",
        action="store_true",
        default=settings.svg2css_write_dimensions,
        help="Write width and height as sass-variables to the resulting css.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Verbose output. -v = basic, -vv = detailed, -vvv = debug.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(settings: Settings, verbose: int = 0) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.svg2css_log_level.upper(), logging.INFO),
        format=settings.svg2css_log_format,
    )
    # -v output is emitted at INFO and must survive a stricter configured level
    if verbose > 0 and logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = get_settings()

    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(settings)
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    configure_logging(settings, args.verbose)

    config = PipelineConfig(
        source_dir=args.source_dir,
        prefix=args.prefix or "",
        write_dimensions=args.write_dimensions,
        encoding=settings.svg2css_encoding,
    )

    try:
        convert_directory(config, args.target_file, VerbosityLog(args.verbose, logger))
    except Svg2CssError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
