"""Command-line interface for hueflip.

Transforms hex colors given as arguments (or on standard input) and prints
one ``SOURCE -> RESULT`` line per color.
"""

import argparse
import logging
import sys
from typing import TextIO

from hueflip.core.transform import transform_colors
from hueflip.models.config import InvalidFormat, TransformConfig

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="hueflip",
        description="Invert colors and rotate their hue (CSS invert(1) hue-rotate(180deg))",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hueflip '#123456' abcdef
  hueflip '#FFFFFF' --bg '#1E1E1E' --min-contrast 7
  cat palette.txt | hueflip -
  hueflip '#FF8800' --no-invert --rotate 90
        """,
    )

    parser.add_argument(
        "colors",
        nargs="*",
        help="Hex colors like #RRGGBB or RRGGBB; '-' reads colors from stdin",
    )

    parser.add_argument(
        "--no-invert",
        action="store_true",
        help="Skip channel inversion and only rotate the hue",
    )

    parser.add_argument(
        "--rotate",
        type=float,
        default=180.0,
        metavar="DEGREES",
        help="Hue rotation in degrees (default: 180)",
    )

    parser.add_argument(
        "--bg",
        "--background",
        dest="background",
        default=None,
        help="Background color to check transformed colors against",
    )

    parser.add_argument(
        "--min-contrast",
        type=float,
        default=4.5,
        metavar="RATIO",
        help="Minimum contrast ratio against --bg (default: 4.5, WCAG AA)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def collect_colors(values: list[str], stdin: TextIO | None = None) -> list[str]:
    """Expand '-' into colors read from stdin.

    Args:
        values: Color arguments as given on the command line.
        stdin: Stream to read from when '-' is present (default: sys.stdin).

    Returns:
        Colors in the order given.

    Raises:
        SystemExit: If no colors were given at all.
    """
    colors = []

    for value in values:
        if value == "-":
            colors.extend((stdin or sys.stdin).read().split())
        else:
            colors.append(value)

    if not colors:
        logger.error("No colors given")
        sys.exit(1)

    return colors


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )
    logging.getLogger().setLevel(log_level)

    colors = collect_colors(args.colors)

    try:
        config = TransformConfig.from_options(
            invert=not args.no_invert,
            hue_rotation=args.rotate,
            bg_hex=args.background,
            min_contrast=args.min_contrast,
        )
    except InvalidFormat as e:
        logger.error(f"Invalid background: {e}")
        return 1

    for warning in config.validate():
        logger.warning(f"Config: {warning}")

    def progress_callback(current: int, total: int, source: str) -> None:
        logger.debug(f"[{current}/{total}] {source}")

    result = transform_colors(colors, config, progress_callback)

    for item in result.results:
        if item.success:
            print(f"{item.source} -> {item.output}")

    if result.all_warnings:
        logger.warning(f"Completed with {len(result.all_warnings)} warning(s):")
        for warning in result.all_warnings:
            logger.warning(f"  - {warning}")

    logger.debug(f"Transformed {result.successful}/{result.total} colors")

    return 0 if result.successful == result.total else 1


if __name__ == "__main__":
    sys.exit(main())
