"""Preview entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from blessed import Terminal

from ..common.align import AlignmentError, parse_horizontal, parse_vertical
from ..common.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_HORIZONTAL,
    DEFAULT_TEXT,
    DEFAULT_VERTICAL,
    DEFAULT_WIDTH,
    LOG_FORMAT,
)
from ..common.geometry import Rectangle
from .terminal_ui import TerminalUI

_logger = logging.getLogger(__name__)


def setup_logging(log_file: str | None, debug: bool = False) -> None:
    """Configure logging to stderr and optional file output."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def parse_size(value: str) -> tuple[int, int]:
    """Parse a WxH size such as '4x2'."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size {value!r}, expected WxH")
    if width < 0 or height < 0:
        raise argparse.ArgumentTypeError(f"size must not be negative: {value!r}")
    return width, height


def non_negative_int(value: str) -> int:
    """Parse a cell count that must not be negative."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid cell count {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"cell count must not be negative: {value!r}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview cell alignment")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT, help="Text to align")
    parser.add_argument(
        "--width",
        type=non_negative_int,
        default=DEFAULT_WIDTH,
        help="Bounding width in cells",
    )
    parser.add_argument(
        "--height",
        type=non_negative_int,
        default=DEFAULT_HEIGHT,
        help="Bounding height in cells",
    )
    parser.add_argument(
        "--horizontal",
        default=DEFAULT_HORIZONTAL,
        help="left, center or right (default: center)",
    )
    parser.add_argument(
        "--vertical",
        default=DEFAULT_VERTICAL,
        help="top, middle or bottom (default: middle)",
    )
    parser.add_argument(
        "--box",
        type=parse_size,
        help="Align a WxH area instead of the text",
    )
    parser.add_argument("--log", help="Log file path (in addition to stderr)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log, args.debug)

    bounds = Rectangle.from_coords(0, 0, args.width, args.height)
    ui = TerminalUI(Terminal(stream=sys.stdout))
    try:
        horizontal = parse_horizontal(args.horizontal)
        vertical = parse_vertical(args.vertical)
        if args.box:
            area = Rectangle.from_coords(0, 0, *args.box)
            lines = ui.box_lines(bounds, area, horizontal, vertical)
        else:
            lines = ui.preview_lines(bounds, args.text, horizontal, vertical)
    except AlignmentError as e:
        _logger.error("Cannot align: %s", e)
        return 1

    _logger.debug("Previewing %s with %s/%s", bounds, horizontal, vertical)
    try:
        ui.render(lines)
    finally:
        ui.cleanup()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
