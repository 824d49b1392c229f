"""
Command line entry point for hexview.
"""

import argparse
import curses
import logging
import sys
from typing import List, Optional

from .core.config import DisplayState, ViewConfig
from .core.errors import ConfigError
from .ui.widget import HexView
from .ui.window import run_viewer
from .utils.hex_utils import hexdump
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="hexview",
        description="hexview - Terminal Hex Viewer and Editor"
    )
    parser.add_argument("file", type=str, help="File to open")
    parser.add_argument(
        "-w", "--bytes-per-row", type=int, default=16,
        help="Bytes shown per row (default: 16)"
    )
    parser.add_argument(
        "-g", "--group", type=int, default=1, dest="bytes_per_group",
        help="Bytes per hex group (default: 1)"
    )
    parser.add_argument(
        "--address-width", type=int, default=0,
        help="Minimum hex digits of the address column (default: automatic)"
    )
    parser.add_argument(
        "--start-address", type=lambda value: int(value, 0), default=0,
        help="Address label of the first byte, e.g. 0x8000"
    )
    parser.add_argument("--no-ascii", action="store_true", help="Hide the ASCII column")
    parser.add_argument("--read-only", action="store_true", help="Disable editing")
    parser.add_argument("-d", "--dump", action="store_true", help="Print a hexdump and exit")
    parser.add_argument(
        "--color", action=argparse.BooleanOptionalAction, default=None,
        help="Colorize --dump output (default: when stdout is a terminal)"
    )
    parser.add_argument("--log-file", type=str, default=None, help="Write logs to this file")
    parser.add_argument("--debug", action="store_true", help="Log debug messages")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ViewConfig:
    return ViewConfig(
        bytes_per_row=args.bytes_per_row,
        show_ascii=not args.no_ascii,
        address_width=args.address_width,
        bytes_per_group=args.bytes_per_group,
        start_address=args.start_address,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)

    if args.log_file or args.debug:
        setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        with open(args.file, 'rb') as f:
            data = f.read()
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d bytes from %s", len(data), args.file)

    if args.dump:
        color = sys.stdout.isatty() if args.color is None else args.color
        sys.stdout.write(hexdump(data, config, color=color))
        return 0

    state = DisplayState.ENABLED if args.read_only else DisplayState.EDITABLE
    view = HexView(data, config, display_state=state)

    try:
        curses.wrapper(run_viewer, view, args.file)
    except curses.error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
