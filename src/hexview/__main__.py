"""
Entry point for the hex view demo.
"""

import argparse
import curses
import logging
import sys
from typing import List, Optional

from .core.config import DisplayState, HexViewConfig
from .core.events import EventResult
from .ui.curses_printer import CursesPrinter, init_colors, safe_addstr
from .ui.input_handler import InputHandler
from .ui.view import HexView
from .utils.hex_utils import colorize_dump, dump_text
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_DATA = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

HELP_LINES: List[str] = [
    "Use the keys + - ↑ ↓ ← → Home End 0-9 a-f for the hex view.",
    "Use q to exit.",
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="HexView - Interactive terminal hex viewer and editor"
    )
    parser.add_argument("file", nargs="?", type=str, help="File to display")

    state = parser.add_mutually_exclusive_group()
    state.add_argument("--editable", action="store_true", help="Allow editing the data")
    state.add_argument("--disabled", action="store_true", help="Neither navigate nor edit")

    parser.add_argument("--bytes-per-line", type=int, default=16)
    parser.add_argument("--bytes-per-group", type=int, default=1)
    parser.add_argument("--group-separator", type=str, default=" ")
    parser.add_argument("--addr-separator", type=str, default=": ")
    parser.add_argument("--hex-ascii-separator", type=str, default=" | ")
    parser.add_argument("--no-ascii", action="store_true", help="Hide the ASCII field")
    parser.add_argument("--start-addr", type=lambda s: int(s, 0), default=0,
                        help="Address of the first byte, e.g. 0x8000")
    parser.add_argument("--addr-width", type=int, default=0,
                        help="Minimum number of address digits, 0 for automatic")
    parser.add_argument("--dump", action="store_true", help="Print the dump to stdout and exit")
    parser.add_argument("--log-file", type=str, help="Write log records to this file")
    parser.add_argument("--debug", action="store_true", help="Log debug records")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> HexViewConfig:
    return HexViewConfig(
        bytes_per_line=args.bytes_per_line,
        bytes_per_group=args.bytes_per_group,
        group_separator=args.group_separator,
        addr_separator=args.addr_separator,
        hex_ascii_separator=args.hex_ascii_separator,
        show_ascii=not args.no_ascii,
        start_addr=args.start_addr,
        addr_width=args.addr_width,
    )


def build_state(args: argparse.Namespace) -> DisplayState:
    if args.editable:
        return DisplayState.EDITABLE
    if args.disabled:
        return DisplayState.DISABLED

    return DisplayState.ENABLED


def read_file(filename: str) -> bytes:
    with open(filename, 'rb') as f:
        return f.read()


def run(stdscr: 'curses.window', view: HexView) -> None:
    """Draw the view and feed it keys until it ignores a q."""

    try:
        curses.curs_set(0)
    except curses.error:
        pass

    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    attrs = init_colors()

    origin = (0, len(HELP_LINES) + 1)
    input_handler = InputHandler(view, origin)
    printer = CursesPrinter(stdscr, origin, attrs)

    while True:
        stdscr.erase()
        for i, line in enumerate(HELP_LINES):
            safe_addstr(stdscr, i, 0, line)

        view.draw(printer)
        stdscr.refresh()

        try:
            ch = stdscr.getch()
        except KeyboardInterrupt:
            break

        if input_handler.handle_input(ch) is EventResult.IGNORED and ch == ord('q'):
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    try:
        config = build_config(args)
        data = read_file(args.file) if args.file else SAMPLE_DATA
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    view = HexView(data, config, build_state(args))
    logger.info("Loaded %d bytes from %s", len(view), args.file or "sample data")

    if args.dump:
        text = dump_text(view)
        sys.stdout.write(colorize_dump(text) if sys.stdout.isatty() else text)
        return 0

    curses.wrapper(run, view)
    return 0


if __name__ == "__main__":
    sys.exit(main())
