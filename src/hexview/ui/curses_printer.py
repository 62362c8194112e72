"""
Curses drawing surface for the hex view.
"""

import curses
from typing import Dict, Optional, Tuple

from .render import Style

HIGHLIGHT_PAIR = 1
SECONDARY_PAIR = 2


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y < 0 or x < 0 or y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


def default_attrs() -> Dict[Style, int]:
    """Style attributes that work on monochrome terminals."""

    return {
        Style.NORMAL: curses.A_NORMAL,
        Style.HIGHLIGHT: curses.A_REVERSE | curses.A_BOLD,
        Style.SECONDARY: curses.A_REVERSE,
    }


def init_colors() -> Dict[Style, int]:
    """
    Initialize the color pairs of the cursor highlight.

    Must be called after curses.initscr(). Falls back to default_attrs()
    when the terminal has no colors.

    Returns:
        Dict[Style, int]: Curses attribute per style
    """

    if not curses.has_colors():
        return default_attrs()

    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_YELLOW)  # Nibble under cursor
    curses.init_pair(SECONDARY_PAIR, curses.COLOR_GREEN, -1)  # Other nibble of the byte

    return {
        Style.NORMAL: curses.A_NORMAL,
        Style.HIGHLIGHT: curses.color_pair(HIGHLIGHT_PAIR) | curses.A_BOLD,
        Style.SECONDARY: curses.color_pair(SECONDARY_PAIR) | curses.A_REVERSE,
    }


class CursesPrinter:
    """Draws view cells into a curses window, shifted by an origin."""

    def __init__(self, window: 'curses.window', origin: Tuple[int, int] = (0, 0),
                 attrs: Optional[Dict[Style, int]] = None) -> None:
        self.window = window
        self.origin = origin
        self.attrs = attrs or default_attrs()

    def print(self, pos: Tuple[int, int], text: str, style: Style = Style.NORMAL) -> None:
        x, y = pos
        safe_addstr(self.window, self.origin[1] + y, self.origin[0] + x, text, self.attrs[style])

    def print_vline(self, pos: Tuple[int, int], height: int, text: str) -> None:
        x, y = pos
        for row in range(y, y + height):
            self.print((x, row), text)
