"""
Input handler module for translating curses key codes into view events.
"""

import curses
import logging
from typing import Dict, Final, Optional, Tuple

from ..core.events import CharEvent, Event, EventResult, Key, KeyEvent, MouseEvent
from .view import HexView

logger = logging.getLogger(__name__)

KEY_EVENTS: Final[Dict[int, KeyEvent]] = {
    curses.KEY_LEFT: KeyEvent(Key.LEFT),
    curses.KEY_RIGHT: KeyEvent(Key.RIGHT),
    curses.KEY_UP: KeyEvent(Key.UP),
    curses.KEY_DOWN: KeyEvent(Key.DOWN),
    curses.KEY_HOME: KeyEvent(Key.HOME),
    curses.KEY_END: KeyEvent(Key.END),
    curses.KEY_SHOME: KeyEvent(Key.HOME, shift=True),  # Shift + Home
    curses.KEY_SEND: KeyEvent(Key.END, shift=True),  # Shift + End
}

PRESS_MASK: Final[int] = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED


class InputHandler:
    """Feeds curses key codes to a hex view."""

    def __init__(self, view: HexView, origin: Tuple[int, int] = (0, 0)) -> None:
        self.view = view
        self.origin = origin

    def translate(self, ch: int) -> Optional[Event]:
        """
        Translate a curses key code into a view event.

        Args:
            ch (int): Code returned by window.getch()

        Returns:
            Event: The view event, or None if the code has no meaning for the view
        """

        if ch in KEY_EVENTS:
            return KEY_EVENTS[ch]

        if ch == curses.KEY_MOUSE:
            return self._translate_mouse()

        if 32 <= ch <= 126:  # Printable characters
            return CharEvent(chr(ch))

        return None

    def _translate_mouse(self) -> Optional[Event]:
        try:
            _, x, y, _, bstate = curses.getmouse()
        except curses.error:
            return None

        if not bstate & PRESS_MASK:
            return None

        return MouseEvent((x, y), self.origin)

    def handle_input(self, ch: int) -> EventResult:
        """Handle a single key code. IGNORED leaves it to the caller's own bindings."""

        event = self.translate(ch)
        if event is None:
            return EventResult.IGNORED

        result = self.view.on_event(event)
        logger.debug("%r -> %s", event, result.value)

        return result
