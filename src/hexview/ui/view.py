"""
Hex view widget: buffer ownership, input handling and drawing.

Keys handled by the view:

    Left / Right    previous / next nibble, ignored at the row edges
    Up / Down       previous / next row, ignored at the first / last row
    Home / End      first / last nibble of the current row
    Shift+Home      first nibble of the data
    Shift+End       last nibble of the data
    +               append one zero byte (editable only)
    -               drop the last byte, its data is lost (editable only)
    0-9, a-f        set the nibble under the cursor (editable only)
    Mouse press     move to the pressed nibble, ignored outside the view

An ignored event is left to the host, e.g. to move the focus to the next
view or to run a global binding.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from ..core.ascii import is_hex_digit
from ..core.config import DisplayState, HexViewConfig
from ..core.cursor import Cursor, CursorModel, element_under
from ..core.events import CharEvent, Event, EventResult, Key, KeyEvent, MouseEvent
from ..core.geometry import Layout
from .render import DrawCall, Printer, project, replay

logger = logging.getLogger(__name__)


class View(Protocol):
    """Capabilities a host needs to lay out, draw and dispatch to a widget."""

    def draw(self, printer: Printer) -> None:
        ...

    def on_event(self, event: Event) -> EventResult:
        ...

    def required_size(self) -> Tuple[int, int]:
        ...

    def take_focus(self) -> bool:
        ...


class HexView:
    """
    Hexadecimal viewer and editor.

    Displays an owned byte buffer like hexdump does and lets the user move a
    nibble cursor over it. What input is accepted depends on the display
    state; see set_display_state.
    """

    def __init__(self, data: Iterable[int] = b'', config: Optional[HexViewConfig] = None,
                 state: DisplayState = DisplayState.DISABLED) -> None:
        self._data = bytearray(data)
        self._config = config or HexViewConfig()
        self._state = state
        self._cursor = CursorModel()
        self._key_handlers: Dict[Key, Callable[[Layout], EventResult]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[Key, Callable[[Layout], EventResult]]:
        """Set up the navigation key handlers."""

        return {
            Key.LEFT: self._cursor.move_left,
            Key.RIGHT: self._cursor.advance_right,
            Key.UP: self._cursor.move_up,
            Key.DOWN: self._cursor.move_down,
            Key.HOME: self._cursor.home,
            Key.END: self._cursor.end,
        }

    def __repr__(self) -> str:
        return (f"HexView(config={self._config!r}, cursor={self._cursor.position!r}, "
                f"state={self._state.name}, len={len(self._data)})")

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    @property
    def data(self) -> bytes:
        """A snapshot of the buffer. Changing it does not affect the view."""

        return bytes(self._data)

    def set_data(self, data: Iterable[int]) -> None:
        """Replace the buffer, e.g. after an external update."""

        self._data = bytearray(data)
        self._cursor.clamp(self.layout())

    def set_len(self, length: int) -> None:
        """
        Set the length of the buffer.

        Growing appends zero bytes. Shrinking truncates and the truncated data
        is lost. The cursor is re-clamped either way.
        """

        length = max(length, 0)
        old_len = len(self._data)
        if length == old_len:
            return

        if length > old_len:
            self._data.extend(bytes(length - old_len))
        else:
            logger.debug("Truncating buffer from %d to %d bytes", old_len, length)
            del self._data[length:]

        self._cursor.clamp(self.layout())

    @property
    def config(self) -> HexViewConfig:
        return self._config

    def set_config(self, config: HexViewConfig) -> None:
        """Replace the configuration. Takes effect on the next draw."""

        logger.debug("Config changed to %r", config)
        self._config = config
        self._cursor.clamp(self.layout())

    def update_config(self, **changes: Any) -> None:
        """Change single configuration fields, e.g. update_config(bytes_per_line=8)."""

        self.set_config(self._config.replace(**changes))

    def with_config(self, config: HexViewConfig) -> 'HexView':
        self.set_config(config)
        return self

    @property
    def display_state(self) -> DisplayState:
        return self._state

    def set_display_state(self, state: DisplayState) -> None:
        """
        Set what interaction the view allows.

        DISABLED views can neither be focused nor edited, ENABLED views can be
        focused and navigated, EDITABLE views additionally accept +, - and hex
        digits. The buffer API (set_data, set_len) works in every state.
        """

        if state != self._state:
            logger.debug("Display state %s -> %s", self._state.name, state.name)

        self._state = state

    def with_display_state(self, state: DisplayState) -> 'HexView':
        self.set_display_state(state)
        return self

    @property
    def cursor(self) -> Cursor:
        return self._cursor.position

    def layout(self) -> Layout:
        """Compute the geometry for the current data length and configuration."""

        return Layout(len(self._data), self._config)

    def element_under_cursor(self) -> Optional[int]:
        """Get the byte the cursor points into, None if it lies outside the data."""

        return element_under(self._cursor.position, self._data, self.layout())

    def on_event(self, event: Event) -> EventResult:
        """Handle one input event and report whether it was used."""

        if self._state == DisplayState.DISABLED:
            return EventResult.IGNORED

        layout = self.layout()

        if isinstance(event, KeyEvent):
            return self._handle_key(event, layout)

        if isinstance(event, MouseEvent):
            pos = event.relative()
            if pos is None:
                return EventResult.IGNORED

            width, height = layout.required_size()
            if pos[0] >= width or pos[1] >= height:
                return EventResult.IGNORED

            return self._cursor.click(pos, layout)

        if isinstance(event, CharEvent):
            return self._handle_char(event.char, layout)

        return EventResult.IGNORED

    def _handle_key(self, event: KeyEvent, layout: Layout) -> EventResult:
        if event.shift:
            if event.key is Key.HOME:
                return self._cursor.jump_start(layout)
            if event.key is Key.END:
                return self._cursor.jump_end(layout)

            return EventResult.IGNORED

        return self._key_handlers[event.key](layout)

    def _handle_char(self, char: str, layout: Layout) -> EventResult:
        if self._state != DisplayState.EDITABLE:
            return EventResult.IGNORED

        if char == '+':
            self.set_len(len(self._data) + 1)
            return EventResult.CONSUMED

        if char == '-':
            self.set_len(len(self._data) - 1)
            return EventResult.CONSUMED

        if len(char) == 1 and is_hex_digit(ord(char)):
            return self._set_nibble(int(char, 16), layout)

        return EventResult.IGNORED

    def _set_nibble(self, value: int, layout: Layout) -> EventResult:
        """Replace the nibble under the cursor and advance to the next one."""

        current = element_under(self._cursor.position, self._data, layout)
        if current is None:
            return EventResult.IGNORED

        index = self._cursor.byte_index(layout)
        shift = 4 if self._cursor.position.high_nibble else 0
        self._data[index] = (current & ~(0xF << shift) & 0xFF) | (value << shift)

        self._cursor.advance_right(layout)
        return EventResult.CONSUMED

    def required_size(self) -> Tuple[int, int]:
        return self.layout().required_size()

    def take_focus(self) -> bool:
        return self._state != DisplayState.DISABLED

    def render(self) -> List[DrawCall]:
        """Project the current state into draw calls."""

        return project(bytes(self._data), self.layout(), self._cursor.position, self._state)

    def draw(self, printer: Printer) -> None:
        replay(self.render(), printer)
