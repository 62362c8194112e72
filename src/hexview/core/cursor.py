"""
Cursor model of the hex view.

The cursor is a logical position: x is a nibble column (two columns per
byte) and y a row. Separators and the address field are not part of it; see
Layout.visual_x for the on-screen column.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .events import EventResult
from .geometry import Layout


@dataclass(frozen=True)
class Cursor:
    """A logical (nibble column, row) position."""

    x: int = 0
    y: int = 0

    @property
    def high_nibble(self) -> bool:
        """True if the cursor addresses the high nibble of its byte."""

        return self.x % 2 == 0


def byte_index(cursor: Cursor, layout: Layout) -> int:
    """Index of the byte a cursor points into. May lie past the data."""

    return cursor.y * layout.config.bytes_per_line + cursor.x // 2


def element_under(cursor: Cursor, data: Sequence[int], layout: Layout) -> Optional[int]:
    """Get the byte a cursor points into, None if it lies outside the data."""

    index = byte_index(cursor, layout)
    if 0 <= index < len(data):
        return data[index]

    return None


def clamp_cursor(cursor: Cursor, layout: Layout) -> Cursor:
    """Move a cursor to the nearest valid position of the layout."""

    y = min(max(cursor.y, 0), layout.last_row)
    x = min(max(cursor.x, 0), layout.max_x_in_row(y))

    return Cursor(x, y)


def visual_to_logical(pos: Tuple[int, int], layout: Layout) -> Cursor:
    """
    Convert a view-relative (column, row) to a logical cursor.

    Positions left of the hex field land on column 0, positions right of or
    below the data are clamped to the nearest valid nibble. The result is
    always a valid cursor, and feeding the visual position of a valid cursor
    returns that cursor.

    Args:
        pos (Tuple[int, int]): Column and row relative to the view
        layout (Layout): Current geometry

    Returns:
        Cursor: The clamped logical position
    """

    column, row = pos
    y = min(max(row, 0), layout.last_row)
    x = layout.logical_x(max(column - layout.hex_offset, 0))

    return Cursor(min(x, layout.max_x_in_row(y)), y)


def logical_to_visual(cursor: Cursor, layout: Layout) -> Tuple[int, int]:
    """Get the view-relative (column, row) where a cursor's nibble is drawn."""

    return layout.hex_offset + layout.visual_x(cursor.x), cursor.y


class CursorModel:
    """Holds the cursor and moves it within a layout."""

    def __init__(self) -> None:
        self.position = Cursor()

    def byte_index(self, layout: Layout) -> int:
        return byte_index(self.position, layout)

    def clamp(self, layout: Layout) -> None:
        """Re-clamp after the data length or the configuration changed."""

        self.position = clamp_cursor(self.position, layout)

    def advance_right(self, layout: Layout) -> EventResult:
        """
        Advance the cursor by one nibble.

        Returns IGNORED at the end of the row, so that the caller can move
        the focus out of the view instead.
        """

        x, y = self.position.x, self.position.y
        max_x = layout.max_x_in_row(y)
        if x >= max_x:
            return EventResult.IGNORED

        self.position = Cursor(x + 1, y)
        return EventResult.CONSUMED

    def move_left(self, layout: Layout) -> EventResult:
        if self.position.x == 0:
            return EventResult.IGNORED

        self.position = clamp_cursor(Cursor(self.position.x - 1, self.position.y), layout)
        return EventResult.CONSUMED

    def move_up(self, layout: Layout) -> EventResult:
        if self.position.y == 0:
            return EventResult.IGNORED

        self.position = clamp_cursor(Cursor(self.position.x, self.position.y - 1), layout)
        return EventResult.CONSUMED

    def move_down(self, layout: Layout) -> EventResult:
        """Move one row down, clamping x if the next row is shorter."""

        if self.position.y >= layout.last_row:
            return EventResult.IGNORED

        self.position = clamp_cursor(Cursor(self.position.x, self.position.y + 1), layout)
        return EventResult.CONSUMED

    def home(self, layout: Layout) -> EventResult:
        self.position = Cursor(0, self.position.y)
        return EventResult.CONSUMED

    def end(self, layout: Layout) -> EventResult:
        self.position = Cursor(layout.max_x_in_row(self.position.y), self.position.y)
        return EventResult.CONSUMED

    def jump_start(self, layout: Layout) -> EventResult:
        self.position = Cursor(0, 0)
        return EventResult.CONSUMED

    def jump_end(self, layout: Layout) -> EventResult:
        """Move to the last nibble of the last row."""

        last_row = layout.last_row
        self.position = Cursor(layout.max_x_in_row(last_row), last_row)
        return EventResult.CONSUMED

    def click(self, pos: Tuple[int, int], layout: Layout) -> EventResult:
        """Move to a view-relative pointer position."""

        self.position = visual_to_logical(pos, layout)
        return EventResult.CONSUMED
