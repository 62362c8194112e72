"""
Render projection of the hex view.

The projection describes what to draw as an ordered list of draw calls, each
bound to the clipped region of one field. Printers turn the calls into
output; the projection itself never touches a device.

The output looks as follows:

    addr: hexhex hexhex ... | ascii

The address is zero padded so that all labels have the same width, the hex
bytes are grouped by bytes_per_group and the ASCII field shows every graphic
character as itself and everything else as a dot.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Tuple, Union

from ..core.ascii import make_printable
from ..core.config import DisplayState
from ..core.cursor import Cursor, element_under
from ..core.geometry import Field, Layout, Region


class Style(Enum):
    """Visual style of a text run."""

    NORMAL = "normal"
    HIGHLIGHT = "highlight"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class TextCall:
    """Print text at a field-relative (column, row)."""

    region: Region
    pos: Tuple[int, int]
    text: str
    style: Style = Style.NORMAL


@dataclass(frozen=True)
class VLineCall:
    """Repeat text on height consecutive rows, starting at a field-relative position."""

    region: Region
    pos: Tuple[int, int]
    height: int
    text: str


DrawCall = Union[TextCall, VLineCall]


class Printer(Protocol):
    """A surface that can place text at absolute view cells."""

    def print(self, pos: Tuple[int, int], text: str, style: Style = Style.NORMAL) -> None:
        ...

    def print_vline(self, pos: Tuple[int, int], height: int, text: str) -> None:
        ...


def format_addr(addr: int, digits: int) -> str:
    """Format an address label, zero padded and uppercase."""

    return f"{addr:0{digits}X}"


def format_hex_row(row: Sequence[int], bytes_per_group: int, separator: str) -> str:
    """Format one row of bytes as uppercase hex, grouped and joined by the separator."""

    groups = []
    for start in range(0, len(row), bytes_per_group):
        groups.append(''.join(f"{b:02X}" for b in row[start:start + bytes_per_group]))

    return separator.join(groups)


def format_ascii_row(row: Sequence[int]) -> str:
    return ''.join(make_printable(b) for b in row)


def _rows(data: bytes, per_line: int) -> List[bytes]:
    return [data[i:i + per_line] for i in range(0, len(data), per_line)]


def project(data: bytes, layout: Layout, cursor: Cursor, state: DisplayState) -> List[DrawCall]:
    """
    Translate the view state into draw calls.

    Args:
        data (bytes): Buffer contents
        layout (Layout): Geometry for len(data) and the configuration
        cursor (Cursor): Current logical cursor
        state (DisplayState): Highlights are only emitted when not DISABLED

    Returns:
        List[DrawCall]: Calls ordered field by field, left to right, followed
        by the cursor highlights
    """

    config = layout.config
    regions: Dict[Field, Region] = {region.field: region for region in layout.regions()}
    rows = _rows(data, config.bytes_per_line)
    calls: List[DrawCall] = []

    addr = regions[Field.ADDR]
    for row in range(layout.rows):
        label = format_addr(config.start_addr + row * config.bytes_per_line, layout.addr_digits)
        calls.append(TextCall(addr, (0, row), label))

    calls.append(VLineCall(regions[Field.ADDR_SEP], (0, 0), layout.rows, config.addr_separator))

    hex_region = regions[Field.HEX]
    for i, row_data in enumerate(rows):
        text = format_hex_row(row_data, config.bytes_per_group, config.group_separator)
        calls.append(TextCall(hex_region, (0, i), text))

    if config.show_ascii:
        calls.append(VLineCall(regions[Field.ASCII_SEP], (0, 0), layout.rows, config.hex_ascii_separator))

        ascii_region = regions[Field.ASCII]
        for i, row_data in enumerate(rows):
            calls.append(TextCall(ascii_region, (0, i), format_ascii_row(row_data)))

    if state != DisplayState.DISABLED:
        calls.extend(_highlight_calls(data, layout, cursor, regions))

    return calls


def _highlight_calls(data: bytes, layout: Layout, cursor: Cursor,
                     regions: Dict[Field, Region]) -> List[DrawCall]:
    """Highlight the byte under the cursor in the hex field and its ASCII glyph."""

    elem = element_under(cursor, data, layout)
    if elem is None:
        return []

    high, low = f"{elem:02X}"
    hpos = layout.visual_x(cursor.x)
    if cursor.high_nibble:
        current, other, other_pos = high, low, hpos + 1
    else:
        current, other, other_pos = low, high, hpos - 1

    hex_region = regions[Field.HEX]
    calls: List[DrawCall] = [
        TextCall(hex_region, (hpos, cursor.y), current, Style.HIGHLIGHT),
        TextCall(hex_region, (other_pos, cursor.y), other, Style.SECONDARY),
    ]

    if Field.ASCII in regions:
        calls.append(TextCall(regions[Field.ASCII], (cursor.x // 2, cursor.y),
                              make_printable(elem), Style.HIGHLIGHT))

    return calls


def clip(region: Region, pos: Tuple[int, int], text: str) -> Optional[Tuple[Tuple[int, int], str]]:
    """
    Clip a field-relative text run to its region.

    Returns:
        The absolute position and the visible part of the text, or None if
        nothing of it is visible
    """

    col, row = pos
    if not 0 <= row < region.height:
        return None

    if col < 0:
        text = text[-col:]
        col = 0

    text = text[:max(region.width - col, 0)]
    if not text:
        return None

    return (region.x + col, row), text


def replay(calls: Sequence[DrawCall], printer: Printer) -> None:
    """Execute draw calls on a printer, clipping each one to its field."""

    for call in calls:
        if isinstance(call, VLineCall):
            height = min(call.height, call.region.height - call.pos[1])
            clipped = clip(call.region, call.pos, call.text)
            if clipped is None or height <= 0:
                continue

            pos, text = clipped
            printer.print_vline(pos, height, text)
            continue

        clipped = clip(call.region, call.pos, call.text)
        if clipped is None:
            continue

        pos, text = clipped
        printer.print(pos, text, call.style)


class TextCanvas:
    """An in-memory character grid implementing the Printer protocol."""

    def __init__(self, width: int, height: int, fill: str = ' ') -> None:
        self.width = width
        self.height = height
        self.cells: List[List[str]] = [[fill] * width for _ in range(height)]
        self.styles: List[List[Style]] = [[Style.NORMAL] * width for _ in range(height)]

    def print(self, pos: Tuple[int, int], text: str, style: Style = Style.NORMAL) -> None:
        x, y = pos
        if not 0 <= y < self.height:
            return

        for i, char in enumerate(text):
            if 0 <= x + i < self.width:
                self.cells[y][x + i] = char
                self.styles[y][x + i] = style

    def print_vline(self, pos: Tuple[int, int], height: int, text: str) -> None:
        x, y = pos
        for row in range(y, y + height):
            self.print((x, row), text)

    def style_at(self, col: int, row: int) -> Style:
        return self.styles[row][col]

    def lines(self) -> List[str]:
        """Get the rows of the canvas with trailing blanks removed."""

        return [''.join(row).rstrip() for row in self.cells]

    def __str__(self) -> str:
        return '\n'.join(self.lines())
