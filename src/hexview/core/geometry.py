"""
Grid geometry of the hex view.

Every function here is a pure function of the data length and the
configuration. Nothing is cached; a Layout is cheap to rebuild whenever the
data or the configuration changed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .config import HexViewConfig


class Field(Enum):
    """The horizontal fields of the view, left to right."""

    ADDR = "addr"
    ADDR_SEP = "addr_sep"
    HEX = "hex"
    ASCII_SEP = "ascii_sep"
    ASCII = "ascii"


@dataclass(frozen=True)
class Region:
    """A clipped rectangle of the view reserved for one field."""

    field: Field
    x: int
    width: int
    height: int


def elements_in_row(data_len: int, row: int, per_line: int) -> int:
    """Number of bytes occupying a row, 0 for rows beyond the data."""

    return min(max(data_len - per_line * row, 0), per_line)


def max_x_in_row(data_len: int, row: int, per_line: int) -> int:
    """Highest nibble column in a row. An empty row still reports column 0."""

    return max(elements_in_row(data_len, row, per_line) * 2 - 1, 0)


def rows_needed(data_len: int, per_line: int) -> int:
    """Number of rows to display the data. An empty buffer occupies one row."""

    if data_len == 0:
        return 1

    return -(-data_len // per_line)


def addr_digit_width(data_len: int, start_addr: int = 0, override: int = 0) -> int:
    """
    Count the hex digits needed so that all address labels have equal width.

    E.g. 2 digits are needed for 20 elements (0x14), but only 1 for 10 (0xA).

    Args:
        data_len (int): Length of the data
        start_addr (int): Address of the first byte
        override (int): Minimum width, 0 for none

    Returns:
        int: Number of digits, ceil(log16(data_len + start_addr)) or the override
    """

    if data_len <= 1:
        return 1

    end = data_len + start_addr
    digits = 0
    while 16 ** digits < end:
        digits += 1

    return max(digits, override)


def group_offset(x: int, bytes_per_group: int, separator_len: int) -> int:
    """On-screen shift caused by the group separators left of nibble column x."""

    return (x // (2 * bytes_per_group)) * separator_len


def hex_field_width(config: HexViewConfig) -> int:
    """Width of the hex field, without a trailing group separator."""

    sep_len = len(config.group_separator)
    return (2 * config.bytes_per_group + sep_len) * config.groups_per_line - sep_len


class Layout:
    """Geometry of a view for one data length and one configuration."""

    def __init__(self, data_len: int, config: HexViewConfig) -> None:
        self.data_len = data_len
        self.config = config
        self.rows = rows_needed(data_len, config.bytes_per_line)
        self.addr_digits = addr_digit_width(data_len, config.start_addr, config.addr_width)

    @property
    def last_row(self) -> int:
        return self.rows - 1

    def elements_in_row(self, row: int) -> int:
        return elements_in_row(self.data_len, row, self.config.bytes_per_line)

    def max_x_in_row(self, row: int) -> int:
        return max_x_in_row(self.data_len, row, self.config.bytes_per_line)

    def field_width(self, field: Field) -> int:
        """Get the number of characters a field occupies per row."""

        if field is Field.ADDR:
            return self.addr_digits
        if field is Field.ADDR_SEP:
            return len(self.config.addr_separator)
        if field is Field.HEX:
            return hex_field_width(self.config)
        if not self.config.show_ascii:
            return 0
        if field is Field.ASCII_SEP:
            return len(self.config.hex_ascii_separator)

        return self.config.bytes_per_line

    def fields(self) -> List[Field]:
        """Get the fields that are displayed, left to right."""

        fields = [Field.ADDR, Field.ADDR_SEP, Field.HEX]
        if self.config.show_ascii:
            fields.extend([Field.ASCII_SEP, Field.ASCII])

        return fields

    def regions(self) -> List[Region]:
        """Get the clipped region of every displayed field, left to right."""

        regions = []
        x = 0
        for field in self.fields():
            width = self.field_width(field)
            regions.append(Region(field, x, width, self.rows))
            x += width

        return regions

    def region(self, field: Field) -> Region:
        """Get the region of a single field."""

        for region in self.regions():
            if region.field is field:
                return region

        raise KeyError(f"Field {field.value} is not displayed")

    @property
    def hex_offset(self) -> int:
        """Column where the hex field starts."""

        return self.field_width(Field.ADDR) + self.field_width(Field.ADDR_SEP)

    def required_size(self) -> Tuple[int, int]:
        """Get the (width, height) the view needs to be drawn completely."""

        width = sum(self.field_width(field) for field in self.fields())
        return width, self.rows

    def cursor_offset(self, x: int) -> int:
        return group_offset(x, self.config.bytes_per_group, len(self.config.group_separator))

    def visual_x(self, x: int) -> int:
        """
        Convert a nibble column to a column inside the hex field.

        E.g. with one byte per group and a one character separator, column 5
        is drawn at 7, because two separators lie left of it.
        """

        return x + self.cursor_offset(x)

    def logical_x(self, column: int) -> int:
        """
        Convert a column inside the hex field to a nibble column.

        This is the exact inverse of visual_x. A column that hits a group
        separator resolves to the last nibble of the group left of it. The
        result is not clamped to the row.
        """

        nibbles = 2 * self.config.bytes_per_group
        stride = nibbles + len(self.config.group_separator)
        group, within = divmod(max(column, 0), stride)

        return group * nibbles + min(within, nibbles - 1)
