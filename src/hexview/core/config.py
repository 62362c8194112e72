"""
Configuration and display state for the hex view.
"""

from dataclasses import dataclass, replace as dc_replace
from enum import IntEnum
from typing import Any


class DisplayState(IntEnum):
    """Controls the possible interactions with a hex view."""

    DISABLED = 0  # neither focusable nor editable
    ENABLED = 1  # focusable, cursor can move, data is read-only
    EDITABLE = 2  # focusable and editable


@dataclass(frozen=True)
class HexViewConfig:
    """
    Layout parameters of a hex view.

    Attributes:
        bytes_per_line: Number of bytes per row. Must be greater than 0.
        bytes_per_group: Number of bytes rendered contiguously before the next
            group separator. Must be greater than 0 and not exceed bytes_per_line.
        group_separator: Separator between two hex groups.
        addr_separator: Separator between the address label and the hex field.
        hex_ascii_separator: Separator between the hex and the ASCII field.
        show_ascii: Whether the ASCII field (and its separator) is shown.
        start_addr: Address of the first byte.
        addr_width: Minimum number of address digits, 0 computes it automatically.
    """

    bytes_per_line: int = 16
    bytes_per_group: int = 1
    group_separator: str = " "
    addr_separator: str = ": "
    hex_ascii_separator: str = " | "
    show_ascii: bool = True
    start_addr: int = 0
    addr_width: int = 0

    def __post_init__(self) -> None:
        if self.bytes_per_line <= 0:
            raise ValueError(f"bytes_per_line must be greater than 0, got {self.bytes_per_line}")

        if not 0 < self.bytes_per_group <= self.bytes_per_line:
            raise ValueError(
                f"bytes_per_group must be between 1 and bytes_per_line ({self.bytes_per_line}), "
                f"got {self.bytes_per_group}"
            )

        if self.start_addr < 0:
            raise ValueError(f"start_addr must not be negative, got {self.start_addr}")

        if self.addr_width < 0:
            raise ValueError(f"addr_width must not be negative, got {self.addr_width}")

    @property
    def groups_per_line(self) -> int:
        """Number of groups in a full row. The last group may be short."""

        return -(-self.bytes_per_line // self.bytes_per_group)

    def replace(self, **changes: Any) -> 'HexViewConfig':
        """Return a validated copy with the given fields changed."""

        return dc_replace(self, **changes)
