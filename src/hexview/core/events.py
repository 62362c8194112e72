"""
Host independent input events and the verdict a view returns for them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class EventResult(Enum):
    """Whether a view used an event or left it to its surroundings."""

    CONSUMED = "consumed"
    IGNORED = "ignored"


class Key(Enum):
    """Navigation keys understood by the view."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True)
class KeyEvent:
    """A navigation key. shift is the jump modifier for Home and End."""

    key: Key
    shift: bool = False


@dataclass(frozen=True)
class CharEvent:
    """A typed character."""

    char: str


@dataclass(frozen=True)
class MouseEvent:
    """
    A pointer press.

    Attributes:
        position: Absolute (column, row) of the press.
        offset: Absolute (column, row) of the view's top left corner.
    """

    position: Tuple[int, int]
    offset: Tuple[int, int] = (0, 0)

    def relative(self) -> Optional[Tuple[int, int]]:
        """Get the position relative to the view, None if it lies above or left of it."""

        col = self.position[0] - self.offset[0]
        row = self.position[1] - self.offset[1]
        if col < 0 or row < 0:
            return None

        return col, row


Event = Union[KeyEvent, CharEvent, MouseEvent]
