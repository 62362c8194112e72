"""
ASCII character classification for the 0-127 range.

Only this fixed table is consulted; neither the locale nor Unicode
classification has any influence on what the ASCII field shows.
"""

from enum import Enum
from typing import Final, Optional, Tuple


class CharClass(Enum):
    """Class of an ASCII code point."""

    CONTROL = "C"
    CONTROL_WHITESPACE = "Cw"
    WHITESPACE = "W"
    DIGIT = "D"
    LOWER = "L"
    LOWER_HEX = "Lx"
    UPPER = "U"
    UPPER_HEX = "Ux"
    PUNCTUATION = "P"


_TABLE_ROWS: Final[Tuple[str, ...]] = (
    # _0 _1 _2 _3 _4 _5 _6 _7 _8 _9 _a _b _c _d _e _f
    "C  C  C  C  C  C  C  C  C  Cw Cw C  Cw Cw C  C",   # 0_
    "C  C  C  C  C  C  C  C  C  C  C  C  C  C  C  C",   # 1_
    "W  P  P  P  P  P  P  P  P  P  P  P  P  P  P  P",   # 2_
    "D  D  D  D  D  D  D  D  D  D  P  P  P  P  P  P",   # 3_
    "P  Ux Ux Ux Ux Ux Ux U  U  U  U  U  U  U  U  U",   # 4_
    "U  U  U  U  U  U  U  U  U  U  U  P  P  P  P  P",   # 5_
    "P  Lx Lx Lx Lx Lx Lx L  L  L  L  L  L  L  L  L",   # 6_
    "L  L  L  L  L  L  L  L  L  L  L  P  P  P  P  C",   # 7_
)

ASCII_CHARACTER_CLASS: Final[Tuple[CharClass, ...]] = tuple(
    CharClass(code) for row in _TABLE_ROWS for code in row.split()
)

GRAPHIC_CLASSES: Final[frozenset] = frozenset({
    CharClass.DIGIT,
    CharClass.LOWER,
    CharClass.LOWER_HEX,
    CharClass.UPPER,
    CharClass.UPPER_HEX,
    CharClass.PUNCTUATION,
})

HEX_DIGIT_CLASSES: Final[frozenset] = frozenset({
    CharClass.DIGIT,
    CharClass.LOWER_HEX,
    CharClass.UPPER_HEX,
})

PLACEHOLDER: Final[str] = "."


def char_class(byte: int) -> Optional[CharClass]:
    """Get the class of a byte, or None for bytes outside the ASCII range."""

    if 0 <= byte < len(ASCII_CHARACTER_CLASS):
        return ASCII_CHARACTER_CLASS[byte]

    return None


def is_graphic(byte: int) -> bool:
    """Check if a byte is a visible ASCII glyph (0x21 '!' to 0x7E '~')."""

    return char_class(byte) in GRAPHIC_CLASSES


def is_hex_digit(byte: int) -> bool:
    """Check if a byte is an ASCII hex digit (0-9, a-f, A-F)."""

    return char_class(byte) in HEX_DIGIT_CLASSES


def make_printable(byte: int) -> str:
    """
    Map a byte to the glyph shown in the ASCII field.

    Args:
        byte (int): Byte value

    Returns:
        str: The character itself if it is graphic, the placeholder otherwise
    """

    if is_graphic(byte):
        return chr(byte)

    return PLACEHOLDER
