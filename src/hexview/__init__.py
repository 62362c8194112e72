"""
HexView - an interactive hex dump view and editor for curses.
"""

from .core import (
    CharEvent,
    Cursor,
    DisplayState,
    EventResult,
    HexViewConfig,
    Key,
    KeyEvent,
    MouseEvent,
)
from .ui import HexView, View

__version__ = "0.1.0"

__all__ = [
    'CharEvent',
    'Cursor',
    'DisplayState',
    'EventResult',
    'HexViewConfig',
    'Key',
    'KeyEvent',
    'MouseEvent',
    'HexView',
    'View',
]
