"""
Core package for the hex view layout and cursor engine.

This package implements everything that does not depend on a terminal: the
configuration, the ASCII classification, the grid geometry, the cursor
model and the host independent input events.
"""

from .config import DisplayState, HexViewConfig
from .cursor import Cursor, CursorModel, element_under, visual_to_logical
from .events import CharEvent, EventResult, Key, KeyEvent, MouseEvent
from .geometry import Field, Layout, Region

__all__ = [
    'DisplayState',
    'HexViewConfig',
    'Cursor',
    'CursorModel',
    'element_under',
    'visual_to_logical',
    'CharEvent',
    'EventResult',
    'Key',
    'KeyEvent',
    'MouseEvent',
    'Field',
    'Layout',
    'Region',
]
