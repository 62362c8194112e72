"""
UI package for the hex view widget and its curses host components.

This package implements the HexView widget with its input handling and
render projection, the CursesPrinter surface for drawing it into a curses
window and the InputHandler for feeding it curses key codes.
"""

from .view import HexView, View
from .render import Style, TextCanvas, project, replay
from .curses_printer import CursesPrinter
from .input_handler import InputHandler

__all__ = [
    'HexView',
    'View',
    'Style',
    'TextCanvas',
    'project',
    'replay',
    'CursesPrinter',
    'InputHandler',
]
