"""
Utility package for hex view support functions.
"""

from .hex_utils import (
    dump_lines,
    dump_text,
    colorize_dump
)
from .logger import setup_logging

__all__ = [
    'dump_lines',
    'dump_text',
    'colorize_dump',
    'setup_logging'
]
