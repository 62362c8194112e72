"""
Utility functions for plain text hex dumps.
"""

from typing import List

from pygments import highlight
from pygments.formatters.terminal import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

from ..ui.render import TextCanvas, replay
from ..ui.view import HexView


def dump_lines(view: HexView) -> List[str]:
    """Render a view into text lines, with trailing blanks removed."""

    width, height = view.required_size()
    canvas = TextCanvas(width, height)
    replay(view.render(), canvas)

    return canvas.lines()


def dump_text(view: HexView) -> str:
    return '\n'.join(dump_lines(view)) + '\n'


def colorize_dump(text: str) -> str:
    """Color a dump for a terminal with the Pygments hexdump lexer."""

    return highlight(text, HexdumpLexer(), TerminalFormatter())
