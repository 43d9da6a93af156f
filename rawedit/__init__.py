"""rawedit - a minimal terminal text editor with flat syntax highlighting."""

from .model import TextModel, CursorPosition
from .commands import ProcessResult, process
from .highlighter import Color, SyntaxHighlighter, highlight
from .view import TerminalRenderer

__all__ = [
    'TextModel',
    'CursorPosition',
    'ProcessResult',
    'process',
    'Color',
    'SyntaxHighlighter',
    'highlight',
    'TerminalRenderer',
]
