"""Flat lexical highlighter.

Classifies every character of the document into a display color. This is
not a tokenizer: there are no comments, escapes, keywords or multi-character
operators, only brackets, operators, digits and double-quoted strings.

String state is carried across line boundaries, so an unterminated quote
colors the following lines until the next quote character.
"""

import functools
from enum import Enum
from typing import Optional


class Color(Enum):
    """Display colors; values are the blessed capability names."""
    RESET = "normal"
    BRACKET = "blue"
    OPERATOR = "green"
    NUMBER = "magenta"
    STRING = "yellow"


BRACKETS = frozenset("()[]{}")
OPERATORS = frozenset("-+/*^%=")
DIGITS = frozenset("0123456789")
QUOTE = '"'


def classify(char: str, inside_string: bool) -> tuple[Color, bool]:
    """Color one character; returns (color, inside_string after it).

    Later rules win: brackets, then operators, then digits, then the quote
    (which toggles string state), then string state itself.
    """
    color = Color.RESET
    if char in BRACKETS:
        color = Color.BRACKET
    if char in OPERATORS:
        color = Color.OPERATOR
    if char in DIGITS:
        color = Color.NUMBER
    if char == QUOTE:
        inside_string = not inside_string
        color = Color.STRING
    if inside_string:
        color = Color.STRING
    return color, inside_string


def highlight_line(line: str, inside_string: bool = False) -> tuple[tuple[Color, ...], bool]:
    """Color one line starting from the given string state.

    Returns the colors and the string state at the end of the line.
    """
    colors = []
    for char in line:
        color, inside_string = classify(char, inside_string)
        colors.append(color)
    return tuple(colors), inside_string


def highlight(lines: list[str]) -> list[Color]:
    """Color a whole document, in document order with no line separators."""
    colors: list[Color] = []
    inside_string = False
    for line in lines:
        line_colors, inside_string = highlight_line(line, inside_string)
        colors.extend(line_colors)
    return colors


class SyntaxHighlighter:
    """Owns the color tag buffer and refreshes it from the document.

    The buffer always has one entry per character. When the character count
    changes it is resized first, new slots starting out as Color.RESET.

    With cache_size set, per-line results are memoized on
    (line text, string state entering the line), which keeps string leakage
    across lines exact.
    """

    def __init__(self, cache_size: Optional[int] = None):
        self.color_buffer: list[Color] = []
        if cache_size:
            self._highlight_line = functools.lru_cache(maxsize=cache_size)(highlight_line)
        else:
            self._highlight_line = highlight_line

    def _resize(self, characters_count: int):
        current = len(self.color_buffer)
        if current > characters_count:
            del self.color_buffer[characters_count:]
        elif current < characters_count:
            self.color_buffer.extend([Color.RESET] * (characters_count - current))

    def highlight(self, lines: list[str]) -> list[Color]:
        """Recompute the color buffer for the given lines and return it."""
        characters_count = sum(len(line) for line in lines)
        if len(self.color_buffer) != characters_count:
            self._resize(characters_count)

        c = 0
        inside_string = False
        for line in lines:
            line_colors, inside_string = self._highlight_line(line, inside_string)
            self.color_buffer[c:c + len(line_colors)] = line_colors
            c += len(line_colors)
        return self.color_buffer

    def cache_info(self):
        """lru_cache statistics, or None when caching is off."""
        info = getattr(self._highlight_line, 'cache_info', None)
        return info() if info else None
