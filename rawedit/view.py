"""Full-screen renderer for the document."""

from typing import Sequence
from .constants import EditorConstants
from .highlighter import Color
from .model import TextModel


def status_text(width: int, height: int, model: TextModel) -> str:
    return EditorConstants.STATUS_LINE_FORMAT.format(
        width=width, height=height, lines=model.line_count, chars=model.char_count())


class TerminalRenderer:
    """Repaints the whole screen from the model and its color tags.

    Every frame clears the screen, draws each line behind a line-number
    gutter, writes the status line on the bottom row and finally puts the
    physical cursor on the insertion point.
    """

    def __init__(self, terminal):
        self.terminal = terminal

    def render(self, model: TextModel, colors: Sequence[Color]):
        """Draw one frame.

        Raises TerminalError when the terminal cannot be queried or written.
        """
        assert len(colors) == model.char_count(), "color tags out of sync with document"
        term = self.terminal
        gutter = EditorConstants.GUTTER_WIDTH
        width, height = term.size()
        status_row = height - 1

        term.clear_screen()

        c = 0
        for row, line in enumerate(model.lines):
            if row >= status_row:
                break
            term.move_cursor(0, row)
            term.set_colors(Color.RESET)
            term.write(f"{row} ")
            self._draw_line(line, row, colors[c:c + len(line)], gutter)
            c += len(line)

        term.move_cursor(max(0, width - EditorConstants.STATUS_LINE_OFFSET), status_row)
        term.set_colors(Color.RESET)
        term.write(status_text(width, height, model))

        pos = model.cursor_position
        term.move_cursor(pos.char_index + gutter, pos.line_index)
        term.flush()

    def _draw_line(self, line: str, row: int, colors: Sequence[Color], gutter: int):
        """Write a line one character at a time, switching color only when it changes."""
        term = self.terminal
        term.move_cursor(gutter, row)
        active = Color.RESET
        for char, color in zip(line, colors):
            if color is not active:
                term.set_colors(color)
                active = color
            term.write(char)
        if active is not Color.RESET:
            term.set_colors(Color.RESET)
