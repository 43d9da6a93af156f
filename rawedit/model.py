from dataclasses import dataclass


@dataclass
class CursorPosition:
    line_index: int = 0
    char_index: int = 0


class TextModel:
    """The edited document: lines, cursor and remembered column.

    The document always holds at least one line and the cursor always
    points at a valid insertion point: ``line_index`` indexes ``lines``
    and ``0 <= char_index <= len(current_line)``.

    ``desired_char_index`` is the column the user last chose explicitly
    (horizontal moves, insertions, deletions). Vertical moves clamp to it
    without overwriting it, so passing through a short line does not
    forget the column.
    """

    lines: list[str]
    cursor_position: CursorPosition
    desired_char_index: int

    def __init__(self, lines=None):
        self.lines = list(lines) if lines else [""]
        self.cursor_position = CursorPosition()
        self.desired_char_index = 0

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_position.line_index]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def char_count(self) -> int:
        """Total number of characters in the document, line breaks excluded."""
        return sum(len(line) for line in self.lines)

    def check_invariants(self):
        """Raise AssertionError if the document or cursor is out of range."""
        assert self.lines, "document has no lines"
        pos = self.cursor_position
        assert 0 <= pos.line_index < len(self.lines), f"line_index {pos.line_index} out of range"
        assert 0 <= pos.char_index <= len(self.lines[pos.line_index]), \
            f"char_index {pos.char_index} out of range for line {pos.line_index}"

    def _set_char_index(self, char_index: int):
        """Move horizontally and remember the column."""
        self.cursor_position.char_index = char_index
        self.desired_char_index = char_index

    # --- Editing ---

    def insert_char(self, char: str):
        """Insert a single character at the cursor."""
        assert len(char) == 1 and char != '\n'
        li = self.cursor_position.line_index
        ci = self.cursor_position.char_index
        line = self.lines[li]
        self.lines[li] = line[:ci] + char + line[ci:]
        self._set_char_index(ci + 1)

    def insert_newline(self):
        """Split the current line at the cursor.

        Text before the cursor stays, text from the cursor onward moves to
        a new line inserted right after. Covers empty lines and the
        end-of-line case, where the new line is empty.
        """
        li = self.cursor_position.line_index
        ci = self.cursor_position.char_index
        line = self.lines[li]
        self.lines[li] = line[:ci]
        self.lines.insert(li + 1, line[ci:])
        self.cursor_position.line_index = li + 1
        self._set_char_index(0)

    def backspace(self):
        """Delete the character before the cursor or join with the previous line."""
        li = self.cursor_position.line_index
        ci = self.cursor_position.char_index
        if ci > 0:
            line = self.lines[li]
            self.lines[li] = line[:ci - 1] + line[ci:]
            self._set_char_index(ci - 1)
        elif li > 0:
            self._join_with_previous_line()

    def _join_with_previous_line(self):
        li = self.cursor_position.line_index
        assert li > 0
        removed = self.lines.pop(li)
        join_point = len(self.lines[li - 1])
        self.lines[li - 1] += removed
        self.cursor_position.line_index = li - 1
        self._set_char_index(join_point)

    # --- Horizontal movement ---

    def left_char(self):
        li = self.cursor_position.line_index
        ci = self.cursor_position.char_index
        if ci > 0:
            self._set_char_index(ci - 1)
        elif li > 0:
            self.cursor_position.line_index = li - 1
            self._set_char_index(len(self.lines[li - 1]))

    def right_char(self):
        li = self.cursor_position.line_index
        ci = self.cursor_position.char_index
        if ci < len(self.current_line):
            self._set_char_index(ci + 1)
        elif li < len(self.lines) - 1:
            self.cursor_position.line_index = li + 1
            self._set_char_index(0)

    # --- Vertical movement (keeps desired_char_index) ---

    def move_up(self):
        if self.cursor_position.line_index > 0:
            self._move_to_line(self.cursor_position.line_index - 1)

    def move_down(self):
        if self.cursor_position.line_index < len(self.lines) - 1:
            self._move_to_line(self.cursor_position.line_index + 1)

    def _move_to_line(self, line_index: int):
        self.cursor_position.line_index = line_index
        self.cursor_position.char_index = min(self.desired_char_index, len(self.lines[line_index]))
