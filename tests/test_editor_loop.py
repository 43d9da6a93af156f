"""Tests for the editor main loop: read, process, highlight, render."""

import pytest
from unittest.mock import MagicMock
from rawedit.editor import Editor
from rawedit.highlighter import Color
from rawedit.model import CursorPosition
from rawedit.terminal import TerminalError


class FakeTerminal:
    """Terminal stand-in feeding keys from a queue and counting frames."""

    def __init__(self, keys, width=80, height=24):
        self.term = MagicMock()
        self._keys = list(keys)
        self.width = width
        self.height = height
        self.frames = 0
        self.setup_called = False
        self.cleanup_called = False
        self.written = []

    def setup(self):
        self.setup_called = True

    def cleanup(self):
        self.cleanup_called = True

    def get_key(self, timeout=None):
        assert self._keys, "editor kept reading after quit"
        return self._keys.pop(0)

    def size(self):
        return self.width, self.height

    def clear_screen(self):
        self.frames += 1

    def move_cursor(self, column, row):
        pass

    def set_colors(self, foreground, background=Color.RESET):
        pass

    def write(self, text):
        self.written.append(text)

    def flush(self):
        pass


def test_typing_session_until_escape():
    terminal = FakeTerminal(['x', 'y', 'z', '<LEFT>', '<LEFT>', '<BACKSPACE>', '<ESC>'])
    editor = Editor(terminal)
    editor.run()
    assert editor.model.lines == ["yz"]
    assert editor.model.cursor_position == CursorPosition(0, 0)
    assert terminal.setup_called
    assert terminal.cleanup_called
    assert editor.running is False
    terminal.term.raw.assert_called_once()


def test_one_frame_per_event_and_none_after_quit():
    terminal = FakeTerminal(['a', '<Ctrl-j>', '<ESC>'])
    Editor(terminal).run()
    # initial frame + 'a' + enter; quitting draws nothing
    assert terminal.frames == 3


def test_failed_read_still_redraws():
    terminal = FakeTerminal(['a', None, None, '<ESC>'])
    editor = Editor(terminal)
    editor.run()
    assert terminal.frames == 4
    assert editor.model.lines == ["a"]


def test_highlight_runs_before_render():
    terminal = FakeTerminal(['"', 'q', '<ESC>'])
    editor = Editor(terminal)
    editor.run()
    assert editor.highlighter.color_buffer == [Color.STRING, Color.STRING]


def test_draw_failure_is_fatal_and_restores_terminal():
    class BrokenTerminal(FakeTerminal):
        def size(self):
            raise TerminalError("cannot query terminal size")

    terminal = BrokenTerminal(['a', '<ESC>'])
    with pytest.raises(TerminalError):
        Editor(terminal).run()
    assert terminal.cleanup_called


def test_handle_key_event_reports_quit():
    from rawedit.commands import ProcessResult
    from rawedit.keyboard import KeyEvent, KeyType
    editor = Editor(FakeTerminal([]))
    editor.running = True
    result = editor._handle_key_event(KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='<ESC>'))
    assert result is ProcessResult.QUIT
    assert editor.running is False


def test_loop_applies_keys_through_process():
    from unittest.mock import patch
    from rawedit import commands
    terminal = FakeTerminal(['a', '<ESC>'])
    editor = Editor(terminal)
    with patch('rawedit.editor.process', wraps=commands.process) as wrapped:
        editor.run()
    assert wrapped.call_count == 2
    model, event, registry = wrapped.call_args_list[0].args
    assert model is editor.model
    assert event.value == 'a'
    assert registry is editor.command_registry
