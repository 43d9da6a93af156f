"""Tests for the command-line entry point and debug settings."""

import logging
import pytest
from unittest.mock import patch
from rawedit import __main__ as entry
from rawedit.constants import DebugSettings
from rawedit.terminal import TerminalError


def test_debug_settings_from_environ():
    assert DebugSettings.from_environ({}) == DebugSettings(debug=False, log_file=None)
    assert DebugSettings.from_environ({'RAWEDIT_DEBUG': '0'}).debug is False
    settings = DebugSettings.from_environ({'RAWEDIT_DEBUG': '1', 'RAWEDIT_LOG': '/tmp/x.log'})
    assert settings.debug is True
    assert settings.log_file == '/tmp/x.log'


def test_logging_left_alone_without_log_file():
    with patch('rawedit.__main__.logging.basicConfig') as basic:
        entry.configure_logging(DebugSettings(debug=True))
    basic.assert_not_called()


def test_logging_configured_with_log_file(tmp_path):
    log_file = str(tmp_path / 'rawedit.log')
    with patch('rawedit.__main__.logging.basicConfig') as basic:
        entry.configure_logging(DebugSettings(debug=True, log_file=log_file))
    kwargs = basic.call_args.kwargs
    assert kwargs['filename'] == log_file
    assert kwargs['level'] == logging.DEBUG


def test_main_runs_editor(monkeypatch):
    monkeypatch.delenv('RAWEDIT_LOG', raising=False)
    with patch('rawedit.editor.TerminalInterface'), patch('rawedit.editor.Editor.run') as run:
        entry.main()
    run.assert_called_once()


def test_main_exits_with_diagnostic_on_terminal_error(monkeypatch, capsys):
    monkeypatch.delenv('RAWEDIT_LOG', raising=False)
    monkeypatch.setenv('RAWEDIT_DEBUG', '1')
    with patch('rawedit.editor.TerminalInterface'), \
            patch('rawedit.editor.Editor.run', side_effect=TerminalError("write failed: gone")):
        with pytest.raises(SystemExit) as excinfo:
            entry.main()
    assert 'write failed: gone' in str(excinfo.value.code)
    assert 'Traceback' in capsys.readouterr().err
