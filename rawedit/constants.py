"""Constants and configuration for the rawedit editor."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


class EditorConstants:
    """Central configuration constants for the editor."""

    # Layout
    GUTTER_WIDTH = 2  # Text starts at this column; line numbers live left of it
    STATUS_LINE_OFFSET = 64  # Status line starts this many columns from the right edge
    STATUS_LINE_FORMAT = "Terminal Size: {width} {height} lines: {lines} Chars: {chars}"

    # Keys
    QUIT_KEY = "escape"

    # Environment
    DEBUG_ENV_VAR = "RAWEDIT_DEBUG"  # Full tracebacks and DEBUG log level
    LOG_FILE_ENV_VAR = "RAWEDIT_LOG"  # Optional log file path

    # Messages
    FATAL_ERROR_MESSAGE = "rawedit: terminal error: {}"


@dataclass
class DebugSettings:
    """Diagnostics switches read from the environment."""
    debug: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "DebugSettings":
        env = os.environ if environ is None else environ
        flag = env.get(EditorConstants.DEBUG_ENV_VAR, "")
        return cls(
            debug=flag not in ("", "0"),
            log_file=env.get(EditorConstants.LOG_FILE_ENV_VAR) or None,
        )
