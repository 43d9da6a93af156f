"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import select
import sys
from collections import deque
from typing import Optional

import blessed
from curtsies import Input
from curtsies.events import PasteEvent

from .highlighter import Color

logger = logging.getLogger(__name__)


class TerminalError(Exception):
    """A drawing primitive or size query failed."""


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[Input] = None
        # Keys unpacked from a paste, handed out one per get_key call
        self._pending_keys: deque = deque()

    def setup(self):
        """Enter fullscreen mode and start reading keys."""
        self._emit(self.term.enter_fullscreen + self.term.clear)
        self.flush()
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                self._curtsies_input = Input(keynames='curtsies')
                self._curtsies_input.__enter__()
            except (OSError, ValueError) as e:
                self._curtsies_input = None
                self.cleanup()
                raise TerminalError(f"cannot read keyboard input: {e}") from e

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except (OSError, ValueError) as e:
                # Teardown must still leave fullscreen below
                logger.warning("Could not restore keyboard mode: %s", e)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            self.is_fullscreen = False
            try:
                print(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            except (OSError, ValueError) as e:
                logger.warning("Could not leave fullscreen: %s", e)

    def _emit(self, text: str):
        try:
            print(text, end='')
        except (OSError, ValueError) as e:
            raise TerminalError(f"write failed: {e}") from e

    def clear_screen(self):
        """Clear the entire screen."""
        self._emit(self.term.home + self.term.clear)

    def move_cursor(self, column: int, row: int):
        """Move the physical cursor; blessed takes (row, column)."""
        self._emit(self.term.move(row, column))

    def set_colors(self, foreground: Color, background: Color = Color.RESET):
        """Select colors for the text written next."""
        seq = self.term.normal
        if foreground is not Color.RESET:
            seq += getattr(self.term, foreground.value)
        if background is not Color.RESET:
            seq += getattr(self.term, 'on_' + background.value)
        self._emit(seq)

    def write(self, text: str):
        """Write text at the current cursor position."""
        self._emit(text)

    def flush(self):
        """Flush pending output to the terminal."""
        try:
            sys.stdout.flush()
        except (OSError, ValueError) as e:
            raise TerminalError(f"flush failed: {e}") from e

    def size(self) -> tuple[int, int]:
        """Return (width, height) of the terminal."""
        try:
            width, height = self.term.width, self.term.height
        except (OSError, ValueError) as e:
            raise TerminalError(f"cannot query terminal size: {e}") from e
        if not width or not height:
            raise TerminalError("cannot query terminal size")
        return width, height

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing could be read.
        """
        if self._pending_keys:
            return self._pending_keys.popleft()
        if self._curtsies_input is None:
            return None
        try:
            if timeout is not None:
                r, _, _ = select.select([sys.stdin], [], [], float(timeout))
                if not r:
                    return None
            evt = next(self._curtsies_input)
        except (OSError, ValueError, StopIteration) as e:
            # A failed read is just "no key this time"
            logger.debug("Key read failed: %s", e)
            return None
        if isinstance(evt, PasteEvent):
            # Fast typing and pastes arrive bundled; replay them as single keys
            self._pending_keys.extend(str(e) for e in evt.events)
            return self._pending_keys.popleft() if self._pending_keys else None
        return str(evt)
