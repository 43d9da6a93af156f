"""Main editor controller."""

import logging
from typing import Optional
from .terminal import TerminalInterface
from .model import TextModel
from .view import TerminalRenderer
from .keyboard import KeyboardHandler, KeyEvent
from .highlighter import SyntaxHighlighter
from .commands import CommandRegistry, ProcessResult, process

logger = logging.getLogger(__name__)


class Editor:
    """Owns the document and drives read, process, highlight, render."""

    def __init__(self, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.model = TextModel()
        self.highlighter = SyntaxHighlighter()
        self.renderer = TerminalRenderer(self.terminal)
        self.command_registry = CommandRegistry()
        self.running = False

    def run(self):
        """Run the main editor loop until the quit key is pressed.

        TerminalError from drawing propagates after the terminal has been
        restored.
        """
        with self.terminal.term.raw():
            try:
                self.terminal.setup()
                self.running = True
                self._draw()
                while self.running:
                    key_event = self.keyboard.get_key_event()
                    if key_event is not None:
                        self._handle_key_event(key_event)
                        if not self.running:
                            break
                    self._draw()
            finally:
                self.running = False
                self.terminal.cleanup()

    def _handle_key_event(self, key_event: KeyEvent) -> ProcessResult:
        """Apply a key event to the model; stops the loop on quit."""
        result = process(self.model, key_event, self.command_registry)
        if result is ProcessResult.QUIT:
            logger.debug("Quit requested")
            self.running = False
        self.model.check_invariants()
        return result

    def _draw(self):
        """Highlight the document and repaint the screen."""
        colors = self.highlighter.highlight(self.model.lines)
        self.renderer.render(self.model, colors)
