"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .constants import EditorConstants
from .keyboard import KeyType

if TYPE_CHECKING:
    from .model import TextModel
    from .keyboard import KeyEvent


class ProcessResult(Enum):
    """Whether the session goes on after an event."""
    CONTINUE = "continue"
    QUIT = "quit"


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, model: 'TextModel', key_event: 'KeyEvent') -> ProcessResult:
        """Execute the command.

        Args:
            model: Document to act on
            key_event: The key event that triggered this command

        Returns:
            ProcessResult.QUIT to end the session, CONTINUE otherwise
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, model: 'TextModel', key_event: 'KeyEvent') -> ProcessResult:
        self._move(model)
        return ProcessResult.CONTINUE

    @abstractmethod
    def _move(self, model: 'TextModel'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, model):
        model.left_char()


class RightCharCommand(MovementCommand):
    def _move(self, model):
        model.right_char()


class UpLineCommand(MovementCommand):
    def _move(self, model):
        model.move_up()


class DownLineCommand(MovementCommand):
    def _move(self, model):
        model.move_down()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, model: 'TextModel', key_event: 'KeyEvent') -> ProcessResult:
        self._edit(model, key_event)
        return ProcessResult.CONTINUE

    @abstractmethod
    def _edit(self, model: 'TextModel', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, model, key_event):
        model.backspace()


class InsertNewlineCommand(EditCommand):
    def _edit(self, model, key_event):
        model.insert_newline()


class InsertTextCommand(EditCommand):
    def _edit(self, model, key_event):
        for char in key_event.value:
            if char != '\n':
                model.insert_char(char)


class QuitCommand(EditorCommand):
    def execute(self, model, key_event):
        return ProcessResult.QUIT


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.SPECIAL, EditorConstants.QUIT_KEY), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, model: 'TextModel', key_event: 'KeyEvent') -> ProcessResult:
        """Execute the command for the given key event.

        Unbound keys other than regular characters are ignored.
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(model, key_event)

        if key_event.key_type == KeyType.REGULAR:
            return self._insert_text.execute(model, key_event)

        return ProcessResult.CONTINUE


DEFAULT_REGISTRY = CommandRegistry()


def process(model: 'TextModel', key_event: 'KeyEvent',
            registry: Optional[CommandRegistry] = None) -> ProcessResult:
    """Apply one key event to the model; default key bindings unless a registry is given."""
    return (registry or DEFAULT_REGISTRY).execute(model, key_event)
