"""Command pattern implementation for editor actions.

Each mode has its own key table; a key is only looked up in the table of
the mode the editor is currently in.
"""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """


class MovementCommand(EditorCommand):
    """Base class for selection movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        self._move(editor.state)

    @abstractmethod
    def _move(self, state):
        """Perform the movement."""


class LeftCellCommand(MovementCommand):
    def _move(self, state):
        state.move_left()


class RightCellCommand(MovementCommand):
    def _move(self, state):
        state.move_right()


class UpCellCommand(MovementCommand):
    def _move(self, state):
        state.move_up()


class DownCellCommand(MovementCommand):
    def _move(self, state):
        state.move_down()


class BeginEditCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.state.begin_edit()


class SaveCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.save()


class QuitCommand(EditorCommand):
    """Save if there are unsaved edits, then stop the event loop.

    A failed save propagates, so the loop keeps its running flag.
    """

    def execute(self, editor, key_event):
        if editor.state.dirty:
            editor.save()
        editor.running = False


class InsertTextCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.state.append_char(key_event.value)


class BackspaceCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.state.backspace()


class CommitEditCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.state.commit_edit()


class CancelEditCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.state.cancel_edit()


class CommandRegistry:
    """Registry for mapping key combinations to commands, per mode."""

    def __init__(self):
        self._navigation: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._editing: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement, with or without Shift held
        for key_type in (KeyType.SPECIAL, KeyType.SHIFT_SPECIAL):
            self.register_navigation((key_type, 'left'), LeftCellCommand())
            self.register_navigation((key_type, 'right'), RightCellCommand())
            self.register_navigation((key_type, 'up'), UpCellCommand())
            self.register_navigation((key_type, 'down'), DownCellCommand())

        self.register_navigation((KeyType.REGULAR, 'e'), BeginEditCommand())
        self.register_navigation((KeyType.REGULAR, 'w'), SaveCommand())
        self.register_navigation((KeyType.REGULAR, 'q'), QuitCommand())

        # Cell editing; printable characters are handled in execute()
        self.register_editing((KeyType.SPECIAL, 'enter'), CommitEditCommand())
        self.register_editing((KeyType.SPECIAL, 'escape'), CancelEditCommand())
        self.register_editing((KeyType.SPECIAL, 'backspace'), BackspaceCommand())

    def register_navigation(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key while navigating."""
        self._navigation[key] = command

    def register_editing(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key while editing a cell."""
        self._editing[key] = command

    def get_command(self, editing: bool, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Get the command bound to a key in the given mode."""
        table = self._editing if editing else self._navigation
        command = table.get((key_event.key_type, key_event.value))
        if command is None and editing and key_event.is_printable:
            return self._insert_text
        return command

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command was bound to the key
        """
        command = self.get_command(editor.state.editing, key_event)
        if command is None:
            return False
        command.execute(editor, key_event)
        return True
