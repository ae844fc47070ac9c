"""Main editor controller for the grid editor."""

import logging
import signal
from typing import Optional

from .commands import CommandRegistry
from .constants import GridConstants
from .csv_file import load_grid, save_grid
from .keyboard import KeyboardHandler, KeyEvent
from .model import Grid
from .state import GridState
from .terminal import TerminalInterface
from .view import project_frame

logger = logging.getLogger(__name__)

# Signals that end the process; they are turned into SystemExit so the
# terminal is restored on the way out.
TERMINATING_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class Editor:
    """Main grid editor application controller."""

    def __init__(self, file_path: str, grid: Optional[Grid] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.file_path = file_path
        self.state = GridState(grid if grid is not None else Grid())
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()  # Command pattern for key handling
        self.running = False

    @classmethod
    def load_file(cls, file_path: str, terminal: Optional[TerminalInterface] = None) -> 'Editor':
        """Create an editor for the grid stored in file_path.

        Raises:
            OpenError, ParseError: the file cannot be loaded.
        """
        return cls(file_path, load_grid(file_path), terminal=terminal)

    def save(self) -> None:
        """Write the grid to its file and clear the dirty flag.

        Raises:
            SaveError: the dirty flag is left set.
        """
        save_grid(self.file_path, self.state.grid)
        self.state.mark_saved()

    def _handle_terminating_signal(self, signum, frame):
        del frame  # Unused
        logger.info("Received signal %d, shutting down", signum)
        raise SystemExit(128 + signum)

    def run(self):
        """Run the main editor loop.

        The terminal is restored on every way out of the loop: quitting,
        an error such as a failed save, or a terminating signal.
        """
        original_handlers = {
            signum: signal.signal(signum, self._handle_terminating_signal)
            for signum in TERMINATING_SIGNALS
        }
        self.running = True
        try:
            self.terminal.setup()
            while self.running:
                self._draw()
                key_event = self.keyboard.get_key_event(timeout=GridConstants.POLL_TIMEOUT)
                if key_event:
                    self._handle_key_event(key_event)
        finally:
            self.running = False
            for signum, handler in original_handlers.items():
                signal.signal(signum, handler)
            self.terminal.cleanup()

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.terminal.draw_frame(project_frame(self.state, self.file_path))

    def _handle_key_event(self, key_event: KeyEvent):
        """Dispatch a key to the command bound to it in the current mode."""
        if not self.command_registry.execute(self, key_event):
            logger.debug("Ignoring key %r", key_event.raw)
