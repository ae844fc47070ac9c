"""Cursor, mode and dirty tracking for the grid editor.

The editor is always in exactly one of two modes. ``Navigating`` carries no
data; ``Editing`` carries the target cell and the text typed so far, so an
edit buffer cannot exist outside of editing.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .model import Grid

logger = logging.getLogger(__name__)


@dataclass
class Cursor:
    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class Navigating:
    """Moving the selection around the grid."""


@dataclass
class Editing:
    """Typing into the buffer for one cell."""
    row: int
    col: int
    buffer: str = ""


Mode = Union[Navigating, Editing]


class GridState:
    """Selection and edit state machine over a Grid."""

    grid: Grid
    cursor: Cursor
    mode: Mode
    dirty: bool

    def __init__(self, grid: Grid):
        self.grid = grid
        self.cursor = Cursor()
        self.mode = Navigating()
        self.dirty = False

    @property
    def editing(self) -> bool:
        return isinstance(self.mode, Editing)

    # --- Navigation ---

    def move_left(self):
        if self.cursor.col > 0:
            self.cursor.col -= 1

    def move_right(self):
        if self.cursor.col + 1 < self.grid.width():
            self.cursor.col += 1

    def move_up(self):
        if self.cursor.row > 0:
            self.cursor.row -= 1
            self._clamp_col()

    def move_down(self):
        if self.cursor.row + 1 < self.grid.height():
            self.cursor.row += 1
            self._clamp_col()

    def _clamp_col(self):
        """Keep the column inside the current row; a zero-length row clamps to 0."""
        last = max(self.grid.row_length(self.cursor.row) - 1, 0)
        self.cursor.col = min(self.cursor.col, last)

    # --- Editing ---

    def begin_edit(self):
        row, col = self.cursor.row, self.cursor.col
        self.grid.ensure(row, col)
        self.mode = Editing(row, col, self.grid.get(row, col))
        logger.debug("Editing cell (%d, %d)", row, col)

    def append_char(self, char: str):
        if isinstance(self.mode, Editing):
            self.mode.buffer += char

    def backspace(self):
        if isinstance(self.mode, Editing):
            self.mode.buffer = self.mode.buffer[:-1]

    def commit_edit(self):
        """Write the buffer into the grid and return to navigation."""
        mode = self.mode
        if not isinstance(mode, Editing):
            return
        self.grid.ensure(mode.row, mode.col)
        self.grid.set(mode.row, mode.col, mode.buffer)
        self.dirty = True
        self.mode = Navigating()
        logger.debug("Committed cell (%d, %d)", mode.row, mode.col)

    def cancel_edit(self):
        if isinstance(self.mode, Editing):
            logger.debug("Cancelled edit of cell (%d, %d)", self.mode.row, self.mode.col)
        self.mode = Navigating()

    def mark_saved(self):
        self.dirty = False
