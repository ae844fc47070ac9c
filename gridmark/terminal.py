"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import termios
from typing import Optional

import blessed
from curtsies import Input
from curtsies.events import PasteEvent, SigIntEvent

from .constants import GridConstants
from .view import Frame, TableRegion, column_widths, visible_columns, visible_range

logger = logging.getLogger(__name__)

# Key name reported for Ctrl-C, which has no binding in either mode
SIGINT_KEY = '<Ctrl-c>'


def printable(text: str) -> str:
    """Replace line breaks and other control characters with spaces for display."""
    return ''.join(ch if ch.isprintable() else ' ' for ch in text)


class TerminalInterface:
    """Handles terminal I/O using Blessed and Curtsies.

    ``setup`` enters the alternate screen and raw keyboard input;
    ``cleanup`` undoes both and is safe to call more than once.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._pending_keys: list[str] = []
        # Virtual screen state for minimal updates
        self._last_lines: Optional[list[Optional[str]]] = None
        self._last_size: Optional[tuple[int, int]] = None

    def setup(self):
        """Enter fullscreen mode and raw keyboard input."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self.invalidate_frame()
        if self._input is None:
            # Ctrl-C arrives as an event instead of KeyboardInterrupt
            keyboard = Input(keynames='curtsies', sigint_event=True)
            keyboard.__enter__()
            self._input = keyboard
        logger.debug("Terminal set up")

    def cleanup(self):
        """Leave raw input, then fullscreen mode, and show the cursor again."""
        if self._input is not None:
            keyboard, self._input = self._input, None
            try:
                keyboard.__exit__(None, None, None)
            except (termios.error, OSError) as e:
                # Still leave the alternate screen below
                logger.warning("Could not restore terminal input mode: %s", e)
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
            logger.debug("Terminal restored")
        self._pending_keys.clear()

    def invalidate_frame(self) -> None:
        """Forget the last frame so the next draw repaints everything."""
        self._last_lines = None
        self._last_size = None

    def get_key(self, timeout: Optional[float] = None) -> Optional[str]:
        """Wait up to timeout seconds for a key.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            A curtsies key name such as 'a' or '<LEFT>', or None on timeout.
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._input is None:
            return None
        event = self._input.send(timeout)
        if event is None:
            return None
        if isinstance(event, SigIntEvent):
            return SIGINT_KEY
        if isinstance(event, PasteEvent):
            # Deliver pasted text one key at a time
            self._pending_keys.extend(event.events)
            return self._pending_keys.pop(0) if self._pending_keys else None
        return str(event)

    # --- Drawing ---

    def draw_frame(self, frame: Frame) -> None:
        """Draw a frame, rewriting only lines that changed since the last one."""
        lines = self.compose_frame(frame, self.width, self.height)
        size = (self.width, self.height)
        if self._last_lines is None or self._last_size != size:
            print(self.term.home + self.term.clear, end='')
            self._last_lines = [None] * len(lines)
            self._last_size = size

        out = []
        for y, line in enumerate(lines):
            if self._last_lines[y] != line:
                out.append(self.term.move(y, 0) + line)
                self._last_lines[y] = line
        print(''.join(out), end='', flush=True)

    def compose_frame(self, frame: Frame, width: int, height: int) -> list[str]:
        """Lay out the table, status and editor boxes as screen lines."""
        if width < 2 or height < 1:
            return []
        table_height = max(
            GridConstants.MIN_TABLE_HEIGHT,
            height - GridConstants.STATUS_HEIGHT - GridConstants.EDITOR_HEIGHT,
        )
        lines = self._compose_box(
            GridConstants.TABLE_TITLE,
            self._compose_table(frame.table, width - 2, table_height - 2),
            width, table_height,
        )
        lines += self._compose_box(
            frame.status.title, [printable(frame.status.status), frame.status.help],
            width, GridConstants.STATUS_HEIGHT,
        )
        lines += self._compose_box(
            frame.editor.title, [printable(frame.editor.text)],
            width, GridConstants.EDITOR_HEIGHT,
        )
        return lines[:height]

    def cell_width(self, text: str) -> int:
        """Screen columns a cell occupies once drawn; wide characters count twice."""
        return self.term.length(printable(text))

    def fit(self, text: str, width: int) -> str:
        """Truncate or pad text to exactly `width` screen columns."""
        return self.term.ljust(self.term.truncate(text, width), width)

    def _compose_box(self, title: str, body: list[str], width: int, height: int) -> list[str]:
        """Draw a bordered box with the title on its top edge.

        Body lines are fitted to the inner width by display width; styling
        in them is kept.
        """
        inner = width - 2
        title = self.term.truncate(title, inner)
        lines = ["┌" + title + "─" * (inner - self.term.length(title)) + "┐"]
        for i in range(max(height - 2, 0)):
            text = body[i] if i < len(body) else ""
            if self.term.length(text) != inner:
                text = self.fit(text, inner)
            lines.append("│" + text + "│")
        lines.append("└" + "─" * inner + "┘")
        return lines

    def _compose_table(self, table: TableRegion, inner_width: int, inner_height: int) -> list[str]:
        """Render the visible part of the table, highlighting the selected cell."""
        sel_row, sel_col = table.selected
        widths = column_widths(table, inner_width, self.cell_width)
        cols = visible_columns(widths, sel_col, inner_width)
        spacer = " " * GridConstants.COLUMN_SPACING

        lines = []
        for r in visible_range(sel_row, len(table.rows), inner_height):
            parts = []
            used = 0
            for c in cols:
                text = self.fit(printable(table.rows[r][c]), widths[c])
                if r == sel_row and c == sel_col:
                    text = self.term.black_on_yellow + self.term.bold + text + self.term.normal
                if parts:
                    parts.append(spacer)
                    used += len(spacer)
                parts.append(text)
                used += widths[c]
            parts.append(" " * max(inner_width - used, 0))
            lines.append(''.join(parts))
        return lines

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
