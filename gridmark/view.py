"""Projection of editor state into a drawable frame.

Everything here is a pure function of its arguments. The event loop calls
``project_frame`` on every tick whether or not anything changed, and the
terminal decides what actually needs repainting.
"""

from dataclasses import dataclass
from typing import Callable

from .constants import GridConstants
from .state import Editing, GridState


@dataclass(frozen=True)
class TableRegion:
    rows: tuple[tuple[str, ...], ...]  # Each row padded to `columns` for display
    columns: int
    selected: tuple[int, int]


@dataclass(frozen=True)
class StatusRegion:
    title: str
    status: str
    help: str


@dataclass(frozen=True)
class EditorRegion:
    title: str
    text: str


@dataclass(frozen=True)
class Frame:
    table: TableRegion
    status: StatusRegion
    editor: EditorRegion


def project_table(state: GridState) -> TableRegion:
    grid = state.grid
    # At least one column is always rendered, even for an empty grid
    columns = max(1, grid.width())
    rows = tuple(
        tuple(cells) + ("",) * (columns - len(cells))
        for cells in grid.rows
    )
    return TableRegion(rows=rows, columns=columns,
                       selected=(state.cursor.row, state.cursor.col))


def project_status(state: GridState, file_path: str) -> StatusRegion:
    status = GridConstants.STATUS_FORMAT.format(
        path=file_path,
        row=state.cursor.row + 1,
        col=state.cursor.col + 1,
        dirty="yes" if state.dirty else "no",
    )
    return StatusRegion(title=GridConstants.STATUS_TITLE, status=status,
                        help=GridConstants.HELP_TEXT)


def project_editor(state: GridState) -> EditorRegion:
    mode = state.mode
    if isinstance(mode, Editing):
        text = GridConstants.EDITING_FORMAT.format(
            row=mode.row + 1, col=mode.col + 1, buffer=mode.buffer)
        return EditorRegion(title=GridConstants.EDITOR_TITLE, text=text)
    return EditorRegion(title=GridConstants.INFO_TITLE, text=GridConstants.INFO_TEXT)


def project_frame(state: GridState, file_path: str) -> Frame:
    """Build the frame for the current state without modifying it."""
    return Frame(
        table=project_table(state),
        status=project_status(state, file_path),
        editor=project_editor(state),
    )


def column_widths(table: TableRegion, available: int,
                  measure: Callable[[str], int] = len) -> list[int]:
    """Width of each column, fitted into `available` screen columns.

    Every column wants room for its longest cell but never less than the
    minimum width. When the total does not fit, the widest columns are
    trimmed first, down to the minimum width.

    `measure` gives the number of screen columns a cell occupies; the
    terminal passes its own, which counts wide characters twice.
    """
    widths = [GridConstants.MIN_COLUMN_WIDTH] * table.columns
    for row in table.rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], measure(cell))

    spacing = GridConstants.COLUMN_SPACING * max(table.columns - 1, 0)
    excess = sum(widths) + spacing - max(available, 0)
    while excess > 0:
        widest = max(widths)
        if widest <= GridConstants.MIN_COLUMN_WIDTH:
            break
        i = widths.index(widest)
        widths[i] -= 1
        excess -= 1
    return widths


def visible_range(selected: int, total: int, capacity: int) -> range:
    """Indices to show so that `selected` stays within a window of `capacity`.

    The window starts at 0 and only scrolls once the selection would fall
    off the end; it then keeps the selection on the last visible slot.
    """
    if capacity <= 0 or total <= 0:
        return range(0)
    start = max(0, min(selected - capacity + 1, total - capacity))
    return range(start, min(total, start + capacity))


def visible_columns(widths: list[int], selected: int, available: int) -> range:
    """Columns that fit in `available` screen columns, keeping `selected` visible."""
    if not widths:
        return range(0)
    selected = min(max(selected, 0), len(widths) - 1)

    def fits(start: int, stop: int) -> bool:
        used = sum(widths[start:stop]) + GridConstants.COLUMN_SPACING * (stop - start - 1)
        return used <= available

    start = 0
    while start < selected and not fits(start, selected + 1):
        start += 1
    stop = selected + 1
    while stop < len(widths) and fits(start, stop + 1):
        stop += 1
    return range(start, stop)
