from typing import Optional


class Grid:
    """Jagged grid of text cells.

    Rows are independent lists and may differ in length. Reads outside the
    current extent return an empty string; ``ensure`` grows the grid so a
    cell becomes addressable without touching any other content.
    """

    rows: list[list[str]]

    def __init__(self, rows: Optional[list[list[str]]] = None):
        self.rows = rows if rows is not None else []

    def get(self, row: int, col: int) -> str:
        """Return the cell text, or "" when (row, col) is out of bounds."""
        if 0 <= row < len(self.rows):
            cells = self.rows[row]
            if 0 <= col < len(cells):
                return cells[col]
        return ""

    def ensure(self, row: int, col: int) -> None:
        """Grow rows and cells so that (row, col) is addressable."""
        while len(self.rows) <= row:
            self.rows.append([])
        cells = self.rows[row]
        while len(cells) <= col:
            cells.append("")

    def set(self, row: int, col: int, text: str) -> None:
        # Callers ensure() first; an unaddressable cell is a bug
        self.rows[row][col] = text

    def width(self) -> int:
        return max((len(cells) for cells in self.rows), default=0)

    def height(self) -> int:
        return len(self.rows)

    def row_length(self, row: int) -> int:
        if 0 <= row < len(self.rows):
            return len(self.rows[row])
        return 0

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self):
        return f"Grid({self.rows!r})"
