"""Exceptions raised while loading and saving grids."""


class GridmarkError(Exception):
    """Base class for gridmark errors."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class LoadError(GridmarkError):
    """The grid could not be loaded."""


class OpenError(LoadError):
    """The file could not be opened for reading."""


class ParseError(LoadError):
    """The file contents are not valid comma-delimited text."""


class SaveError(GridmarkError):
    """Writing the grid back to disk failed."""
