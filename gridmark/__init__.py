"""Gridmark - A terminal editor for comma-delimited files."""

import logging

from .model import Grid
from .state import GridState, Cursor, Navigating, Editing
from .csv_file import load_grid, save_grid
from .errors import GridmarkError, LoadError, OpenError, ParseError, SaveError
from .view import Frame, project_frame

# Nothing is logged to the screen unless the application configures a handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Grid',
    'GridState',
    'Cursor',
    'Navigating',
    'Editing',
    'load_grid',
    'save_grid',
    'GridmarkError',
    'LoadError',
    'OpenError',
    'ParseError',
    'SaveError',
    'Frame',
    'project_frame',
]
