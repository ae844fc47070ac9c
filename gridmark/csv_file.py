"""Reading and writing grids as comma-delimited text.

Tokenizing and quoting are left to the standard ``csv`` module. Saves are
atomic: rows are written to a temporary file next to the target, which is
flushed, synced and then renamed over the original.
"""

import csv
import logging
import os
import tempfile

from .constants import GridConstants
from .errors import OpenError, ParseError, SaveError
from .model import Grid

logger = logging.getLogger(__name__)


def load_grid(path: str) -> Grid:
    """Load a file into a Grid, one row per record and one cell per field.

    There is no header row. A blank line becomes an empty row.

    Raises:
        OpenError: the file cannot be opened.
        ParseError: the contents are not valid delimited text.
    """
    try:
        f = open(path, 'r', encoding=GridConstants.ENCODING, newline='')
    except OSError as e:
        raise OpenError(path, f"Cannot open ({e.strerror or e})") from e

    with f:
        try:
            rows = [list(record) for record in csv.reader(f, strict=True)]
        except csv.Error as e:
            raise ParseError(path, f"Malformed CSV ({e})") from e
        except UnicodeDecodeError as e:
            raise ParseError(path, f"Not valid {GridConstants.ENCODING}") from e
        except OSError as e:
            raise OpenError(path, f"Cannot read ({e.strerror or e})") from e

    logger.info("Loaded %d rows from %s", len(rows), path)
    return Grid(rows)


def save_grid(path: str, grid: Grid) -> None:
    """Write the grid to path atomically.

    Rows are written as-is; short rows are not padded.

    Raises:
        SaveError: on any I/O or encoding failure. The original file is left
            untouched in that case.
    """
    dir_name = os.path.dirname(path) or '.'
    temp_filename = None
    replaced = False
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=GridConstants.ENCODING,
                                         dir=dir_name, newline='',
                                         prefix='.' + os.path.basename(path) + '.',
                                         suffix=GridConstants.ATOMIC_SAVE_SUFFIX,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            writer = csv.writer(temp_file, lineterminator=GridConstants.LINE_TERMINATOR)
            writer.writerows(grid.rows)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        # Keep the original file's permission bits across the rename
        try:
            os.chmod(temp_filename, os.stat(path).st_mode & 0o7777)
        except FileNotFoundError:
            pass
        os.replace(temp_filename, path)
        replaced = True
    except (OSError, UnicodeError, csv.Error) as e:
        logger.warning("Saving %s failed: %s", path, e)
        raise SaveError(path, f"Cannot save ({getattr(e, 'strerror', None) or e})") from e
    finally:
        # Also runs when a signal interrupts the save
        if not replaced and temp_filename is not None:
            try:
                os.remove(temp_filename)
            except FileNotFoundError:
                pass

    logger.info("Saved %d rows to %s", grid.height(), path)
