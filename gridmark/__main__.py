"""Gridmark CLI entry point.

Allows running via `python -m gridmark` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .constants import GridConstants
from .errors import LoadError, SaveError

PROGRAM = "gridmark"


def main(argv: Optional[list[str]] = None) -> int:
    """Edit the CSV file named on the command line.

    Returns the process exit status. Usage and load errors are reported
    before the terminal is switched into fullscreen mode.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(GridConstants.USAGE.format(program=PROGRAM), file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for usage errors
    from .editor import Editor

    try:
        editor = Editor.load_file(args[0])
    except LoadError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        return 1

    try:
        editor.run()
    except SaveError as e:
        # The terminal has already been restored by Editor.run
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
