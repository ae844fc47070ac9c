"""Constants and configuration for the gridmark editor."""

class GridConstants:
    """Central configuration constants for the editor."""

    # Event loop
    POLL_TIMEOUT = 0.25  # Longest wait for a key before the loop redraws (seconds)

    # Table layout
    MIN_COLUMN_WIDTH = 5  # Narrowest a rendered column may get
    COLUMN_SPACING = 1  # Blank columns between adjacent cells
    STATUS_HEIGHT = 4  # Bordered status strip: two borders + status and help lines
    EDITOR_HEIGHT = 3  # Bordered editor strip: two borders + one line
    MIN_TABLE_HEIGHT = 3  # Table box needs room for its borders

    # Region titles
    TABLE_TITLE = "CSV Viewer"
    STATUS_TITLE = "Status"
    EDITOR_TITLE = "Editor"
    INFO_TITLE = "Info"

    # Region text
    STATUS_FORMAT = "File: {path} | Pos: (row {row}, col {col}) | Dirty: {dirty}"
    HELP_TEXT = "Arrows: move  e: edit  Enter: save cell  Esc: cancel  w: write  q: quit"
    EDITING_FORMAT = "Editing (r{row}, c{col}): {buffer}"
    INFO_TEXT = "Press 'e' to edit selected cell"

    # File operations
    ENCODING = "utf-8"
    LINE_TERMINATOR = "\n"  # Records end with a bare newline on save
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Command line
    USAGE = "Usage: {program} <path/to/file.csv>"
