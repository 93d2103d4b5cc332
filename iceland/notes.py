"""Free-text notes appended to an area's notes folder."""

from __future__ import annotations

from pathlib import Path

from iceland.errors import AreaNotFound, StorageError
from iceland.fileio import append_line
from iceland.scaffold import NOTES_DIR
from iceland.workspace import area_dir

NOTES_FILE = "my_notes.txt"


def add_note(area: str, text: str, root: Path) -> Path:
    """Append *text* as one line to the area's notes file. Returns the file path."""
    notes_dir = area_dir(area, root) / NOTES_DIR
    if not notes_dir.is_dir():
        raise AreaNotFound(area, "Or it has no notes folder.")
    notes_file = notes_dir / NOTES_FILE
    try:
        append_line(notes_file, text)
    except OSError as e:
        raise StorageError(f"Could not write {notes_file}: {e}") from e
    return notes_file
