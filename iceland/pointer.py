"""The persisted pointer naming the current area."""

from __future__ import annotations

from pathlib import Path

from iceland.errors import StorageError
from iceland.fileio import read_text, remove_file, write_text_atomic
from iceland.workspace import current_area_path


class CurrentAreaPointer:
    def __init__(self, root: Path):
        self.path = current_area_path(root)

    def read(self) -> str | None:
        """Return the current area, or None when the pointer is absent or blank."""
        try:
            value = read_text(self.path).strip()
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        return value or None

    def write(self, area: str) -> None:
        try:
            write_text_atomic(self.path, area)
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def clear(self) -> None:
        try:
            remove_file(self.path)
        except OSError as e:
            raise StorageError(f"Could not remove {self.path}: {e}") from e
