"""Area directory scaffolding, links and resets."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from iceland.errors import (
    ERROR_INVALID_ARGS,
    AreaNotFound,
    IcelandError,
    InvalidAreaName,
    StorageError,
)
from iceland.fileio import read_text
from iceland.workspace import area_dir

logger = logging.getLogger(__name__)

NOTES_DIR = "notes"
FLASHCARDS_DIR = "flashcards"
LINKS_FILE = "links.txt"
BROWSER_DIRS = ("browser_firefox", "browser_comet", "browser_profile")

# Extra sub-folders and seed links for the built-in areas.
AREA_TEMPLATES: dict[str, dict[str, list[str]]] = {
    "math": {
        "dirs": ["browser_firefox"],
        "links": ["Math resources:", "https://www.khanacademy.org"],
    },
    "learning": {
        "dirs": ["browser_comet"],
        "links": [
            "Primuss: https://www3.primuss.de/",
            "Wikipedia: https://www.wikipedia.org",
            "ChatGPT: https://chat.openai.com",
        ],
    },
    "work": {"dirs": ["projects", "docs", "browser_profile"]},
    "gaming": {"dirs": ["games", "clips", "browser_profile"]},
    "traveling": {"dirs": ["plans"]},
    "trading": {"dirs": ["analysis"]},
}

RESET_TARGETS = ("browser", "notes")


class AreaScaffolder:
    """Creates, inspects and deletes the directory tree backing each area."""

    def __init__(self, root: Path):
        self.root = root

    def path(self, area: str) -> Path:
        """The area's directory, which must sit directly under the root."""
        path = area_dir(area, self.root)
        if path.resolve().parent != self.root.resolve():
            raise InvalidAreaName(f"Area '{area}' resolves outside {self.root}.")
        return path

    def exists(self, area: str) -> bool:
        return self.path(area).is_dir()

    def create(self, area: str) -> Path:
        """Create the area's tree. Existing files are left alone."""
        path = self.path(area)
        template = AREA_TEMPLATES.get(area)
        try:
            for sub in (NOTES_DIR, FLASHCARDS_DIR, *(template or {}).get("dirs", [])):
                (path / sub).mkdir(parents=True, exist_ok=True)

            links_file = path / LINKS_FILE
            if not links_file.exists():
                if template is None:
                    links_file.write_text(f"# Links for {area}\n\n", encoding="utf-8")
                elif template.get("links"):
                    links_file.write_text("\n".join(template["links"]) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not create area directory {path}: {e}") from e
        logger.info("scaffolded area %s at %s", area, path)
        return path

    def remove(self, area: str) -> bool:
        """Delete the area's whole tree (notes, flashcards, everything)."""
        path = self.path(area)
        if not path.exists():
            return False
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise StorageError(f"Could not delete {path}: {e}") from e
        logger.info("deleted area directory %s", path)
        return True

    def reset(self, area: str, target: str) -> list[str]:
        """Empty the browser profile folders or the notes folder of an area.

        Returns the names of the folders that were reset.
        """
        if target not in RESET_TARGETS:
            raise IcelandError(f"Unknown reset target '{target}'.", ERROR_INVALID_ARGS)
        path = self.path(area)
        if not path.exists():
            raise AreaNotFound(area)

        names = BROWSER_DIRS if target == "browser" else (NOTES_DIR,)
        reset = []
        for name in names:
            folder = path / name
            if not folder.exists():
                continue
            try:
                shutil.rmtree(folder)
                folder.mkdir()
            except OSError as e:
                raise StorageError(f"Could not reset {folder}: {e}") from e
            reset.append(name)
        logger.info("reset %s in %s: %s", target, area, reset)
        return reset

    def read_links(self, area: str) -> str | None:
        """The area's links file, or None when it has none."""
        text = read_text(self.path(area) / LINKS_FILE)
        return text if text.strip() else None
