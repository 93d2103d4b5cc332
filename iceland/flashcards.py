"""Flashcard decks: plain text files of `front|back` lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from iceland.errors import AreaNotFound, StorageError
from iceland.scaffold import FLASHCARDS_DIR
from iceland.workspace import area_dir

logger = logging.getLogger(__name__)

SEPARATOR = "|"


@dataclass
class Card:
    front: str
    back: str


@dataclass
class Deck:
    name: str
    cards: list[Card] = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)


def flashcards_dir(area: str, root: Path) -> Path:
    return area_dir(area, root) / FLASHCARDS_DIR


def list_decks(area: str, root: Path) -> list[str]:
    """Deck file names for an area, sorted."""
    folder = flashcards_dir(area, root)
    if not folder.is_dir():
        raise AreaNotFound(area, "Or it has no flashcards folder.")
    return sorted(p.name for p in folder.iterdir() if p.is_file())


def parse_deck(name: str, text: str) -> Deck:
    """Split each line on the first separator; lines without one are skipped."""
    deck = Deck(name=name)
    for i, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        front, sep, back = line.partition(SEPARATOR)
        if not sep:
            deck.skipped_lines.append(i)
            continue
        deck.cards.append(Card(front=front.strip(), back=back.strip()))
    if deck.skipped_lines:
        logger.warning("deck %s: skipped lines without '%s': %s", name, SEPARATOR, deck.skipped_lines)
    return deck


def load_deck(area: str, name: str, root: Path) -> Deck:
    path = flashcards_dir(area, root) / name
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Could not read deck {path}: {e}") from e
    return parse_deck(name, text)
