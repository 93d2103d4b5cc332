"""State root, clock and path helpers for Iceland."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from iceland.errors import InvalidAreaName, ParseError

APP_NAME = "iceland"

CONFIG_FILE = "config.yaml"
CURRENT_AREA_FILE = "current_area"
SESSION_START_FILE = "session_start"
SESSIONS_FILE = "sessions.csv"
LOCK_FILE = ".lock"

# Names an area directory may never take: they would shadow state files.
RESERVED_NAMES = frozenset(
    {CONFIG_FILE, CURRENT_AREA_FILE, SESSION_START_FILE, SESSIONS_FILE, LOCK_FILE, "logs"}
)


def iceland_root() -> Path:
    """Get the state root directory (holds config, pointer, timer, ledger and areas)."""
    return Path(
        os.environ.get("ICELAND_ROOT", str(Path.home() / f".{APP_NAME}"))
    ).expanduser().resolve()


def now_local() -> datetime:
    """Current zone-aware local time, truncated to whole seconds."""
    return datetime.now().astimezone().replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    """Render a zone-aware datetime in RFC 3339 form."""
    if value.tzinfo is None:
        raise ValueError("timestamps must be zone-aware")
    return value.isoformat()


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 / ISO 8601 timestamp that carries a UTC offset."""
    raw = text.strip()
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as e:
        raise ParseError(f"Invalid timestamp {raw!r}") from e
    if value.tzinfo is None:
        raise ParseError(f"Timestamp {raw!r} has no UTC offset")
    return value


# ── Path helpers ──────────────────────────────────────────────

def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = iceland_root()
    return root / CONFIG_FILE


def current_area_path(root: Path | None = None) -> Path:
    if root is None:
        root = iceland_root()
    return root / CURRENT_AREA_FILE


def session_start_path(root: Path | None = None) -> Path:
    if root is None:
        root = iceland_root()
    return root / SESSION_START_FILE


def sessions_path(root: Path | None = None) -> Path:
    if root is None:
        root = iceland_root()
    return root / SESSIONS_FILE


def lock_path(root: Path | None = None) -> Path:
    if root is None:
        root = iceland_root()
    return root / LOCK_FILE


def validate_area_name(name: str) -> str:
    """Return the stripped name, or raise InvalidAreaName.

    A valid name is a single path component directly under the state root.
    """
    cleaned = name.strip()
    if not cleaned:
        raise InvalidAreaName("Area name must not be empty.")
    if "/" in cleaned or "\\" in cleaned:
        raise InvalidAreaName(f"Area name '{cleaned}' must not contain path separators.")
    if cleaned.startswith("."):
        raise InvalidAreaName(f"Area name '{cleaned}' must not start with '.'.")
    if cleaned in RESERVED_NAMES:
        raise InvalidAreaName(f"Area name '{cleaned}' is reserved.")
    return cleaned


def area_dir(area: str, root: Path | None = None) -> Path:
    if root is None:
        root = iceland_root()
    return root / validate_area_name(area)
