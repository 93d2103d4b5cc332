"""Typed dataclasses for the Iceland data model.

Config maps to config.yaml through from_dict/to_dict; SessionRecord maps
to one row of sessions.csv through from_row/to_row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from iceland.errors import ConfigError, InvalidAreaName, ParseError
from iceland.workspace import format_timestamp, parse_timestamp, validate_area_name

DEFAULT_AREAS = ("work", "math", "learning", "gaming", "traveling", "trading")
DEFAULT_BROWSER_COMMAND = "firefox -P {area}"
AREA_PLACEHOLDER = "{area}"

LEDGER_HEADER = ("area", "start", "end")


# ── Config ────────────────────────────────────────────────────


@dataclass
class Config:
    areas: list[str] = field(default_factory=lambda: list(DEFAULT_AREAS))
    browser_command: str = DEFAULT_BROWSER_COMMAND

    @classmethod
    def from_dict(cls, d: Any) -> Config:
        """Build a Config from parsed YAML. Missing keys take defaults."""
        if d is None:
            return cls()
        if not isinstance(d, dict):
            raise ConfigError("Config must be a mapping of keys to values.")

        areas = d.get("areas", list(DEFAULT_AREAS))
        if not isinstance(areas, list) or not all(isinstance(a, str) and a.strip() for a in areas):
            raise ConfigError("Config 'areas' must be a list of non-empty names.")
        try:
            areas = [validate_area_name(a) for a in areas]
        except InvalidAreaName as e:
            raise ConfigError(f"Config 'areas' has an unusable entry: {e}") from e
        if len(set(areas)) != len(areas):
            raise ConfigError("Config 'areas' contains duplicate names.")

        browser_command = d.get("browser_command", DEFAULT_BROWSER_COMMAND)
        if browser_command is None:
            browser_command = ""
        if not isinstance(browser_command, str):
            raise ConfigError("Config 'browser_command' must be a string.")

        return cls(areas=areas, browser_command=browser_command)

    def to_dict(self) -> dict[str, Any]:
        return {
            "areas": list(self.areas),
            "browser_command": self.browser_command,
        }

    def has_area(self, name: str) -> bool:
        return name in self.areas

    def first_area(self) -> str | None:
        return self.areas[0] if self.areas else None


# ── Sessions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class SessionRecord:
    """One completed session. Immutable once appended to the ledger."""

    area: str
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("session end precedes its start")

    @property
    def duration_seconds(self) -> int:
        return int((self.end - self.start).total_seconds())

    @classmethod
    def from_row(cls, row: list[str]) -> SessionRecord:
        """Parse one ledger row (area, start, end)."""
        if len(row) != len(LEDGER_HEADER):
            raise ParseError(f"expected {len(LEDGER_HEADER)} columns, got {len(row)}")
        area, start_raw, end_raw = (c.strip() for c in row)
        if not area:
            raise ParseError("empty area name")
        start = parse_timestamp(start_raw)
        end = parse_timestamp(end_raw)
        if end < start:
            raise ParseError(f"end {end_raw!r} precedes start {start_raw!r}")
        return cls(area=area, start=start, end=end)

    def to_row(self) -> list[str]:
        return [self.area, format_timestamp(self.start), format_timestamp(self.end)]


@dataclass
class LedgerScan:
    """Result of a tolerant ledger read."""

    records: list[SessionRecord] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


# ── Command results ───────────────────────────────────────────


@dataclass
class SwitchResult:
    area: str
    started_at: datetime
    closed: SessionRecord | None = None
    links: str | None = None
    browser_argv: list[str] | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass
class RemovalResult:
    area: str
    removed: bool = False
    closed: SessionRecord | None = None
    new_current: str | None = None
    pointer_cleared: bool = False
