"""The single active session timer.

A running session is nothing more than the session_start file holding the
moment it began. Stopping turns that into a SessionRecord for the area
the pointer names; callers that move the pointer must stop first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from iceland.errors import NoActiveSession, NoCurrentArea, SessionAlreadyActive, StorageError
from iceland.fileio import read_text, remove_file, write_text_atomic
from iceland.models import SessionRecord
from iceland.pointer import CurrentAreaPointer
from iceland.workspace import format_timestamp, now_local, parse_timestamp, session_start_path

logger = logging.getLogger(__name__)


class SessionTimer:
    def __init__(
        self,
        root: Path,
        pointer: CurrentAreaPointer,
        clock: Callable[[], datetime] = now_local,
    ):
        self.path = session_start_path(root)
        self.pointer = pointer
        self.clock = clock

    def is_active(self) -> bool:
        return self.path.exists()

    def started_at(self) -> datetime | None:
        """Stored start of the running session, or None. Raises ParseError if malformed."""
        if not self.path.exists():
            return None
        try:
            raw = read_text(self.path)
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        return parse_timestamp(raw)

    def start(self, area: str) -> datetime:
        """Start a session for *area*. Raises if one is already running."""
        if self.path.exists():
            raise SessionAlreadyActive()
        started = self.clock()
        try:
            write_text_atomic(self.path, format_timestamp(started))
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        logger.info("session started for %s at %s", area, format_timestamp(started))
        return started

    def stop(self) -> SessionRecord:
        """Build the record for the running session.

        The timer file stays in place; the caller discards it once the
        record is safely in the ledger.
        """
        start = self.started_at()
        if start is None:
            raise NoActiveSession()

        area = self.pointer.read()
        if area is None:
            raise NoCurrentArea("No current area set; cannot attribute the running session.")

        end = self.clock()
        if end < start:
            logger.warning("clock reads %s, before session start %s", end, start)
            end = start

        record = SessionRecord(area=area, start=start, end=end)
        logger.info("session closed for %s (%d seconds)", area, record.duration_seconds)
        return record

    def discard(self) -> bool:
        """Drop the timer without recording anything."""
        try:
            return remove_file(self.path)
        except OSError as e:
            raise StorageError(f"Could not remove {self.path}: {e}") from e
