"""Wiring of the persisted state objects for one state root.

Each repository is built once here and injected into the coordinating
components; nothing in the core reaches for module-level state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from iceland.browser import BrowserLauncher
from iceland.config import ConfigStore
from iceland.errors import AreaNotFound, NoCurrentArea, ParseError
from iceland.fileio import exclusive_lock
from iceland.ledger import SessionLedger
from iceland.lifecycle import AreaLifecycle
from iceland.models import SessionRecord
from iceland.pointer import CurrentAreaPointer
from iceland.scaffold import AreaScaffolder
from iceland.switch import AreaSwitchCoordinator
from iceland.timer import SessionTimer
from iceland.workspace import iceland_root, lock_path, now_local


@dataclass
class Status:
    current_area: str | None
    area_path: Path | None
    started_at: datetime | None = None
    elapsed_seconds: int | None = None
    timer_error: str | None = None

    @property
    def timer_running(self) -> bool:
        return self.started_at is not None or self.timer_error is not None


class Workspace:
    def __init__(
        self,
        root: Path | None = None,
        clock: Callable[[], datetime] = now_local,
        browser: BrowserLauncher | None = None,
    ):
        if root is None:
            root = iceland_root()
        self.root = root
        self.clock = clock
        self.lock_file = lock_path(root)

        self.config_store = ConfigStore(root)
        self.pointer = CurrentAreaPointer(root)
        self.timer = SessionTimer(root, self.pointer, clock)
        self.ledger = SessionLedger(root)
        self.scaffolder = AreaScaffolder(root)
        self.browser = browser or BrowserLauncher()

        self.switcher = AreaSwitchCoordinator(
            self.config_store,
            self.pointer,
            self.timer,
            self.ledger,
            self.scaffolder,
            self.browser,
            self.lock_file,
        )
        self.lifecycle = AreaLifecycle(
            root,
            self.config_store,
            self.pointer,
            self.timer,
            self.ledger,
            self.scaffolder,
            self.lock_file,
        )

    def require_area(self, area: str) -> Path:
        """Directory of a configured area. Raises AreaNotFound for anything else."""
        if not self.config_store.load().has_area(area):
            raise AreaNotFound(area, "Use `list` to see the configured areas.")
        return self.scaffolder.path(area)

    def start_session(self) -> tuple[str, datetime]:
        """Start a timer in the current area."""
        area = self.pointer.read()
        if area is None:
            raise NoCurrentArea()
        with exclusive_lock(self.lock_file):
            started = self.timer.start(area)
        return area, started

    def stop_session(self) -> SessionRecord:
        """Close the running session and record it in the ledger.

        The timer is only dropped once the ledger row is written.
        """
        with exclusive_lock(self.lock_file):
            record = self.timer.stop()
            self.ledger.append(record)
            self.timer.discard()
        return record

    def discard_session(self) -> bool:
        with exclusive_lock(self.lock_file):
            return self.timer.discard()

    def status(self) -> Status:
        area = self.pointer.read()
        if area is None:
            return Status(current_area=None, area_path=None)
        status = Status(current_area=area, area_path=self.scaffolder.path(area))
        try:
            started = self.timer.started_at()
        except ParseError as e:
            status.timer_error = str(e)
            return status
        if started is not None:
            status.started_at = started
            status.elapsed_seconds = max(0, int((self.clock() - started).total_seconds()))
        return status
