"""Switching the active area.

Order matters: the running session is closed against the *old* area
before the pointer moves, so a session is never attributed to the area
the user switched into. Only validation can stop a switch; every side
effect after it degrades to a warning.
"""

from __future__ import annotations

import logging
from pathlib import Path

from iceland.browser import BrowserLauncher
from iceland.config import ConfigStore
from iceland.errors import AreaNotFound, IcelandError
from iceland.fileio import exclusive_lock
from iceland.ledger import SessionLedger
from iceland.models import SwitchResult
from iceland.pointer import CurrentAreaPointer
from iceland.scaffold import AreaScaffolder
from iceland.timer import SessionTimer

logger = logging.getLogger(__name__)


class AreaSwitchCoordinator:
    def __init__(
        self,
        config_store: ConfigStore,
        pointer: CurrentAreaPointer,
        timer: SessionTimer,
        ledger: SessionLedger,
        scaffolder: AreaScaffolder,
        browser: BrowserLauncher,
        lock_file: Path,
    ):
        self.config_store = config_store
        self.pointer = pointer
        self.timer = timer
        self.ledger = ledger
        self.scaffolder = scaffolder
        self.browser = browser
        self.lock_file = lock_file

    def switch_to(self, area: str, launch_browser: bool = True) -> SwitchResult:
        config = self.config_store.load()
        if not config.has_area(area):
            raise AreaNotFound(area, "Use `add-area` first.")
        if not self.scaffolder.exists(area):
            raise AreaNotFound(area, "Its directory is missing; run `init` to recreate it.")

        warnings: list[str] = []
        with exclusive_lock(self.lock_file):
            closed = None
            if self.timer.is_active():
                try:
                    record = self.timer.stop()
                    self.ledger.append(record)
                    closed = record
                except IcelandError as e:
                    warnings.append(f"failed to stop previous session: {e}")
                    logger.warning("switch to %s: failed to stop previous session: %s", area, e)
                # Recorded or not, the old timer must not block the new one.
                self.timer.discard()

            started = self.timer.start(area)
            self.pointer.write(area)

        logger.info("switched to %s", area)
        result = SwitchResult(area=area, started_at=started, closed=closed, warnings=warnings)

        try:
            result.links = self.scaffolder.read_links(area)
        except OSError as e:
            self._warn(result, f"could not read links: {e}")

        if launch_browser and config.browser_command.strip():
            try:
                result.browser_argv = self.browser.launch(config.browser_command, area)
            except (OSError, ValueError) as e:
                self._warn(result, f"could not launch browser: {e}")

        return result

    def _warn(self, result: SwitchResult, message: str) -> None:
        logger.warning("switch to %s: %s", result.area, message)
        result.warnings.append(message)
