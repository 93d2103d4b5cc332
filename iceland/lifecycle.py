"""Creating, adding and removing areas."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from iceland.config import ConfigStore
from iceland.errors import AreaAlreadyExists, AreaNotFound, StorageError
from iceland.fileio import exclusive_lock
from iceland.ledger import SessionLedger
from iceland.models import Config, RemovalResult
from iceland.pointer import CurrentAreaPointer
from iceland.scaffold import AreaScaffolder
from iceland.timer import SessionTimer
from iceland.workspace import validate_area_name

logger = logging.getLogger(__name__)


class AreaLifecycle:
    def __init__(
        self,
        root: Path,
        config_store: ConfigStore,
        pointer: CurrentAreaPointer,
        timer: SessionTimer,
        ledger: SessionLedger,
        scaffolder: AreaScaffolder,
        lock_file: Path,
    ):
        self.root = root
        self.config_store = config_store
        self.pointer = pointer
        self.timer = timer
        self.ledger = ledger
        self.scaffolder = scaffolder
        self.lock_file = lock_file

    def initialize(self) -> Config:
        """Create the state root and every configured area.

        An existing config is kept, so running this twice is harmless.
        The ledger and timer are never created here.
        """
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create {self.root}: {e}") from e

        with exclusive_lock(self.lock_file):
            config = self.config_store.load()
            self.config_store.save(config)
            for area in config.areas:
                if not self.scaffolder.exists(area):
                    self.scaffolder.create(area)

            first = config.first_area()
            if first is not None and self.pointer.read() is None:
                self.pointer.write(first)

        logger.info("initialized %s with areas %s", self.root, config.areas)
        return config

    def list_areas(self) -> list[tuple[str, bool]]:
        """Configured areas, each paired with whether it is the current one."""
        config = self.config_store.load()
        current = self.pointer.read()
        return [(area, area == current) for area in config.areas]

    def add_area(self, name: str) -> str:
        name = validate_area_name(name)
        with exclusive_lock(self.lock_file):
            config = self.config_store.load()
            if config.has_area(name):
                raise AreaAlreadyExists(name)
            self.scaffolder.create(name)
            config.areas.append(name)
            self.config_store.save(config)
        logger.info("added area %s", name)
        return name

    def remove_area(self, name: str, confirm: Callable[[str], bool]) -> RemovalResult:
        """Delete an area and all of its files once *confirm* agrees.

        Ledger rows that mention the area are history and stay as they are.
        """
        config = self.config_store.load()
        if not config.has_area(name):
            raise AreaNotFound(name)

        message = (
            f"This will delete all data for area '{name}' "
            "(notes, flashcards, etc.)."
        )
        result = RemovalResult(area=name)
        if not confirm(message):
            logger.info("removal of %s declined", name)
            return result

        with exclusive_lock(self.lock_file):
            config = self.config_store.load()
            if not config.has_area(name):
                raise AreaNotFound(name)
            is_current = self.pointer.read() == name

            # Close a running session while the pointer still names its area.
            if is_current and self.timer.is_active():
                record = self.timer.stop()
                self.ledger.append(record)
                self.timer.discard()
                result.closed = record

            self.scaffolder.remove(name)
            config.areas.remove(name)
            self.config_store.save(config)

            if is_current:
                first = config.first_area()
                if first is not None:
                    self.pointer.write(first)
                    result.new_current = first
                else:
                    self.pointer.clear()
                    result.pointer_cleared = True

        result.removed = True
        logger.info("removed area %s", name)
        return result
