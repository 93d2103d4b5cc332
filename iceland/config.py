"""Config persistence: the list of known areas and the browser command."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from iceland.errors import ConfigError, StorageError
from iceland.fileio import read_yaml, write_yaml_atomic
from iceland.models import Config
from iceland.workspace import config_path

logger = logging.getLogger(__name__)


class ConfigStore:
    """Whole-file read/modify/write access to config.yaml."""

    def __init__(self, root: Path):
        self.path = config_path(root)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Config:
        """Load the config, or the built-in defaults when none is persisted.

        Nothing is written when falling back to defaults.
        """
        if not self.path.exists():
            return Config()
        try:
            data = read_yaml(self.path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file {self.path} is not valid YAML: {e}") from e
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        try:
            return Config.from_dict(data)
        except ConfigError as e:
            raise ConfigError(f"Config file {self.path} is corrupt: {e}") from e

    def save(self, config: Config) -> None:
        """Overwrite the persisted config with *config* in full."""
        try:
            write_yaml_atomic(self.path, config.to_dict())
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        logger.debug("saved config with %d areas", len(config.areas))
