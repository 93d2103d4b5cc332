"""File logging for the `iceland` package.

Every core module logs through logging.getLogger(__name__), so all of them
are children of the `iceland` logger configured here. The CLI calls
get_logger() once per command; until then the core stays silent.

Environment:
    ICELAND_LOG_DIR    directory for iceland.log (default: platformdirs user_log_dir)
    ICELAND_LOG_LEVEL  level name for the file handler (default: DEBUG)
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

from iceland.workspace import APP_NAME

LOG_FILE = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_configured: logging.Logger | None = None


def log_dir() -> Path:
    return Path(os.environ.get("ICELAND_LOG_DIR") or user_log_dir(APP_NAME))


def log_level() -> int:
    name = os.environ.get("ICELAND_LOG_LEVEL", "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def _file_handler(directory: Path) -> logging.Handler:
    directory.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        directory / LOG_FILE,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def get_logger() -> logging.Logger:
    """The `iceland` logger, with its rotating file handler attached on first use."""
    global _configured
    if _configured is not None:
        return _configured

    logger = logging.getLogger(APP_NAME)
    if not logger.handlers:
        logger.addHandler(_file_handler(log_dir()))
    logger.setLevel(log_level())
    # File only; the console belongs to the CLI output.
    logger.propagate = False

    _configured = logger
    return logger
