"""Launch the per-area browser profile configured in browser_command."""

from __future__ import annotations

import logging
import shlex
import subprocess

from iceland.models import AREA_PLACEHOLDER

logger = logging.getLogger(__name__)


def build_command(template: str, area: str) -> list[str]:
    """Substitute the area into *template* and split it into argv."""
    return shlex.split(template.replace(AREA_PLACEHOLDER, area))


class BrowserLauncher:
    """Spawns the browser detached from the CLI process.

    Raises OSError when the program cannot be started; callers treat
    that as a warning.
    """

    def launch(self, template: str, area: str) -> list[str] | None:
        argv = build_command(template, area)
        if not argv:
            return None
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        logger.info("launched browser: %s", argv)
        return argv
