"""Shared test fixtures for Iceland tests."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from iceland.context import Workspace

TZ = timezone(timedelta(hours=1))
T0 = datetime(2026, 2, 11, 9, 0, 0, tzinfo=TZ)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class FakeBrowser:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.launches: list[tuple[str, str]] = []

    def launch(self, template: str, area: str) -> list[str] | None:
        if self.fail:
            raise FileNotFoundError("no such browser")
        self.launches.append((template, area))
        return template.replace("{area}", area).split()


@pytest.fixture(scope="session", autouse=True)
def _log_dir(tmp_path_factory):
    """Keep the CLI's log file out of the real user log directory."""
    os.environ["ICELAND_LOG_DIR"] = str(tmp_path_factory.mktemp("logs"))
    yield
    os.environ.pop("ICELAND_LOG_DIR", None)


@pytest.fixture(autouse=True)
def _wide_terminal(monkeypatch):
    """Give rich a fixed wide terminal so CLI output is not wrapped at 80 columns."""
    monkeypatch.setenv("COLUMNS", "200")


@pytest.fixture
def root(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "iceland"
    monkeypatch.setenv("ICELAND_ROOT", str(path))
    return path


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def workspace(root: Path, clock: FakeClock, browser: FakeBrowser) -> Workspace:
    return Workspace(root, clock=clock, browser=browser)


@pytest.fixture
def initialized(workspace: Workspace) -> Workspace:
    """A workspace after `init`: default areas, pointer on the first one."""
    workspace.lifecycle.initialize()
    return workspace


def read_ledger_lines(ws: Workspace) -> list[str]:
    return ws.ledger.path.read_text(encoding="utf-8").splitlines()
