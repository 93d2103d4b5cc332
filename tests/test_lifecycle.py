"""Tests for iceland/lifecycle.py — init, add-area, remove-area."""

import pytest

from conftest import T0, read_ledger_lines
from iceland.errors import (
    AreaAlreadyExists,
    AreaNotFound,
    ConfigError,
    InvalidAreaName,
    StorageError,
)
from iceland.models import DEFAULT_AREAS, Config


def _yes(message):
    return True


def _no(message):
    return False


def test_initialize_creates_defaults(workspace):
    config = workspace.lifecycle.initialize()
    assert config.areas == list(DEFAULT_AREAS)
    assert workspace.config_store.exists()
    assert workspace.pointer.read() == "work"
    assert not workspace.ledger.exists()
    assert not workspace.timer.is_active()
    for area in DEFAULT_AREAS:
        assert workspace.scaffolder.exists(area)


def test_initialize_is_idempotent(initialized):
    ws = initialized
    ws.lifecycle.add_area("reading")
    ws.switcher.switch_to("math")
    ws.lifecycle.initialize()
    assert "reading" in ws.config_store.load().areas
    assert ws.pointer.read() == "math"


def test_initialize_recreates_missing_directories(initialized):
    ws = initialized
    ws.scaffolder.remove("trading")
    ws.lifecycle.initialize()
    assert ws.scaffolder.exists("trading")


def test_add_area(initialized):
    ws = initialized
    assert ws.lifecycle.add_area("  reading ") == "reading"
    assert ws.config_store.load().areas[-1] == "reading"
    assert ws.scaffolder.exists("reading")
    assert (ws.scaffolder.path("reading") / "links.txt").read_text(encoding="utf-8").startswith("# Links for reading")


def test_add_existing_area_fails(initialized):
    ws = initialized
    before = ws.config_store.path.read_text(encoding="utf-8")
    with pytest.raises(AreaAlreadyExists):
        ws.lifecycle.add_area("math")
    assert ws.config_store.path.read_text(encoding="utf-8") == before


@pytest.mark.parametrize("name", ["", "   ", "a/b", "..", ".hidden", "sessions.csv", "config.yaml"])
def test_add_invalid_area_name(initialized, name):
    with pytest.raises(InvalidAreaName):
        initialized.lifecycle.add_area(name)


def test_remove_unknown_area(initialized):
    with pytest.raises(AreaNotFound):
        initialized.lifecycle.remove_area("cooking", _yes)


def test_remove_declined_changes_nothing(initialized):
    ws = initialized
    result = ws.lifecycle.remove_area("math", _no)
    assert result.removed is False
    assert ws.config_store.load().has_area("math")
    assert ws.scaffolder.exists("math")


def test_remove_passes_warning_to_prompt(initialized):
    seen = []
    initialized.lifecycle.remove_area("math", lambda m: seen.append(m) or False)
    assert "math" in seen[0]
    assert "delete" in seen[0]


def test_remove_non_current_area_keeps_pointer(initialized):
    ws = initialized
    result = ws.lifecycle.remove_area("math", _yes)
    assert result.removed
    assert result.new_current is None
    assert ws.pointer.read() == "work"
    assert not ws.scaffolder.exists("math")
    assert "math" not in ws.config_store.load().areas


def test_remove_current_area_reassigns_pointer(initialized, clock):
    ws = initialized
    ws.switcher.switch_to("math")
    clock.advance(60)
    ws.switcher.switch_to("work")
    ledger_before = read_ledger_lines(ws)
    ws.timer.discard()

    result = ws.lifecycle.remove_area("work", _yes)

    assert result.new_current == "math"
    assert ws.pointer.read() == "math"
    assert read_ledger_lines(ws) == ledger_before


def test_remove_current_area_with_running_session(initialized, clock):
    ws = initialized
    ws.start_session()
    clock.advance(300)

    result = ws.lifecycle.remove_area("work", _yes)

    assert result.closed is not None
    assert result.closed.area == "work"
    assert result.closed.duration_seconds == 300
    assert not ws.timer.is_active()
    assert [r.area for r in ws.ledger.load_all(strict=True)] == ["work"]
    assert ws.pointer.read() == "math"


def test_remove_last_area_clears_pointer(root, workspace):
    ws = workspace
    ws.config_store.save(Config(areas=["solo"]))
    ws.lifecycle.initialize()
    assert ws.pointer.read() == "solo"

    result = ws.lifecycle.remove_area("solo", _yes)

    assert result.pointer_cleared
    assert ws.pointer.read() is None
    assert ws.config_store.load().areas == []


def test_removed_area_history_survives(initialized, clock):
    ws = initialized
    ws.switcher.switch_to("gaming")
    clock.advance(120)
    ws.switcher.switch_to("work")
    ws.lifecycle.remove_area("gaming", _yes)
    assert [r.area for r in ws.ledger.load_all(strict=True)] == ["gaming"]


def test_list_areas_marks_current(initialized):
    listing = dict(initialized.lifecycle.list_areas())
    assert listing["work"] is True
    assert listing["math"] is False


def test_remove_current_area_keeps_everything_when_ledger_write_fails(initialized, clock):
    ws = initialized
    ws.start_session()
    clock.advance(300)
    ws.ledger.path.mkdir()

    with pytest.raises(StorageError):
        ws.lifecycle.remove_area("work", _yes)

    assert ws.timer.started_at() == T0
    assert ws.scaffolder.exists("work")
    assert ws.config_store.load().has_area("work")
    assert ws.pointer.read() == "work"


def test_remove_refuses_traversal_entry_in_config(initialized, root):
    ws = initialized
    victim = root.parent / "victim"
    victim.mkdir()
    (victim / "keep.txt").write_text("x", encoding="utf-8")
    config = ws.config_store.load()
    ws.config_store.save(Config(areas=config.areas + ["../victim"]))

    with pytest.raises(ConfigError):
        ws.lifecycle.remove_area("../victim", _yes)

    assert (victim / "keep.txt").exists()
