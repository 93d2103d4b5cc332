"""Tests for iceland/timer.py and iceland/pointer.py — the session timer lifecycle."""

import pytest

from conftest import T0
from iceland.errors import NoActiveSession, NoCurrentArea, ParseError, SessionAlreadyActive
from iceland.pointer import CurrentAreaPointer
from iceland.timer import SessionTimer


@pytest.fixture
def pointer(root):
    p = CurrentAreaPointer(root)
    p.write("work")
    return p


@pytest.fixture
def timer(root, pointer, clock):
    return SessionTimer(root, pointer, clock)


def test_pointer_absent_is_none(root):
    assert CurrentAreaPointer(root).read() is None


def test_pointer_write_read_clear(root):
    p = CurrentAreaPointer(root)
    p.write("math")
    assert p.read() == "math"
    p.path.write_text("  learning \n", encoding="utf-8")
    assert p.read() == "learning"
    p.clear()
    assert p.read() is None
    p.clear()  # clearing twice is fine


def test_start_persists_timestamp(timer):
    started = timer.start("work")
    assert started == T0
    assert timer.is_active()
    assert timer.path.read_text(encoding="utf-8") == "2026-02-11T09:00:00+01:00"
    assert timer.started_at() == T0


def test_start_twice_keeps_original_start(timer, clock):
    timer.start("work")
    clock.advance(300)
    with pytest.raises(SessionAlreadyActive):
        timer.start("work")
    assert timer.started_at() == T0


def test_stop_returns_record(timer, clock):
    timer.start("work")
    clock.advance(1500)
    record = timer.stop()
    assert record.area == "work"
    assert record.start == T0
    assert record.duration_seconds == 1500
    assert record.end >= record.start


def test_stop_leaves_timer_until_discarded(timer, clock):
    timer.start("work")
    clock.advance(60)
    timer.stop()
    assert timer.started_at() == T0
    assert timer.discard() is True
    assert not timer.is_active()


def test_stop_without_timer(timer):
    with pytest.raises(NoActiveSession):
        timer.stop()


def test_stop_uses_area_current_at_start(timer, pointer, clock):
    """The pointer is only moved after a stop, so stop sees the starting area."""
    timer.start("work")
    clock.advance(60)
    assert timer.stop().area == "work"


def test_stop_without_pointer_keeps_timer(root, clock):
    pointer = CurrentAreaPointer(root)
    timer = SessionTimer(root, pointer, clock)
    timer.start("work")
    with pytest.raises(NoCurrentArea):
        timer.stop()
    assert timer.is_active()


def test_malformed_start_raises_and_is_kept(timer):
    timer.path.parent.mkdir(parents=True, exist_ok=True)
    timer.path.write_text("not a time", encoding="utf-8")
    with pytest.raises(ParseError):
        timer.stop()
    # No "now" fallback: the broken value stays for the user to inspect.
    assert timer.path.read_text(encoding="utf-8") == "not a time"


def test_naive_start_is_rejected(timer):
    timer.path.parent.mkdir(parents=True, exist_ok=True)
    timer.path.write_text("2026-02-11T09:00:00", encoding="utf-8")
    with pytest.raises(ParseError):
        timer.started_at()


def test_start_with_nanoseconds_from_older_installs(timer, clock):
    timer.path.parent.mkdir(parents=True, exist_ok=True)
    timer.path.write_text("2026-02-11T08:59:00.123456789+01:00", encoding="utf-8")
    record = timer.stop()
    assert record.duration_seconds == 59


def test_clock_skew_never_yields_negative_duration(timer, clock):
    timer.start("work")
    clock.advance(-120)
    record = timer.stop()
    assert record.end == record.start
    assert record.duration_seconds == 0


def test_discard(timer):
    assert timer.discard() is False
    timer.start("work")
    assert timer.discard() is True
    assert not timer.is_active()
