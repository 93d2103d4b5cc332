"""Read-only aggregation over the session ledger."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from iceland.models import SessionRecord


def totals_by_area(records: Iterable[SessionRecord]) -> dict[str, int]:
    """Seconds spent per area. Key order carries no meaning."""
    totals: dict[str, int] = defaultdict(int)
    for record in records:
        totals[record.area] += record.duration_seconds
    return dict(totals)


def sorted_totals(totals: dict[str, int], order: Iterable[str] = ()) -> list[tuple[str, int]]:
    """Totals for display: areas in *order* first, then the rest alphabetically."""
    rank = {area: i for i, area in enumerate(order)}
    return sorted(totals.items(), key=lambda kv: (rank.get(kv[0], len(rank)), kv[0]))


def grand_total(records: Iterable[SessionRecord]) -> int:
    return sum(r.duration_seconds for r in records)


def history(records: Iterable[SessionRecord], area: str | None = None) -> list[SessionRecord]:
    """Records in ledger (chronological) order, optionally for one area."""
    if area is None:
        return list(records)
    return [r for r in records if r.area == area]


def format_duration(seconds: int) -> str:
    """Render seconds as H:MM, truncating partial minutes."""
    seconds = max(0, int(seconds))
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}:{minutes:02d}"
