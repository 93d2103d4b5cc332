#!/usr/bin/env python3
"""Iceland CLI — focused digital areas with links, notes and time tracking."""

from __future__ import annotations

from enum import Enum

import typer
from rich.console import Console
from rich.table import Table

from cli.decorators import command_wrapper, format_warning
from cli.prompts import ConsoleConfirmation, select_item
from iceland import __version__
from iceland.context import Workspace
from iceland.flashcards import list_decks, load_deck
from iceland.models import SwitchResult
from iceland.notes import add_note
from iceland.stats import format_duration, grand_total, history, sorted_totals, totals_by_area

app = typer.Typer(
    name="iceland",
    help="Manage focused digital areas with tools, links, notes, and time tracking",
    no_args_is_help=True,
)

console = Console()

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class DestroyTarget(str, Enum):
    browser = "browser"
    notes = "notes"


def _workspace() -> Workspace:
    return Workspace()


def _confirm(message: str) -> bool:
    return ConsoleConfirmation(console)(message)


def _print_switch(ws: Workspace, result: SwitchResult) -> None:
    for warning in result.warnings:
        format_warning(warning)
    if result.closed is not None:
        console.print(
            f"Stopped session for '{result.closed.area}' "
            f"({result.closed.duration_seconds} seconds)"
        )
    console.print(f"🔄 Switched to area: [bold]{result.area}[/bold]")
    console.print(f"   Path: {ws.scaffolder.path(result.area)}", highlight=False)
    if result.links:
        console.print("\n📌 Useful links:")
        console.print(result.links.rstrip(), markup=False, highlight=False)
    if result.browser_argv:
        console.print(f"🌐 Launched browser for area '{result.area}'")


# ── Areas ─────────────────────────────────────────────────────


@app.command("init")
@command_wrapper
def init() -> None:
    """Initialize Iceland with default areas."""
    ws = _workspace()
    config = ws.lifecycle.initialize()
    console.print(f"✅ Iceland initialized in {ws.root}", highlight=False)
    console.print(f"Areas: {', '.join(config.areas)}")


@app.command("list")
@command_wrapper
def list_areas() -> None:
    """List all available areas."""
    ws = _workspace()
    console.print("Available areas:")
    for area, current in ws.lifecycle.list_areas():
        marker = "▶" if current else " "
        console.print(f"  {marker} {area}", markup=False)


@app.command("switch")
@command_wrapper
def switch(
    area: str = typer.Argument(..., help="Area to switch to"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Do not launch the browser"),
) -> None:
    """Switch to a specific area."""
    ws = _workspace()
    _print_switch(ws, ws.switcher.switch_to(area, launch_browser=not no_browser))


@app.command("tui")
@command_wrapper
def tui(
    no_browser: bool = typer.Option(False, "--no-browser", help="Do not launch the browser"),
) -> None:
    """Interactive area selector."""
    ws = _workspace()
    areas = ws.config_store.load().areas
    if not areas:
        console.print("No areas configured. Use `add-area` first.")
        return
    current = ws.pointer.read()
    default = areas.index(current) if current in areas else 0
    choice = select_item("Select an area", areas, default)
    if choice is None:
        console.print("No area selected.")
        return
    _print_switch(ws, ws.switcher.switch_to(areas[choice], launch_browser=not no_browser))


@app.command("add-area")
@command_wrapper
def add_area(name: str = typer.Argument(..., help="Name of the new area")) -> None:
    """Add a new custom area."""
    ws = _workspace()
    name = ws.lifecycle.add_area(name)
    console.print(f"✅ Area '{name}' created.")


@app.command("remove-area")
@command_wrapper
def remove_area(
    name: str = typer.Argument(..., help="Area to remove"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Remove an existing area (deletes all its data)."""
    ws = _workspace()
    confirm = (lambda _message: True) if yes else _confirm
    result = ws.lifecycle.remove_area(name, confirm)
    if not result.removed:
        console.print("Aborted.")
        return
    if result.closed is not None:
        console.print(
            f"Stopped session for '{result.closed.area}' "
            f"({result.closed.duration_seconds} seconds)"
        )
    if result.new_current:
        console.print(f"Switched to '{result.new_current}'.")
    elif result.pointer_cleared:
        console.print("No areas left; current area cleared.")
    console.print(f"🗑️  Area '{name}' removed.")


@app.command("destroy")
@command_wrapper
def destroy(
    area: str = typer.Argument(..., help="Area to reset a component in"),
    target: DestroyTarget = typer.Argument(..., help="Component to reset"),
) -> None:
    """Destroy/reset a component in an area."""
    ws = _workspace()
    ws.require_area(area)
    reset = ws.scaffolder.reset(area, target.value)
    if target is DestroyTarget.notes and not reset:
        console.print(f"No notes folder found for {area}")
        return
    if not reset:
        console.print(f"No browser directories found for {area}")
        return
    for name in reset:
        console.print(f"♻️  Reset {name} in {area}")


# ── Sessions ──────────────────────────────────────────────────


@app.command("status")
@command_wrapper
def status() -> None:
    """Show current area status."""
    ws = _workspace()
    st = ws.status()
    if st.current_area is None:
        console.print("❌ No current area set. Run `init` or `switch`.")
        return
    console.print(f"📍 Current area: [bold]{st.current_area}[/bold]")
    console.print(f"   Path: {st.area_path}", highlight=False)
    if not st.timer_running:
        console.print("⏸️  No active session.")
    elif st.timer_error:
        format_warning(f"session timer is unreadable ({st.timer_error}); use `stop --discard`.")
    else:
        console.print(
            f"⏱️  Session timer is running since {st.started_at.strftime(TIME_FORMAT)} "
            f"({format_duration(st.elapsed_seconds or 0)} h)"
        )


@app.command("start")
@command_wrapper
def start() -> None:
    """Manually start a session timer in the current area."""
    ws = _workspace()
    area, _started = ws.start_session()
    console.print(f"▶️  Timer started for area: {area}")


@app.command("stop")
@command_wrapper
def stop(
    discard: bool = typer.Option(
        False, "--discard", help="Drop the running timer without recording it"
    ),
) -> None:
    """Stop the current session and record it."""
    ws = _workspace()
    if discard:
        if ws.discard_session():
            console.print("Discarded the running session timer.")
        else:
            console.print("No session timer to discard.")
        return
    record = ws.stop_session()
    console.print(f"Stopped session for '{record.area}' ({record.duration_seconds} seconds)")


@app.command("stats")
@command_wrapper
def stats() -> None:
    """Show time statistics per area."""
    ws = _workspace()
    if not ws.ledger.exists():
        console.print("No sessions recorded yet.")
        return
    scan = ws.ledger.scan()
    for skipped in scan.skipped:
        format_warning(f"skipped {skipped}")

    totals = totals_by_area(scan.records)
    order = ws.config_store.load().areas
    table = Table(title="Time per area")
    table.add_column("Area")
    table.add_column("Time (h:mm)", justify="right")
    for area, secs in sorted_totals(totals, order):
        table.add_row(area, format_duration(secs))
    table.add_section()
    table.add_row("Total", format_duration(grand_total(scan.records)))
    console.print(table)


@app.command("history")
@command_wrapper
def show_history(
    area: str | None = typer.Option(None, "--area", "-a", help="Only sessions for this area"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Show only the last N sessions"),
) -> None:
    """Show session history for an area (or all areas)."""
    ws = _workspace()
    if not ws.ledger.exists():
        console.print("No sessions recorded.")
        return
    scan = ws.ledger.scan()
    for skipped in scan.skipped:
        format_warning(f"skipped {skipped}")

    sessions = history(scan.records, area)
    if limit is not None:
        sessions = sessions[-limit:]
    if not sessions:
        console.print("No sessions match the filter.")
        return

    table = Table(title="Session history")
    table.add_column("Area")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Duration", justify="right")
    for s in sessions:
        table.add_row(
            s.area,
            s.start.strftime(TIME_FORMAT),
            s.end.strftime(TIME_FORMAT),
            format_duration(s.duration_seconds),
        )
    console.print(table)


# ── Notes & flashcards ────────────────────────────────────────


@app.command("notes")
@command_wrapper
def notes(
    area: str = typer.Argument(..., help="Area to add the note to"),
    text: str = typer.Argument(..., help="Note text"),
) -> None:
    """Add a note to an area."""
    ws = _workspace()
    ws.require_area(area)
    path = add_note(area, text, ws.root)
    console.print(f"📝 Note added to {path}", highlight=False)


@app.command("flashcards")
@command_wrapper
def flashcards(area: str = typer.Argument(..., help="Area whose decks to study")) -> None:
    """Study flashcards for an area."""
    ws = _workspace()
    ws.require_area(area)
    decks = list_decks(area, ws.root)
    if not decks:
        console.print("No flashcard decks available.")
        return
    choice = select_item("Select a deck", decks)
    if choice is None:
        console.print("No deck selected.")
        return

    deck = load_deck(area, decks[choice], ws.root)
    for line_no in deck.skipped_lines:
        format_warning(f"line {line_no} skipped (no '|' separator)")
    if not deck.cards:
        console.print("Deck is empty or malformed.")
        return

    console.print("\n--- Starting flashcards ---")
    total = len(deck.cards)
    for i, card in enumerate(deck.cards, start=1):
        console.print(f"\nCard {i} of {total}")
        console.print(f"Front: {card.front}", markup=False)
        console.input("Press Enter to reveal back...")
        console.print(f"Back: {card.back}", markup=False)
        if i < total:
            console.input("Press Enter for next card...")
    console.print("--- Finished deck ---")


@app.command("version")
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Iceland[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
