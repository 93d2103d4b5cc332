"""Interactive prompts: a Textual item selector and a typed confirmation."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Label, OptionList


CSS = """
Screen {
    background: $surface;
}

#selector-prompt {
    text-style: bold;
    color: $text;
    margin: 1 0 0 0;
    padding: 0 1;
}

#selector-items {
    height: 1fr;
    margin: 1 1;
    border: tall $primary-background-darken-2;
}
"""


class SelectorApp(App[int | None]):
    """Pick one of N items; exits with the chosen index or None."""

    TITLE = "Iceland"
    CSS = CSS

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Quit"),
    ]

    def __init__(self, prompt: str, items: list[str], default: int = 0) -> None:
        super().__init__()
        self._prompt = prompt
        self._items = items
        self._default = default

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label(self._prompt, id="selector-prompt")
        yield OptionList(*self._items, id="selector-items")
        yield Footer()

    def on_mount(self) -> None:
        options = self.query_one("#selector-items", OptionList)
        options.highlighted = self._default
        options.focus()

    @on(OptionList.OptionSelected)
    def _on_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(event.option_index)

    def action_cancel(self) -> None:
        self.exit(None)


def select_item(prompt: str, items: list[str], default: int = 0) -> int | None:
    """Run the selector. Returns None when there is nothing to pick or the user cancels."""
    if not items:
        return None
    default = min(max(default, 0), len(items) - 1)
    return SelectorApp(prompt, items, default).run()


class ConsoleConfirmation:
    """Asks on the terminal; only a literal `yes` counts as agreement."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def __call__(self, message: str) -> bool:
        self.console.print(f"[bold yellow]WARNING:[/bold yellow] {message}")
        answer = Prompt.ask("Type 'yes' to confirm", console=self.console, default="", show_default=False)
        return answer.strip() == "yes"
