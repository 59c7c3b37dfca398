"""Rich terminal view for the interactive client."""
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from moviefaves.client.session import PaginationControls
from moviefaves.client.view import DisplayItem, ModalEntry


class ConsoleView:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self._count = 0
        self._modal_visible = False

    def clear_results(self) -> None:
        self._count = 0
        self.console.rule()

    def show_item(self, item: DisplayItem) -> None:
        self._count += 1
        line = Text(f"{self._count:>3}. ", style="bold")
        line.append(item.title)
        if item.interactive:
            line.append(f"  [{item.item_id}]", style="dim")
        if item.poster_url:
            line.append("  poster", style=f"dim link {item.poster_url}")
        self.console.print(line)

    def set_pagination(self, controls: PaginationControls) -> None:
        hints = []
        if controls.previous_visible:
            hints.append("p: previous page")
        if controls.next_visible:
            hints.append("n: next page")
        if hints:
            self.console.print("  ".join(hints), style="cyan")

    def show_modal(self, entries: Sequence[ModalEntry]) -> None:
        self._modal_visible = True
        body: List[str] = []
        for entry in entries:
            body.append(f"[bold]{escape(entry.label)}:[/bold] {escape(entry.value)}".rstrip())
            body.extend(f"  • {escape(child)}" for child in entry.children)
        self.console.print(Panel("\n".join(body), subtitle="x: close", expand=False))

    def hide_modal(self) -> None:
        if self._modal_visible:
            self._modal_visible = False
            self.console.print("(closed)", style="dim")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")
