"""Log view: per-category counts and the filtered entry list."""

from datetime import datetime
from typing import Callable, Optional

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from winloss.db.entries import EntryStore
from winloss.journal import Counts, summarize
from winloss.models import Entry, EntryType, TimeFilter

DATE_FORMAT = "%Y-%m-%d %H:%M"

TYPE_STYLES = {
    EntryType.WIN: "green",
    EntryType.LOSS: "red",
    EntryType.OPPORTUNITY_FOR_GROWTH: "yellow",
}


def build_count_cards(counts: Counts) -> Columns:
    """Build one card per category showing its count."""
    cards = []
    for entry_type in EntryType:
        style = TYPE_STYLES[entry_type]
        cards.append(Panel(
            f"[bold {style}]{counts.for_type(entry_type)}[/bold {style}]",
            title=f"[bold]{entry_type.code}[/bold]",
            border_style="dim",
            expand=True,
        ))
    return Columns(cards, equal=True, expand=True)


def build_entries_table(entries: list[Entry], time_filter: TimeFilter) -> Table:
    """Build the entry table, in the order given."""
    table = Table(
        title=f"Log ({time_filter.label})",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Type", style="bold", justify="center")
    table.add_column("Date/Time", style="dim")
    table.add_column("Entry")

    for entry in entries:
        style = TYPE_STYLES[entry.type]
        table.add_row(
            f"[{style}]{entry.type.code}[/{style}]",
            entry.created_at.strftime(DATE_FORMAT),
            Text(entry.text),
        )

    return table


class LogView:
    """Renders counts and entries for the selected time window.

    While open, the view is subscribed to the store and re-renders on
    every change. Use it as a context manager or call open()/close().
    """

    def __init__(
        self,
        store: EntryStore,
        console: Optional[Console] = None,
        time_filter: TimeFilter = TimeFilter.ALL,
    ):
        self.store = store
        self.console = console or Console()
        self.time_filter = time_filter
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def is_open(self) -> bool:
        return self._unsubscribe is not None

    def open(self) -> "LogView":
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self._on_change)
        return self

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "LogView":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def summary(self, now: Optional[datetime] = None) -> tuple[list[Entry], Counts]:
        """Get the filtered entries and their counts."""
        return summarize(self.store.entries, self.time_filter, now)

    def set_filter(self, time_filter: TimeFilter) -> None:
        """Switch the time window and re-render."""
        self.time_filter = time_filter
        self.render()

    def render(self, now: Optional[datetime] = None) -> None:
        """Print counts and the entry list."""
        filtered, counts = self.summary(now or datetime.now())

        self.console.print(build_count_cards(counts))

        if not filtered:
            self.console.print(Panel(
                "[dim]No entries found[/dim]",
                title=f"[bold]Log ({self.time_filter.label})[/bold]",
                border_style="dim",
            ))
            return

        self.console.print(build_entries_table(filtered, self.time_filter))

    def _on_change(self, entries: tuple[Entry, ...]) -> None:
        self.render()
