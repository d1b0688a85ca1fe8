"""Capture view: records a new entry."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel

from winloss.db.entries import EntryStore
from winloss.models import Entry, EntryType


class EmptyEntryError(ValueError):
    """Raised when submitted commentary is blank after trimming."""


class CaptureView:
    """Creates entries from user input and pushes them into the store."""

    TITLE = "Count your..."

    def __init__(self, store: EntryStore, console: Optional[Console] = None):
        self.store = store
        self.console = console or Console()

    @staticmethod
    def prompt_for(entry_type: EntryType) -> str:
        """Get the question asked once a category is picked."""
        return f"Tell me about your {entry_type.long}."

    @staticmethod
    def can_submit(text: str) -> bool:
        """Whether the commentary has any non-whitespace content."""
        return bool(text.strip())

    def submit(self, entry_type: EntryType, text: str) -> Entry:
        """Trim the commentary and record the entry.

        Args:
            entry_type: Selected category.
            text: Raw commentary as typed.

        Returns:
            The recorded entry.

        Raises:
            EmptyEntryError: If the commentary is blank.
        """
        if not self.can_submit(text):
            raise EmptyEntryError("Commentary cannot be empty")
        return self.store.add(entry_type, text.strip())

    def show_choices(self) -> None:
        """Print the category picker."""
        choices = "   ".join(
            f"[bold]{t.code}[/bold] [dim]{t.long}[/dim]" for t in EntryType
        )
        self.console.print(Panel(
            choices,
            title=f"[bold]{self.TITLE}[/bold]",
            border_style="cyan",
        ))

    def confirmation(self, entry: Entry) -> None:
        """Print the acknowledgement for a recorded entry."""
        self.console.print(Panel(
            f"[green]✓[/green] {entry.type.long} recorded.",
            title="[bold green]Got you![/bold green]",
            border_style="green",
        ))
