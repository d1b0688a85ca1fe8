"""Interactive session for winloss CLI.

Keeps a capture view and a subscribed log view over one store, so
every recorded entry immediately refreshes the counts.
"""

from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from winloss.cli.context import default_filter, get_entry_store
from winloss.db.entries import EntryStore
from winloss.models import EntryType, TimeFilter
from winloss.views import CaptureView, EmptyEntryError, LogView

console = Console()

HELP_TEXT = (
    "[bold]w[/bold] | [bold]l[/bold] | [bold]ofg[/bold] [dim][text][/dim]  record an entry\n"
    "[bold]log[/bold] [dim][all|week|month|3m|6m][/dim]      show the log, optionally switching window\n"
    "[bold]help[/bold]                            show this help\n"
    "[bold]quit[/bold]                            leave the session"
)

QUIT_COMMANDS = {"q", "quit", "exit"}


class Session:
    """Dispatches session commands to the capture and log views."""

    def __init__(
        self,
        store: EntryStore,
        console: Console,
        time_filter: TimeFilter = TimeFilter.ALL,
        ask: Optional[Callable[[str], str]] = None,
    ):
        """Initialize the session.

        Args:
            store: Entry store shared by both views.
            console: Console both views print to.
            time_filter: Initial log window.
            ask: Prompt function used when an entry is given without text.
        """
        self.console = console
        self.capture = CaptureView(store, console)
        self.log = LogView(store, console, time_filter)
        self.ask = ask or (lambda question: click.prompt(question, default="", show_default=False))

    def __enter__(self) -> "Session":
        self.log.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.log.close()

    def handle(self, line: str) -> bool:
        """Run one command line.

        Returns:
            False when the session should end.
        """
        command, _, rest = line.strip().partition(" ")
        command = command.lower()

        if not command:
            return True
        if command in QUIT_COMMANDS:
            return False
        if command == "help":
            self.console.print(Panel(HELP_TEXT, title="[bold]Commands[/bold]", border_style="dim"))
            return True
        if command == "log":
            self._show_log(rest)
            return True

        try:
            entry_type = EntryType.parse(command)
        except ValueError as e:
            self.console.print(f"[red]{escape(str(e))}[/red] [dim](type 'help')[/dim]")
            return True

        self._record(entry_type, rest)
        return True

    def _show_log(self, filter_text: str) -> None:
        if not filter_text.strip():
            self.log.render()
            return
        try:
            time_filter = TimeFilter.parse(filter_text)
        except ValueError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        self.log.set_filter(time_filter)

    def _record(self, entry_type: EntryType, text: str) -> None:
        if not self.capture.can_submit(text):
            text = self.ask(self.capture.prompt_for(entry_type))
        try:
            entry = self.capture.submit(entry_type, text)
        except EmptyEntryError:
            self.console.print("[yellow]Nothing recorded: commentary was empty.[/yellow]")
            return
        # The subscribed log view has already re-rendered
        self.capture.confirmation(entry)


@click.command()
@click.pass_context
def app(ctx: click.Context) -> None:
    """Capture entries and watch the counts in one session.

    \b
    Commands inside the session:
      w shipped it       # Record a win
      ofg                # Record an OFG, prompting for text
      log week           # Switch the log to the last 7 days
      quit
    """
    store = get_entry_store(ctx)

    with Session(store, console, default_filter(ctx)) as session:
        session.log.render()
        session.capture.show_choices()
        while True:
            try:
                line = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
            except (click.Abort, EOFError):
                console.print()
                break
            if not session.handle(line):
                break
