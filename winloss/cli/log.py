"""Log command for winloss CLI.

Shows per-category counts and the entries for a time window,
most recent first.
"""

from typing import Optional

import click
from rich.console import Console

from winloss.cli.context import default_filter, get_entry_store, parse_time_filter
from winloss.models import TimeFilter
from winloss.views import LogView

console = Console()


@click.command("log")
@click.option(
    "--filter", "-f", "time_filter",
    default=None,
    callback=parse_time_filter,
    help="Time window: all, week, month, 3m or 6m.",
)
@click.pass_context
def log_entries(ctx: click.Context, time_filter: Optional[TimeFilter]) -> None:
    """Display counts and entries.

    \b
    Examples:
      winloss log              # Everything
      winloss log -f week      # Last 7 days
      winloss log -f 3m        # Last 3 months
    """
    store = get_entry_store(ctx)
    view = LogView(store, console, time_filter or default_filter(ctx))
    view.render()
