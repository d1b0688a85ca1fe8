"""Capture commands for winloss CLI.

Records wins, losses and opportunities for growth, either in one
command or through prompts.
"""

import click
from rich.console import Console

from winloss.cli.context import fail, get_entry_store, parse_entry_type
from winloss.models import EntryType
from winloss.views import CaptureView, EmptyEntryError

console = Console()


@click.command()
@click.argument("entry_type", metavar="TYPE", callback=parse_entry_type)
@click.argument("text", nargs=-1)
@click.pass_context
def add(ctx: click.Context, entry_type: EntryType, text: tuple[str, ...]) -> None:
    """Record an entry.

    TYPE is W, L or OFG. TEXT is the commentary; surrounding
    whitespace is trimmed.

    \b
    Examples:
      winloss add W shipped the feature
      winloss add OFG "ask for review earlier"
    """
    view = CaptureView(get_entry_store(ctx), console)

    try:
        entry = view.submit(entry_type, " ".join(text))
    except EmptyEntryError:
        fail(console, f"Tell me about your {entry_type.long}: commentary cannot be empty.")

    view.confirmation(entry)


@click.command()
@click.pass_context
def count(ctx: click.Context) -> None:
    """Record an entry interactively.

    Pick a category, then describe what happened.
    """
    view = CaptureView(get_entry_store(ctx), console)
    view.show_choices()

    choice = click.prompt(
        "Pick one",
        type=click.Choice([t.code for t in EntryType], case_sensitive=False),
    )
    entry_type = EntryType.parse(choice)

    text = click.prompt(view.prompt_for(entry_type), default="", show_default=False)

    try:
        entry = view.submit(entry_type, text)
    except EmptyEntryError:
        fail(console, "Commentary cannot be empty. Nothing was recorded.")

    view.confirmation(entry)
