"""Shared command helpers: store access and error reporting."""

from typing import NoReturn

import click
from rich.console import Console
from rich.panel import Panel

from winloss.config import get_storage_path, load_config
from winloss.db.defaults import DefaultsStore
from winloss.db.entries import EntryStore
from winloss.models import EntryType, TimeFilter


def get_entry_store(ctx: click.Context) -> EntryStore:
    """Get the process-wide entry store, creating it on first use.

    The store is kept on the click context object so every command
    in one invocation shares it.
    """
    obj = ctx.ensure_object(dict)
    if "store" not in obj:
        config = obj.get("config") or load_config()
        obj["config"] = config
        defaults = DefaultsStore(get_storage_path(config))
        obj["store"] = EntryStore(defaults)
    return obj["store"]


def default_filter(ctx: click.Context) -> TimeFilter:
    """Get the log filter configured in [log] default_filter."""
    obj = ctx.ensure_object(dict)
    config = obj.get("config") or load_config()
    try:
        return TimeFilter.parse(str(config["log"]["default_filter"]))
    except ValueError:
        return TimeFilter.ALL


def parse_entry_type(ctx: click.Context, param: click.Parameter, value):
    """Click callback converting text to an EntryType."""
    if value is None or isinstance(value, EntryType):
        return value
    try:
        return EntryType.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def parse_time_filter(ctx: click.Context, param: click.Parameter, value):
    """Click callback converting text to a TimeFilter."""
    if value is None or isinstance(value, TimeFilter):
        return value
    try:
        return TimeFilter.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def fail(console: Console, message: str, title: str = "Error") -> NoReturn:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)
