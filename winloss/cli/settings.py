"""Settings command for winloss CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from winloss.config import CONFIG_PATH, create_template_config, get_storage_path, load_config

console = Console()


@click.command("config")
def show_config() -> None:
    """Show the resolved configuration.

    Creates ~/.config/winloss/config.toml from the defaults if it
    does not exist yet.
    """
    if not CONFIG_PATH.exists():
        path = create_template_config()
        console.print(f"[yellow]Configuration file created at[/yellow] [cyan]{path}[/cyan]")

    config = load_config()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")

    for section, values in config.items():
        if isinstance(values, dict):
            for key, value in values.items():
                table.add_row(f"{section}.{key}", str(value))
        else:
            table.add_row(section, str(values))

    console.print(Panel(
        table,
        title="[bold]Configuration[/bold]",
        subtitle=f"[dim]{CONFIG_PATH}[/dim]",
        border_style="cyan",
    ))
    console.print(f"[dim]Entries stored in {get_storage_path(config)}[/dim]")
