"""Main CLI entry point for winloss.

This module provides the main click group, logging setup and lazy
loading of command modules.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from winloss.config import load_config

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when one of their commands
    is invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    # Capture
    "add": "winloss.cli.capture",
    "count": "winloss.cli.capture",
    # Log
    "log": "winloss.cli.log",
    # Interactive session
    "app": "winloss.cli.app",
    # Settings
    "config": "winloss.cli.settings",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(level: str, verbose: bool = False) -> None:
    """Route log records through rich on stderr.

    Args:
        level: Level name from the config file.
        verbose: Force DEBUG level.
    """
    resolved = logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="winloss")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """winloss - count your wins, losses and opportunities for growth.

    \b
    Quick Start:
      winloss add W "shipped the feature"   # Record a win
      winloss count                         # Record interactively
      winloss log --filter week             # Counts and entries, last 7 days
      winloss app                           # Capture and log in one session
    """
    config = load_config()
    setup_logging(config["logging"]["level"], verbose)

    # Shared state for subcommands; the store is opened on first use
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
