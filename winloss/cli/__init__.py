"""CLI commands for winloss.

This package provides the command-line interface for winloss,
including capture, log and settings commands.
"""

from winloss.cli.main import cli, main

__all__ = ["cli", "main"]
