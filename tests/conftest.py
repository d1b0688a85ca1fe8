"""Shared fixtures for winloss tests."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from winloss.db.defaults import DefaultsStore
from winloss.db.entries import EntryStore


@pytest.fixture
def temp_defaults():
    """Create a temporary defaults database."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield DefaultsStore(Path(tmpdir) / "defaults.db")


@pytest.fixture
def store(temp_defaults: DefaultsStore) -> EntryStore:
    """Create an empty entry store over a temporary database."""
    return EntryStore(temp_defaults)


@pytest.fixture
def console() -> Console:
    """Create a console that records output to a string buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)
