"""Data models for winloss."""

from winloss.models.entry import Entry, EntryType
from winloss.models.filters import TimeFilter

__all__ = [
    "Entry",
    "EntryType",
    "TimeFilter",
]
