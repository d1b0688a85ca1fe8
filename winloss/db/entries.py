"""Entry store for winloss.

Holds the ordered entry collection in memory, newest first, and mirrors
the whole collection into the defaults store after every change.
"""

import logging
import sqlite3
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from winloss.db.defaults import DefaultsStore
from winloss.models import Entry, EntryType

logger = logging.getLogger(__name__)

# The key suffix is the only schema version marker.
ENTRIES_KEY = "winsAndLosses.entries.v1"

Subscriber = Callable[[tuple[Entry, ...]], None]

_ENTRY_LIST = TypeAdapter(list[Entry])


def encode_entries(entries: list[Entry]) -> bytes:
    """Encode entries as a JSON array of {id, type, text, date} records."""
    return _ENTRY_LIST.dump_json(entries, by_alias=True)


def decode_entries(data: bytes) -> list[Entry]:
    """Decode a JSON array produced by encode_entries.

    Raises:
        ValidationError: If the data is not a valid entry list.
    """
    return _ENTRY_LIST.validate_json(data)


class EntryStore:
    """Single source of truth for journal entries."""

    def __init__(self, defaults: DefaultsStore, key: str = ENTRIES_KEY):
        """Initialize the store and load any previously saved entries.

        Args:
            defaults: Key-value storage the collection is persisted to.
            key: Storage key for the encoded collection.
        """
        self.defaults = defaults
        self.key = key
        self._entries: list[Entry] = []
        self._subscribers: list[Subscriber] = []
        self.load()

    @property
    def entries(self) -> tuple[Entry, ...]:
        """All entries, most recent first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(
        self,
        entry_type: EntryType,
        text: str,
        created_at: Optional[datetime] = None,
    ) -> Entry:
        """Record a new entry at the head of the collection.

        The text is stored as given; trimming and the non-empty check
        belong to the caller.

        Args:
            entry_type: Category of the entry.
            text: Commentary.
            created_at: Timestamp override, defaults to now.

        Returns:
            The new entry.
        """
        entry = Entry(
            id=uuid4(),
            type=entry_type,
            text=text,
            created_at=created_at or datetime.now(),
        )
        self._set_entries([entry] + self._entries)
        return entry

    def load(self) -> None:
        """Replace the collection with the persisted one, if readable.

        Absent or unreadable storage leaves the collection empty.
        Undecodable data leaves the collection as it is and is only
        reported in the log.
        """
        try:
            data = self.defaults.data(self.key)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not read entries under %s: %s", self.key, e)
            return

        if data is None:
            logger.debug("No saved entries under %s", self.key)
            return

        try:
            decoded = decode_entries(data)
        except ValidationError as e:
            # The corrupt blob is overwritten by the next save.
            logger.warning(
                "Ignoring undecodable entries under %s (%d bytes): %s",
                self.key,
                len(data),
                e.error_count(),
            )
            return

        self._set_entries(decoded)

    def save(self) -> None:
        """Write the whole collection under the storage key.

        Failures are logged and otherwise ignored.
        """
        try:
            data = encode_entries(self._entries)
        except ValueError as e:
            logger.warning("Could not encode %d entries: %s", len(self._entries), e)
            return

        try:
            self.defaults.set(self.key, data)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not write entries under %s: %s", self.key, e)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call `callback(entries)` after every change to the collection.

        Returns:
            A function that removes the subscription. Calling it more
            than once has no effect.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_entries(self, entries: list[Entry]) -> None:
        self._entries = entries
        self.save()
        snapshot = self.entries
        for callback in list(self._subscribers):
            callback(snapshot)
