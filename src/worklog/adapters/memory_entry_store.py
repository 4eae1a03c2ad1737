"""In-memory entry storage adapter."""

import logging
from dataclasses import replace
from datetime import date

from worklog.core.entries import Entry, EntryType, validate_entry_fields
from worklog.core.errors import NotFoundError

logger = logging.getLogger(__name__)


class InMemoryEntryStore:
    """
    Dict-backed entry storage.

    Implements EntryStore protocol. Ids are never reused, even after a
    delete. Entries are copied on the way in and out so callers cannot
    mutate stored state.
    """

    def __init__(self):
        self._entries: dict[int, Entry] = {}
        self._next_id = 1

    def create_entry(self, entry_date: date | str, entry_type: EntryType | str, text: str) -> Entry:
        """Validate and persist a new entry."""
        parsed_date, parsed_type, parsed_text = validate_entry_fields(entry_date, entry_type, text)
        entry = Entry(id=self._next_id, date=parsed_date, type=parsed_type, text=parsed_text)
        self._entries[entry.id] = entry
        self._next_id += 1
        logger.info(f"Created entry {entry.id}")
        return replace(entry)

    def update_entry(
        self, entry_id: int, entry_date: date | str, entry_type: EntryType | str, text: str
    ) -> Entry:
        """Replace an entry's fields."""
        parsed_date, parsed_type, parsed_text = validate_entry_fields(entry_date, entry_type, text)
        if entry_id not in self._entries:
            raise NotFoundError(entry_id)
        entry = Entry(id=entry_id, date=parsed_date, type=parsed_type, text=parsed_text)
        self._entries[entry_id] = entry
        logger.info(f"Updated entry {entry_id}")
        return replace(entry)

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry."""
        if entry_id not in self._entries:
            raise NotFoundError(entry_id)
        del self._entries[entry_id]
        logger.info(f"Deleted entry {entry_id}")

    def get_entry(self, entry_id: int) -> Entry:
        """Fetch one entry."""
        entry = self._entries.get(entry_id)
        if entry is None:
            raise NotFoundError(entry_id)
        return replace(entry)

    def list_entries(self) -> list[Entry]:
        """Fetch all entries."""
        return [replace(e) for e in self._entries.values()]
