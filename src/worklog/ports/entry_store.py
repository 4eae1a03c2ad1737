"""Entry storage interface."""

from datetime import date
from typing import Protocol

from worklog.core.entries import Entry, EntryType


class EntryStore(Protocol):
    """Interface for persisting journal entries in any backend."""

    def create_entry(self, entry_date: date | str, entry_type: EntryType | str, text: str) -> Entry:
        """Validate and persist a new entry. Raises ValidationError."""
        ...

    def update_entry(
        self, entry_id: int, entry_date: date | str, entry_type: EntryType | str, text: str
    ) -> Entry:
        """Replace an entry's fields. Raises ValidationError or NotFoundError."""
        ...

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry. Raises NotFoundError, also for repeated deletes."""
        ...

    def get_entry(self, entry_id: int) -> Entry:
        """Fetch one entry. Raises NotFoundError."""
        ...

    def list_entries(self) -> list[Entry]:
        """Fetch all entries, in no particular order."""
        ...
