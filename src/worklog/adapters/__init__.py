"""Adapters - I/O implementations of ports."""

from .memory_entry_store import InMemoryEntryStore
from .sql_entry_store import SqlEntryStore

__all__ = [
    "InMemoryEntryStore",
    "SqlEntryStore",
]
