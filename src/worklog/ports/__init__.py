"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryStore

__all__ = [
    "EntryStore",
]
