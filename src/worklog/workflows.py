"""Shared workflow layer between the CLI and the web app.

Each function takes an explicit store so callers decide which backend
is in play; nothing here holds a global connection.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from .adapters.sql_entry_store import SqlEntryStore
from .config import Config
from .core.entries import Entry
from .core.weeks import WeekBucket, group_by_week
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)

DELETE_ACTION = "delete"


def get_store(config: Config) -> SqlEntryStore:
    """Build the SQL store for the configured database, creating the schema."""
    if config.database_url.startswith("sqlite:///"):
        db_path = config.database_url.removeprefix("sqlite:///")
        if db_path and db_path != ":memory:":
            Path(db_path).expanduser().parent.mkdir(parents=True, exist_ok=True)
    store = SqlEntryStore.from_url(config.database_url)
    store.create_schema()
    return store


def list_weeks(store: EntryStore, config: Config) -> list[WeekBucket]:
    """Load every entry and group it by week, newest week first."""
    entries = store.list_entries()
    return group_by_week(entries, config.week_start_weekday)


def create_from_form(store: EntryStore, form: Mapping[str, str]) -> Entry:
    """Create an entry from submitted date/type/text fields."""
    return store.create_entry(form.get("date"), form.get("type"), form.get("text"))


def edit_from_form(store: EntryStore, entry_id: int, form: Mapping[str, str]) -> Entry | None:
    """
    Apply an edit-page submission.

    `_action=delete` removes the entry and returns None; anything else
    saves the submitted fields and returns the updated entry.
    """
    if form.get("_action") == DELETE_ACTION:
        store.delete_entry(entry_id)
        return None
    return store.update_entry(entry_id, form.get("date"), form.get("type"), form.get("text"))
