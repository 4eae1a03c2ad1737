"""Functional core - pure business logic with no I/O."""

from .entries import ENTRY_TYPES, Entry, EntryType, validate_entry_fields
from .errors import GroupingError, NotFoundError, ValidationError, WorklogError
from .weeks import (
    MONDAY,
    SUNDAY,
    WeekBucket,
    format_week_label,
    group_by_week,
    parse_week_start_day,
    week_start,
)

__all__ = [
    # Entries
    "ENTRY_TYPES",
    "Entry",
    "EntryType",
    "validate_entry_fields",
    # Errors
    "WorklogError",
    "ValidationError",
    "NotFoundError",
    "GroupingError",
    # Weeks
    "MONDAY",
    "SUNDAY",
    "WeekBucket",
    "format_week_label",
    "group_by_week",
    "parse_week_start_day",
    "week_start",
]
