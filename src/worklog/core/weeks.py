"""Pure weekly grouping logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable

from .entries import Entry, EntryType
from .errors import GroupingError

MONDAY = 0
SUNDAY = 6

WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


@dataclass
class WeekBucket:
    """Entries sharing a calendar week, split by type."""

    week_start: date
    work: list[Entry] = field(default_factory=list)
    learnings: list[Entry] = field(default_factory=list)
    thoughts: list[Entry] = field(default_factory=list)

    @property
    def entries(self) -> list[Entry]:
        """All entries in the bucket, work first, then learnings, then thoughts."""
        return [*self.work, *self.learnings, *self.thoughts]

    @property
    def label(self) -> str:
        return format_week_label(self.week_start)

    def for_type(self, entry_type: EntryType) -> list[Entry]:
        """Sub-list holding entries of the given type."""
        return getattr(self, EntryType(entry_type).value)

    def to_dict(self) -> dict:
        """Serialize in the shape the list view renders from."""
        return {
            "dateString": self.week_start.isoformat(),
            "label": self.label,
            "work": [e.to_dict() for e in self.work],
            "learnings": [e.to_dict() for e in self.learnings],
            "thoughts": [e.to_dict() for e in self.thoughts],
        }


def parse_week_start_day(name: str) -> int:
    """Map a weekday name like 'Sunday' to its date.weekday() number."""
    try:
        return WEEKDAYS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown weekday: {name!r}") from None


def week_start(day: date, week_start_day: int = MONDAY) -> date:
    """
    Most recent week_start_day on or before the given date.

    Calendar arithmetic only, so no timezone can push a date into a
    neighbouring week.
    """
    if isinstance(day, datetime):
        day = day.date()
    offset = (day.weekday() - week_start_day) % 7
    return day - timedelta(days=offset)


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_week_label(start: date) -> str:
    """Heading for a week, e.g. 'Week of January 1st, 2024'."""
    return f"Week of {start.strftime('%B')} {_ordinal(start.day)}, {start.year}"


def group_by_week(
    entries: Iterable[Entry],
    week_start_day: int = MONDAY,
) -> list[WeekBucket]:
    """
    Partition entries into week buckets, newest week first.

    Within a bucket each type sub-list is ordered newest date first,
    with equal dates kept in creation (id) order. Raises GroupingError
    for an entry whose type is not a known EntryType.

    Pure function - no I/O.
    """
    buckets: dict[date, WeekBucket] = {}

    for entry in sorted(entries, key=lambda e: (-e.date.toordinal(), e.id)):
        try:
            entry_type = EntryType(entry.type)
        except ValueError:
            raise GroupingError(
                f"Entry {entry.id} has unknown type {entry.type!r}"
            ) from None

        key = week_start(entry.date, week_start_day)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = WeekBucket(week_start=key)
        bucket.for_type(entry_type).append(entry)

    return sorted(buckets.values(), key=lambda b: b.week_start, reverse=True)
