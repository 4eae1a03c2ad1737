"""Pure entry domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .errors import ValidationError

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


class EntryType(Enum):
    """The kind of note an entry records."""

    WORK = "work"
    LEARNINGS = "learnings"
    THOUGHTS = "thoughts"

    @property
    def label(self) -> str:
        return self.value.capitalize()


ENTRY_TYPES = tuple(t.value for t in EntryType)


@dataclass
class Entry:
    """A single dated, typed journal note."""

    id: int
    date: date
    type: EntryType
    text: str

    def to_dict(self) -> dict:
        """Serialize for JSON responses."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "text": self.text,
        }


def validate_entry_fields(
    entry_date: date | str | None,
    entry_type: EntryType | str | None,
    text: str | None,
) -> tuple[date, EntryType, str]:
    """
    Normalize raw entry fields, or reject them.

    Accepts a date or ISO YYYY-MM-DD string, a type name or EntryType,
    and the entry text. Every invalid field is collected into a single
    ValidationError so callers can report them all at once.

    Pure function - no I/O.
    """
    errors: dict[str, str] = {}

    parsed_date = None
    if isinstance(entry_date, datetime):
        parsed_date = entry_date.date()
    elif isinstance(entry_date, date):
        parsed_date = entry_date
    elif entry_date is None or not str(entry_date).strip():
        errors["date"] = "required"
    else:
        raw = str(entry_date).strip()
        # fromisoformat alone also takes 20240103 and 2024-W01-3
        if not ISO_DATE.fullmatch(raw):
            errors["date"] = "must be a YYYY-MM-DD date"
        else:
            try:
                parsed_date = date.fromisoformat(raw)
            except ValueError:
                errors["date"] = "must be a YYYY-MM-DD date"

    parsed_type = None
    if isinstance(entry_type, EntryType):
        parsed_type = entry_type
    elif entry_type is None or not str(entry_type).strip():
        errors["type"] = "required"
    else:
        try:
            parsed_type = EntryType(str(entry_type).strip().lower())
        except ValueError:
            errors["type"] = f"must be one of {', '.join(ENTRY_TYPES)}"

    if text is None or not str(text).strip():
        errors["text"] = "required"

    if errors:
        raise ValidationError(errors)

    return parsed_date, parsed_type, str(text)
