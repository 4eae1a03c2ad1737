"""Error taxonomy shared by the core, the stores and the surfaces."""


class WorklogError(Exception):
    """Base class for all work journal errors."""


class ValidationError(WorklogError):
    """One or more entry fields are missing or invalid.

    `fields` maps each offending field name to the reason it was rejected.
    """

    def __init__(self, fields: dict[str, str]):
        self.fields = dict(fields)
        details = ", ".join(f"{name} ({reason})" for name, reason in self.fields.items())
        super().__init__(f"Invalid entry: {details}")


class NotFoundError(WorklogError):
    """No entry exists with the requested id."""

    def __init__(self, entry_id: int):
        self.entry_id = entry_id
        super().__init__(f"Entry {entry_id} not found")


class GroupingError(WorklogError):
    """An entry reached the grouping engine in an inconsistent state."""
