"""Closed vocabulary of change notifications the harness understands."""

from enum import Enum


class EventKind(Enum):
    """Notification kind, valued by its single-letter report token."""

    WRITE = "W"
    CREATE = "C"
    DELETE = "D"
    RENAME = "R"

    @property
    def token(self) -> str:
        return self.value
