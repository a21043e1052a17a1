"""Unrecognized notification event."""

from typing import Any

from .HarnessError import HarnessError


class ProtocolError(HarnessError):
    """The watcher delivered an event outside the Write/Create/Delete/Rename vocabulary."""

    def __init__(self, event: Any) -> None:
        self.event = event
        super().__init__(f"wrong event value: {type(event).__name__} {event!r}")
