"""Translate watchdog events into (basename, kind) pairs."""

import os

from watchdog.events import (
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
    FileSystemEvent,
)

from ..errors.ProtocolError import ProtocolError
from .EventKind import EventKind

# Exact event classes only: subclasses and any other event type are protocol violations
EVENT_KINDS: dict[type[FileSystemEvent], EventKind] = {
    FileModifiedEvent: EventKind.WRITE,
    FileCreatedEvent: EventKind.CREATE,
    FileDeletedEvent: EventKind.DELETE,
    FileMovedEvent: EventKind.RENAME,
}

# Event classes the watch subscribes to
WATCH_MASK: tuple[type[FileSystemEvent], ...] = tuple(EVENT_KINDS)


def decode_event(event: FileSystemEvent) -> tuple[str, EventKind]:
    """Return the basename and kind of ``event``.

    Moves are keyed by their source path.

    Raises:
        ProtocolError: If ``event`` is not one of the four known event classes
    """
    kind = EVENT_KINDS.get(type(event))
    if kind is None:
        raise ProtocolError(event)
    return os.path.basename(os.fsdecode(event.src_path)), kind
