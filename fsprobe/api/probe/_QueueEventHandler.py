"""Watchdog handler forwarding events into a bounded queue."""

import logging
import queue

from watchdog.events import FileSystemEvent, FileSystemEventHandler

logger = logging.getLogger(__name__)


class _QueueEventHandler(FileSystemEventHandler):
    """Forwards every event to ``events`` without blocking the observer thread.

    Events that arrive while the queue is full are dropped and counted.
    """

    def __init__(self, events: queue.Queue) -> None:
        super().__init__()
        self._events = events
        self.dropped = 0

    def on_any_event(self, event: FileSystemEvent) -> None:
        try:
            self._events.put_nowait(event)
        except queue.Full:
            self.dropped += 1
            if self.dropped == 1:
                logger.warning("Notification queue full (%d), dropping events", self._events.maxsize)
