"""Recursive watchdog watch over the scratch directory."""

import logging
import queue
from collections.abc import Callable
from pathlib import Path

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from ..errors.WatchError import WatchError
from ._QueueEventHandler import _QueueEventHandler
from .decode_event import WATCH_MASK

logger = logging.getLogger(__name__)


class Watch:
    """Delivers Write/Create/Delete/Rename events under ``path`` into ``events``."""

    def __init__(
        self,
        path: Path,
        events: queue.Queue,
        observer_factory: Callable[[], BaseObserver] = Observer,
    ) -> None:
        self.path = Path(path)
        self._handler = _QueueEventHandler(events)
        self._observer_factory = observer_factory
        self._observer: BaseObserver | None = None

    def start(self) -> None:
        """Install the watch.

        Raises:
            WatchError: If the path is not a directory or the OS refuses the watch
        """
        if self._observer is not None:
            logger.debug("Already watching: %s", self.path)
            return

        if not self.path.is_dir():
            raise WatchError(f"Watch path is not a directory: {self.path}")

        observer = self._observer_factory()
        try:
            observer.schedule(self._handler, str(self.path), recursive=True, event_filter=list(WATCH_MASK))
            observer.start()
        except OSError as exc:
            raise WatchError(f"Failed to watch {self.path}: {exc}") from exc

        self._observer = observer
        logger.info("Started watching: %s", self.path)

    def stop(self) -> None:
        if self._observer is None:
            return

        self._observer.stop()
        self._observer.join(timeout=5.0)
        self._observer = None
        logger.info("Stopped watching: %s", self.path)

    @property
    def is_alive(self) -> bool:
        """True while the observer and all of its emitters are running."""
        observer = self._observer
        if observer is None or not observer.is_alive():
            return False
        return all(emitter.is_alive() for emitter in observer.emitters)

    @property
    def dropped(self) -> int:
        """Events discarded because the queue was full."""
        return self._handler.dropped

    def __enter__(self) -> "Watch":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
