"""Races the action sequence against the notification stream and builds the report."""

import logging
import queue
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from ...constants import DEFAULT_QUEUE_SIZE, PAUSE_SECS, POLL_INTERVAL_SECS, SETTLE_SECS
from ..action.ActionRegistry import ActionRegistry
from ..config.ProbeConfig import ProbeConfig
from ..errors.WatchError import WatchError
from .compress import compress
from .decode_event import decode_event
from .EventCollector import EventCollector
from .ProbeReport import ProbeReport
from .ProbeState import ProbeState
from .Watch import Watch

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs one probe: setup, watch, act in the background, drain, report.

    The foreground thread is the only consumer of the notification queue and
    the only writer of :attr:`collector`. A single background thread runs the
    registry's actions, waits ``settle_secs`` for trailing notifications and
    then sets the completion signal. The settle delay is a best-effort bound:
    notifications the OS delivers later than that are not reported.

    When draining fails, the background thread starts no further action and is
    joined before the error leaves :meth:`run`.
    """

    def __init__(
        self,
        registry: ActionRegistry,
        source: Path,
        *,
        pause_secs: float = PAUSE_SECS,
        settle_secs: float = SETTLE_SECS,
        queue_size: int = DEFAULT_QUEUE_SIZE,
        poll_interval_secs: float = POLL_INTERVAL_SECS,
        watch_factory: Callable[[Path, queue.Queue], Watch] = Watch,
    ) -> None:
        self.registry = registry
        self.source = Path(source)
        self.pause_secs = pause_secs
        self.settle_secs = settle_secs
        self.queue_size = queue_size
        self.poll_interval_secs = poll_interval_secs
        self._watch_factory = watch_factory
        self.collector = EventCollector()
        self.state = ProbeState.IDLE

    @classmethod
    def from_config(
        cls,
        registry: ActionRegistry,
        source: Path,
        config: ProbeConfig,
        **kwargs,
    ) -> "Orchestrator":
        return cls(
            registry,
            source,
            pause_secs=config.pause_secs,
            settle_secs=config.settle_secs,
            queue_size=config.queue_size,
            poll_interval_secs=config.poll_interval_secs,
            **kwargs,
        )

    def run(self, sink: TextIO | None = None) -> ProbeReport:
        """Run the whole probe once.

        Args:
            sink: Optional text stream receiving the report lines

        Raises:
            FixtureError: A scratch file operation failed
            WatchError: The watch could not be installed or stopped delivering
            ProtocolError: An event outside the known vocabulary arrived
        """
        if self.state is not ProbeState.IDLE:
            raise RuntimeError(f"Orchestrator already ran (state: {self.state.value})")

        try:
            # Fixture writes must happen before the watch exists
            self.registry.run_setup()

            events: queue.Queue = queue.Queue(maxsize=self.queue_size)
            watch = self._watch_factory(self.source, events)
            watch.start()
            try:
                self.state = ProbeState.WATCHING
                time.sleep(self.pause_secs)
                self._drain(events, watch)
            finally:
                watch.stop()

            self.state = ProbeState.REPORTING
            report = self._report(watch.dropped)
        except BaseException:
            self.state = ProbeState.FAILED
            raise

        if report.dropped_events:
            logger.warning("Dropped %d events on a full queue; report undercounts", report.dropped_events)
        logger.info("Recorded %d events for %d actions", report.event_count, len(report.lines))

        if sink is not None:
            report.write(sink)
        return report

    def _drive(self, done: threading.Event, abort: threading.Event, failures: list[BaseException]) -> None:
        try:
            self.registry.run_actions(abort)
            abort.wait(self.settle_secs)
        except BaseException as exc:  # re-raised by the foreground thread
            failures.append(exc)
        finally:
            done.set()

    def _drain(self, events: queue.Queue, watch: Watch) -> None:
        done = threading.Event()
        abort = threading.Event()
        failures: list[BaseException] = []
        driver = threading.Thread(
            target=self._drive, args=(done, abort, failures), name="fsprobe-driver", daemon=True
        )
        driver.start()
        self.state = ProbeState.DRAINING

        try:
            while not done.is_set():
                try:
                    event = events.get(timeout=self.poll_interval_secs)
                except queue.Empty:
                    if not watch.is_alive:
                        raise WatchError(f"Notification stream for {self.source} stopped") from None
                    continue
                self._record(event)

            # The completion signal can overtake the last queued notifications
            while True:
                try:
                    event = events.get_nowait()
                except queue.Empty:
                    break
                self._record(event)
        finally:
            # No action may start once the foreground gives up; an action already
            # running finishes before the run returns
            abort.set()
            driver.join()

        if failures:
            raise failures[0]

    def _record(self, event) -> None:
        basename, kind = decode_event(event)
        logger.debug("%s: %s", kind.name, basename)
        self.collector.record(basename, kind)

    def _report(self, dropped: int) -> ProbeReport:
        names = self.registry.names()
        owned = set(names)
        return ProbeReport(
            lines=[(name, compress(self.collector.tokens_for(name))) for name in names],
            unattributed={
                basename: compress(self.collector.tokens_for(basename))
                for basename in self.collector.basenames()
                if basename not in owned
            },
            dropped_events=dropped,
            event_count=len(self.collector),
        )
