import time

from .Action import Action

BURST_WRITES = 1024 * 1024


class OneAndOneMegabyteAction(Action):
    """Two bursts of single-byte writes separated by a short pause.

    Shows whether the watcher coalesces writes across the pause into one
    notification or reports the bursts separately.
    """

    kind = "one-and-one-megabyte"
    name = "1and1M"

    def act(self) -> None:
        one = b"\x01"
        with self.create(self.name) as fh:
            for _ in range(BURST_WRITES):
                fh.write(one)
            time.sleep(self.pause_secs)
            for _ in range(BURST_WRITES):
                fh.write(one)
