"""Streaming run-length compression of report tokens."""

from typing import TextIO


class RunLengthCompressor:
    """Collapses consecutive equal tokens into ``token(count)``.

    A run of one is written as the bare token. Call :meth:`flush` at the end of
    the stream, otherwise the final run is lost.

    Example: ``W W W C`` is written as ``W(3)C``.
    """

    def __init__(self, sink: TextIO) -> None:
        self._sink = sink
        self._last: str | None = None
        self._run = 0

    def push(self, token: str) -> None:
        if self._run and token == self._last:
            self._run += 1
            return
        self.flush()
        self._last = token
        self._run = 1

    def flush(self) -> None:
        if not self._run:
            return
        if self._run == 1:
            self._sink.write(f"{self._last}")
        else:
            self._sink.write(f"{self._last}({self._run})")
        self._last = None
        self._run = 0
