from typing import TextIO


class _TeeWriter:
    """Text sink duplicating every write to several streams."""

    def __init__(self, *sinks: TextIO) -> None:
        self._sinks = sinks

    def write(self, text: str) -> int:
        for sink in self._sinks:
            sink.write(text)
        return len(text)

    def flush(self) -> None:
        for sink in self._sinks:
            sink.flush()
