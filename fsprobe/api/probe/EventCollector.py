"""Per-basename accumulation of observed event tokens."""

from .EventKind import EventKind


class EventCollector:
    """Maps a file basename to the tokens of the events seen for it, in arrival order.

    Not thread-safe: a single consumer thread must own all ``record`` calls.
    """

    def __init__(self) -> None:
        self._tokens: dict[str, list[str]] = {}
        self._count = 0

    def record(self, basename: str, kind: EventKind) -> None:
        self._tokens.setdefault(basename, []).append(kind.token)
        self._count += 1

    def tokens_for(self, basename: str) -> list[str]:
        return list(self._tokens.get(basename, []))

    def basenames(self) -> list[str]:
        """Every basename seen so far, in first-seen order."""
        return list(self._tokens)

    def __len__(self) -> int:
        return self._count
