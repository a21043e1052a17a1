"""Compressed per-action event report."""

from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class ProbeReport:
    """One compressed token line per action, in registry order.

    ``unattributed`` holds basenames that no action owns (e.g. rename targets).
    """

    lines: list[tuple[str, str]] = field(default_factory=list)
    unattributed: dict[str, str] = field(default_factory=dict)
    dropped_events: int = 0
    event_count: int = 0

    def write(self, sink: TextIO) -> None:
        for name, tokens in self.lines:
            sink.write(f"{name}: {tokens}\n")
        sink.flush()

    def render(self) -> str:
        return "".join(f"{name}: {tokens}\n" for name, tokens in self.lines)

    def as_dict(self) -> dict[str, str]:
        return dict(self.lines)
