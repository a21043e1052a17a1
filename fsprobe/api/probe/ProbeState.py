from enum import Enum


class ProbeState(Enum):
    """Lifecycle of one orchestrator run."""

    IDLE = "idle"
    WATCHING = "watching"
    DRAINING = "draining"
    REPORTING = "reporting"
    FAILED = "failed"
