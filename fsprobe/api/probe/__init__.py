"""Probe module - watch/act orchestration, event collection and reporting."""

from .compress import compress
from .decode_event import WATCH_MASK, decode_event
from .EventCollector import EventCollector
from .EventKind import EventKind
from .Orchestrator import Orchestrator
from .ProbeReport import ProbeReport
from .ProbeState import ProbeState
from .RunLengthCompressor import RunLengthCompressor
from .Watch import Watch

__all__ = [
    "WATCH_MASK",
    "EventCollector",
    "EventKind",
    "Orchestrator",
    "ProbeReport",
    "ProbeState",
    "RunLengthCompressor",
    "Watch",
    "compress",
    "decode_event",
]
