"""Harness error taxonomy: fixture, watch and protocol failures."""

from .FixtureError import FixtureError
from .HarnessError import HarnessError
from .ProtocolError import ProtocolError
from .WatchError import WatchError

__all__ = ["FixtureError", "HarnessError", "ProtocolError", "WatchError"]
