"""Notification source failure."""

from .HarnessError import HarnessError


class WatchError(HarnessError):
    """The watch could not be installed or its event stream broke mid-run."""
