"""Scratch file operation failure."""

from .HarnessError import HarnessError


class FixtureError(HarnessError):
    """Creating, writing, removing or renaming a scratch file failed."""

    def __init__(self, action: str, phase: str, cause: BaseException) -> None:
        self.action = action
        self.phase = phase
        self.cause = cause
        super().__init__(f"{phase} of '{action}' failed: {cause}")
