"""Base class for scripted filesystem scenarios."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from ...constants import PAUSE_SECS
from ._create_file import create_file


class Action(ABC):
    """One filesystem scenario bound to a watched root.

    ``name`` is the report key and, for most variants, also the basename of the
    file under test. ``kind`` identifies the variant on the command line.
    """

    kind: str = ""
    name: str = ""

    def __init__(self, root: Path, pause_secs: float = PAUSE_SECS) -> None:
        self.root = Path(root)
        self.pause_secs = pause_secs

    def setup(self) -> None:
        """Create preconditions. Runs before the watch is installed."""

    @abstractmethod
    def act(self) -> None:
        """Perform the operation under observation."""

    @classmethod
    def defines_setup(cls) -> bool:
        """True if the variant overrides :meth:`setup`."""
        return cls.setup is not Action.setup

    @property
    def has_setup(self) -> bool:
        return self.defines_setup()

    def join(self, file_name: str) -> Path:
        return self.root / file_name

    def create(self, file_name: str) -> BinaryIO:
        return create_file(self.join(file_name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self.root)!r})"
