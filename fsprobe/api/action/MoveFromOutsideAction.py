import os
from pathlib import Path

from ._write_one_byte_file import write_one_byte_file
from .Action import Action


class MoveFromOutsideAction(Action):
    """Rename a file from the parent of the watched root into it."""

    kind = "move-from-outside"
    name = "move from outside"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.source_path: Path | None = None

    def setup(self) -> None:
        self.source_path = self.root.parent / self.name
        write_one_byte_file(self.source_path)

    def act(self) -> None:
        if self.source_path is None:
            raise RuntimeError(f"'{self.name}' acted before setup")
        os.rename(self.source_path, self.join(self.name))
