import os

from ._write_one_byte_file import write_one_byte_file
from .Action import Action


class MoveOutsideAction(Action):
    """Rename a watched file into the parent of the watched root."""

    kind = "move-outside"
    name = "move outside"

    def setup(self) -> None:
        write_one_byte_file(self.join(self.name))

    def act(self) -> None:
        os.rename(self.join(self.name), self.root.parent / self.name)
