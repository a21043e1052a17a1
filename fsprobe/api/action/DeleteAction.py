import os

from ._write_one_byte_file import write_one_byte_file
from .Action import Action


class DeleteAction(Action):
    """Remove a file that existed before watching started."""

    kind = "delete"
    name = "delete"

    def setup(self) -> None:
        write_one_byte_file(self.join(self.name))

    def act(self) -> None:
        os.remove(self.join(self.name))
