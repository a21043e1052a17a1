import os

from ._write_one_byte_file import write_one_byte_file
from .Action import Action


class MoveAsideAction(Action):
    """Rename a watched file within the same directory."""

    kind = "move-aside"
    name = "move aside"

    @property
    def target_name(self) -> str:
        return f"{self.name} target"

    def setup(self) -> None:
        write_one_byte_file(self.join(self.name))

    def act(self) -> None:
        os.rename(self.join(self.name), self.join(self.target_name))
