from .Action import Action


class OneByteAction(Action):
    """Create a file and write exactly one byte."""

    kind = "one-byte"
    name = "1byte"

    def act(self) -> None:
        with self.create(self.name) as fh:
            fh.write(b"\x01")
