from .Action import Action


class EmptyAction(Action):
    """Create a zero-byte file."""

    kind = "empty"
    name = "empty"

    def act(self) -> None:
        self.create(self.name).close()
