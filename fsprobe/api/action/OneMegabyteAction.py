from .Action import Action

CHUNK_SIZE = 1000
CHUNK_COUNT = 1000


class OneMegabyteAction(Action):
    """Write 1,000,000 bytes as one continuous burst of 1000-byte chunks."""

    kind = "one-megabyte"
    name = "1M"

    def act(self) -> None:
        chunk = bytes(CHUNK_SIZE)
        with self.create(self.name) as fh:
            for _ in range(CHUNK_COUNT):
                fh.write(chunk)
