from pathlib import Path
from typing import BinaryIO


def create_file(path: Path) -> BinaryIO:
    """Create or truncate ``path`` for unbuffered binary writes.

    Unbuffered so that every ``write()`` reaches the OS as its own write call.
    """
    return open(path, "wb", buffering=0)  # noqa: SIM115
