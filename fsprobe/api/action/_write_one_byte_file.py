from pathlib import Path

from ._create_file import create_file


def write_one_byte_file(path: Path) -> None:
    """Create ``path`` holding a single byte."""
    with create_file(path) as fh:
        fh.write(b"\x01")
