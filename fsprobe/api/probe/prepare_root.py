import shutil
from pathlib import Path

from ..errors.FixtureError import FixtureError


def prepare_root(root: Path, source_name: str) -> Path:
    """Recreate the scratch root and its watched subdirectory.

    Anything left under ``root`` by a previous run is removed.

    Returns:
        Path of the watched directory
    """
    source = root / source_name
    try:
        if root.exists():
            shutil.rmtree(root)
        root.mkdir(mode=0o755, parents=True)
        source.mkdir(mode=0o755)
    except OSError as exc:
        raise FixtureError(str(root), "prepare", exc) from exc
    return source
