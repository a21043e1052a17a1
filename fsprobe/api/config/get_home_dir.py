"""Get fsprobe home directory path or path under it."""

import os
from pathlib import Path

from ...constants import FSPROBE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get fsprobe home directory path or path under it.

    Checks FSPROBE_HOME environment variable first, defaults to ~/.fsprobe if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it
    """
    home_env = os.environ.get("FSPROBE_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / FSPROBE_HOME_EXT

    return home / Path(*parts) if parts else home
