"""Config API module."""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .ProbeConfig import ProbeConfig

__all__ = ["ProbeConfig", "get_home_dir", "get_package_version"]
