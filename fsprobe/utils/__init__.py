"""fsprobe utility functions.

Each file in this package exports exactly one function or class.
"""

from .configure_logging import configure_logging

__all__ = ["configure_logging"]
