"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from ._run_single_execution import _run_single_execution

if TYPE_CHECKING:
    import click

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)
    """

    def _extract_display_format() -> str:
        """Get the display format from the active Typer/Click context.

        Raises:
            RuntimeError: If no context is available or the flag was never set.
        """
        import click

        context: click.Context | None = click.get_current_context(silent=True)
        if context is None:
            raise RuntimeError("Display format unavailable: Typer context is missing")

        current: click.Context | None = context
        while current is not None:
            obj = current.obj
            if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
                return obj["display_format"]
            current = current.parent

        raise RuntimeError("Display format not set in the Typer context chain")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from fsprobe.cli.display.CLIDisplay import CLIDisplay

        try:
            display_format = _extract_display_format()
        except RuntimeError:
            display_format = "yaml"

        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
