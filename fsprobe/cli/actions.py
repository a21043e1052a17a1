"""Actions command for the CLI."""

from fsprobe.api.probe.cmd_actions import cmd_actions
from fsprobe.cli._handle_stage_result import _handle_stage_result


def actions_command() -> None:
    """List the filesystem actions in execution order."""
    _handle_stage_result(cmd_actions)()
