"""Run command for the CLI."""

from pathlib import Path

import typer

from fsprobe.api.probe.cmd_run import cmd_run
from fsprobe.cli._handle_stage_result import _handle_stage_result


def run_command(
    log_path: Path | None = typer.Argument(None, help="Report destination (default: <base>/testing_monitor/monitor.log)"),
    base: Path | None = typer.Option(None, "--base", help="Directory holding the scratch root (default: cwd)"),
    only: list[str] | None = typer.Option(None, "--only", help="Run only this action kind (repeatable)"),
    settle: float | None = typer.Option(None, "--settle", help="Seconds to wait for trailing notifications"),
    queue_size: int | None = typer.Option(None, "--queue-size", help="Notification queue capacity"),
    config: Path | None = typer.Option(None, "--config", help="Config file (default: FSPROBE_CONFIG)"),
) -> None:
    """Perform the action sequence under a watch and report the observed events.

    The scratch root is deleted and recreated on every run.
    """
    _handle_stage_result(cmd_run)(
        log_path=log_path,
        base_dir=base,
        only=only or None,
        settle_secs=settle,
        queue_size=queue_size,
        config_path=config,
    )
