"""Run command - perform the action sequence and report observed events."""

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .._output_schemas.probe import ProbeRunOutput
from ..action.ActionRegistry import ActionRegistry
from ..config.ProbeConfig import ProbeConfig
from ..errors.HarnessError import HarnessError
from ..StageResult import StageResult
from ._TeeWriter import _TeeWriter
from .Orchestrator import Orchestrator
from .prepare_root import prepare_root


def _describe(exc: BaseException) -> str:
    message = f"{type(exc).__name__}: {exc}"
    cause = exc.__cause__
    if cause is not None and str(cause) not in str(exc):
        message = f"{message} (caused by {type(cause).__name__}: {cause})"
    return message


def cmd_run(
    log_path: Path | None = None,
    base_dir: Path | None = None,
    only: list[str] | None = None,
    settle_secs: float | None = None,
    queue_size: int | None = None,
    config_path: Path | None = None,
    console: TextIO | None = None,
) -> StageResult:
    """Run the probe once and write the per-action event report.

    Args:
        log_path: Report destination (default: <base_dir>/<root_name>/<log_name>)
        base_dir: Directory holding the scratch root (default: current directory)
        only: Restrict the run to these action kinds
        settle_secs: Override the trailing-notification wait
        queue_size: Override the notification queue capacity
        config_path: Config file (default: FSPROBE_CONFIG or ~/.fsprobe/config.json)
        console: Live copy of the report (default: stderr)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        root = base
        actions: list[str] = []
        try:
            yield (0.05, "Loading configuration...")
            config = ProbeConfig.load(config_path)
            overrides: dict = {}
            if settle_secs is not None:
                overrides["settle_secs"] = settle_secs
            if queue_size is not None:
                overrides["queue_size"] = queue_size
            if overrides:
                config = ProbeConfig(**{**config.model_dump(), **overrides})
            root = config.root_path(base)

            yield (0.1, f"Recreating scratch root {root}...")
            source = prepare_root(root, config.source_name)
            registry = ActionRegistry.build(source, only=only, pause_secs=config.pause_secs)
            actions = registry.names()

            yield (0.2, f"Running {len(registry)} actions under watch...")
            report = Orchestrator.from_config(registry, source, config).run()

            yield (0.9, "Writing report...")
            destination = Path(log_path) if log_path is not None else config.log_path(base)
            destination.parent.mkdir(parents=True, exist_ok=True)
            with destination.open("w", encoding="utf-8") as fh:
                report.write(_TeeWriter(fh, console or sys.stderr))
        except (HarnessError, ValueError, OSError) as exc:
            message = _describe(exc)
            result_obj.result = f"Probe failed: {message}"
            result_obj.output = ProbeRunOutput(
                errors=[message],
                warnings=[],
                root=str(root),
                log_path="",
                actions=actions,
                report={},
                unattributed={},
                event_count=0,
                dropped_events=0,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings: list[str] = []
        if report.dropped_events:
            warnings.append(f"{report.dropped_events} events dropped on a full notification queue")

        result_obj.result = f"Recorded {report.event_count} events for {len(report.lines)} actions"
        result_obj.output = ProbeRunOutput(
            errors=[],
            warnings=warnings,
            root=str(root),
            log_path=str(destination),
            actions=actions,
            report=report.as_dict(),
            unattributed=report.unattributed,
            event_count=report.event_count,
            dropped_events=report.dropped_events,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Probing filesystem notifications...",
        progress_callback=do_work,
    )
