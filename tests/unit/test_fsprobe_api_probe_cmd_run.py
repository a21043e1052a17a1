"""Unit tests for fsprobe.api.probe.cmd_run."""

import importlib
import io
import json

import pytest

from fsprobe.api.errors import WatchError
from fsprobe.api.probe.cmd_run import cmd_run
from fsprobe.api.probe.ProbeReport import ProbeReport
from fsprobe.api.validate_output import validate_output

cmd_run_module = importlib.import_module("fsprobe.api.probe.cmd_run")


class FakeOrchestrator:
    """Records how it was built and returns a canned report."""

    calls: list = []
    report = ProbeReport()
    error: Exception | None = None

    def __init__(self, registry, source, config):
        self.registry = registry
        self.source = source
        self.config = config

    @classmethod
    def from_config(cls, registry, source, config):
        instance = cls(registry, source, config)
        cls.calls.append(instance)
        return instance

    def run(self):
        if self.error is not None:
            raise self.error
        return ProbeReport(
            lines=[(name, "C") for name in self.registry.names()],
            unattributed=self.report.unattributed,
            dropped_events=self.report.dropped_events,
            event_count=len(self.registry),
        )


@pytest.fixture
def fake_orchestrator(monkeypatch):
    class Fake(FakeOrchestrator):
        calls: list = []
        report = ProbeReport()
        error = None

    monkeypatch.setattr(cmd_run_module, "Orchestrator", Fake)
    return Fake


def test_success_writes_log_and_console(tmp_path, run_cmd, fake_orchestrator):
    console = io.StringIO()
    result = run_cmd(cmd_run, base_dir=tmp_path, only=["empty", "delete"], console=console)

    assert result.success
    assert result.announce == "Probing filesystem notifications..."
    log_path = tmp_path / "testing_monitor" / "monitor.log"
    assert log_path.read_text() == "empty: C\ndelete: C\n"
    assert console.getvalue() == log_path.read_text()

    output = result.output
    assert output["log_path"] == str(log_path.resolve())
    assert output["actions"] == ["empty", "delete"]
    assert output["report"] == {"empty": "C", "delete": "C"}
    assert output["errors"] == []
    assert validate_output(cmd_run, output) == output


def test_recreates_scratch_root(tmp_path, run_cmd, fake_orchestrator):
    leftover = tmp_path / "testing_monitor" / "source" / "stale"
    leftover.parent.mkdir(parents=True)
    leftover.write_text("x")

    run_cmd(cmd_run, base_dir=tmp_path, only=["empty"], console=io.StringIO())

    source = fake_orchestrator.calls[0].source
    assert source == (tmp_path / "testing_monitor" / "source").resolve()
    assert not leftover.exists()


def test_explicit_log_path(tmp_path, run_cmd, fake_orchestrator):
    log_path = tmp_path / "reports" / "out.log"
    result = run_cmd(cmd_run, log_path, base_dir=tmp_path, only=["one-byte"], console=io.StringIO())

    assert result.success
    assert log_path.read_text() == "1byte: C\n"
    assert not (tmp_path / "testing_monitor" / "monitor.log").exists()


def test_overrides_reach_orchestrator(tmp_path, run_cmd, fake_orchestrator):
    run_cmd(cmd_run, base_dir=tmp_path, settle_secs=0.25, queue_size=99, console=io.StringIO())
    config = fake_orchestrator.calls[0].config
    assert config.settle_secs == 0.25
    assert config.queue_size == 99
    assert len(fake_orchestrator.calls[0].registry) == 8


def test_config_file_is_honoured(tmp_path, run_cmd, fake_orchestrator):
    config_path = tmp_path / "probe.json"
    config_path.write_text(json.dumps({"root_name": "scratch", "log_name": "events.log"}))

    result = run_cmd(cmd_run, base_dir=tmp_path, only=["empty"], config_path=config_path, console=io.StringIO())

    assert result.success
    assert (tmp_path / "scratch" / "events.log").read_text() == "empty: C\n"


def test_dropped_events_become_warning(tmp_path, run_cmd, fake_orchestrator):
    fake_orchestrator.report = ProbeReport(dropped_events=4, unattributed={"move aside target": "C"})
    result = run_cmd(cmd_run, base_dir=tmp_path, only=["empty"], console=io.StringIO())

    assert result.success
    assert result.output["dropped_events"] == 4
    assert result.output["warnings"] == ["4 events dropped on a full notification queue"]
    assert result.output["unattributed"] == {"move aside target": "C"}


def test_harness_error_fails_without_report(tmp_path, run_cmd, fake_orchestrator):
    fake_orchestrator.error = WatchError("Notification stream stopped")
    result = run_cmd(cmd_run, base_dir=tmp_path, only=["empty"], console=io.StringIO())

    assert not result.success
    assert result.result.startswith("Probe failed: WatchError")
    assert result.output["errors"] == ["WatchError: Notification stream stopped"]
    assert result.output["log_path"] == ""
    assert not (tmp_path / "testing_monitor" / "monitor.log").exists()
    assert validate_output(cmd_run, result.output) == result.output


def test_unknown_kind_fails(tmp_path, run_cmd, fake_orchestrator):
    result = run_cmd(cmd_run, base_dir=tmp_path, only=["truncate"], console=io.StringIO())
    assert not result.success
    assert "Unknown action kind" in result.output["errors"][0]
    assert fake_orchestrator.calls == []


def test_invalid_config_fails(tmp_path, run_cmd, fake_orchestrator):
    config_path = tmp_path / "probe.json"
    config_path.write_text("{")
    result = run_cmd(cmd_run, base_dir=tmp_path, config_path=config_path, console=io.StringIO())
    assert not result.success
    assert "Invalid JSON" in result.output["errors"][0]


def test_progress_ends_complete(tmp_path, fake_orchestrator):
    result = cmd_run(base_dir=tmp_path, only=["empty"], console=io.StringIO())
    progress = list(result.progress_callback(result))
    assert progress[0][0] < progress[-1][0] == 1.0
    assert progress[-1][1] == "Complete"
