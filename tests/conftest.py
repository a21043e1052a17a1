"""Shared pytest configuration and fixtures for all tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a live watch")
    config.addinivalue_line("markers", "integration: tests driving a live watchdog observer")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def fsprobe_home(tmp_path, monkeypatch):
    """Keep config lookups and log files out of the real home directory."""
    home = tmp_path / ".fsprobe"
    monkeypatch.setenv("FSPROBE_HOME", str(home))
    monkeypatch.delenv("FSPROBE_CONFIG", raising=False)
    return home


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd
