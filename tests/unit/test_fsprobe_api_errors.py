"""Unit tests for the fsprobe error taxonomy."""

from watchdog.events import FileClosedEvent

from fsprobe.api.errors import FixtureError, HarnessError, ProtocolError, WatchError


def test_all_errors_are_harness_errors():
    assert issubclass(FixtureError, HarnessError)
    assert issubclass(WatchError, HarnessError)
    assert issubclass(ProtocolError, HarnessError)
    assert issubclass(HarnessError, RuntimeError)


def test_fixture_error_message():
    cause = PermissionError(13, "Permission denied")
    error = FixtureError("delete", "setup", cause)
    assert str(error) == f"setup of 'delete' failed: {cause}"
    assert error.cause is cause


def test_protocol_error_message():
    event = FileClosedEvent("/tmp/source/1byte")
    error = ProtocolError(event)
    assert str(error).startswith("wrong event value: FileClosedEvent")
    assert error.event is event
