"""Unit tests for fsprobe.api.validate_output."""

import pytest

from fsprobe.api._output_schemas import get_output_schema
from fsprobe.api._output_schemas.probe import ProbeActionsOutput, ProbeRunOutput
from fsprobe.api.probe.cmd_actions import cmd_actions
from fsprobe.api.probe.cmd_run import cmd_run
from fsprobe.api.validate_output import validate_output


def test_schemas_registered():
    assert get_output_schema("probe", "run") is ProbeRunOutput
    assert get_output_schema("probe", "actions") is ProbeActionsOutput
    assert get_output_schema("probe", "missing") is None


def test_missing_field_fails():
    with pytest.raises(ValueError, match="Output validation failed for probe.run"):
        validate_output(cmd_run, {"errors": [], "warnings": [], "root": "/tmp"})


def test_wrong_type_fails():
    with pytest.raises(ValueError, match="probe.actions"):
        validate_output(cmd_actions, {"errors": [], "warnings": [], "actions": "all"})


def test_non_api_function_passes_through():
    def cmd_other():
        pass

    output = {"anything": 1}
    assert validate_output(cmd_other, output) is output
