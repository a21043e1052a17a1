"""Unit tests for fsprobe.api.action.ActionRegistry."""

import threading

import pytest

from fsprobe.api.action import ACTION_TYPES, Action, ActionRegistry, kinds
from fsprobe.api.errors import FixtureError


class RecordingAction(Action):
    def __init__(self, root, name, journal, fail_in=None):
        super().__init__(root)
        self.name = name
        self.kind = name
        self.journal = journal
        self.fail_in = fail_in

    def setup(self):
        self.journal.append(f"setup:{self.name}")
        if self.fail_in == "setup":
            raise PermissionError("denied")

    def act(self):
        self.journal.append(f"act:{self.name}")
        if self.fail_in == "act":
            raise FileNotFoundError("gone")


def test_standard_actions_in_declaration_order(tmp_path):
    registry = ActionRegistry.build(tmp_path)
    assert registry.names() == [
        "empty",
        "1byte",
        "1M",
        "1and1M",
        "delete",
        "move outside",
        "move aside",
        "move from outside",
    ]
    assert len(registry) == len(ACTION_TYPES)
    assert all(action.root == tmp_path for action in registry)


def test_kinds_match_action_types():
    assert kinds() == [action_type.kind for action_type in ACTION_TYPES]
    assert len(set(kinds())) == len(kinds())


def test_build_only_keeps_declaration_order(tmp_path):
    registry = ActionRegistry.build(tmp_path, only=["move-aside", "empty", "delete"])
    assert registry.names() == ["empty", "delete", "move aside"]


def test_build_only_rejects_unknown_kind(tmp_path):
    with pytest.raises(ValueError, match="Unknown action kind"):
        ActionRegistry.build(tmp_path, only=["empty", "truncate"])


def test_build_passes_pause(tmp_path):
    registry = ActionRegistry.build(tmp_path, only=["one-and-one-megabyte"], pause_secs=0.5)
    assert [action.pause_secs for action in registry] == [0.5]


def test_duplicate_names_rejected(tmp_path):
    with pytest.raises(ValueError, match="Duplicate action name"):
        ActionRegistry([RecordingAction(tmp_path, "a", []), RecordingAction(tmp_path, "a", [])])


def test_every_setup_runs_before_any_act(tmp_path):
    journal: list[str] = []
    registry = ActionRegistry([RecordingAction(tmp_path, name, journal) for name in ("a", "b", "c")])

    registry.run_setup()
    registry.run_actions()

    assert journal == ["setup:a", "setup:b", "setup:c", "act:a", "act:b", "act:c"]


def test_setup_failure_is_fixture_error(tmp_path):
    journal: list[str] = []
    registry = ActionRegistry(
        [RecordingAction(tmp_path, "a", journal, fail_in="setup"), RecordingAction(tmp_path, "b", journal)]
    )

    with pytest.raises(FixtureError) as excinfo:
        registry.run_setup()

    assert excinfo.value.action == "a"
    assert excinfo.value.phase == "setup"
    assert isinstance(excinfo.value.cause, PermissionError)
    assert journal == ["setup:a"]


def test_act_failure_stops_sequence(tmp_path):
    journal: list[str] = []
    registry = ActionRegistry(
        [RecordingAction(tmp_path, "a", journal, fail_in="act"), RecordingAction(tmp_path, "b", journal)]
    )

    with pytest.raises(FixtureError, match="act of 'a' failed"):
        registry.run_actions()
    assert journal == ["act:a"]


def test_standard_sequence_runs_against_directory(tmp_path):
    source = tmp_path / "source"
    source.mkdir()
    registry = ActionRegistry.build(source, only=["empty", "one-byte", "delete", "move-aside", "move-from-outside"])

    registry.run_setup()
    assert sorted(p.name for p in source.iterdir()) == ["delete", "move aside"]
    assert (tmp_path / "move from outside").exists()

    registry.run_actions()
    assert sorted(p.name for p in source.iterdir()) == ["1byte", "empty", "move aside target", "move from outside"]


def test_run_actions_stops_once_aborted(tmp_path):
    journal: list[str] = []
    abort = threading.Event()

    class AbortingAction(RecordingAction):
        def act(self):
            super().act()
            abort.set()

    registry = ActionRegistry([AbortingAction(tmp_path, "a", journal), RecordingAction(tmp_path, "b", journal)])
    registry.run_actions(abort)

    assert journal == ["act:a"]


def test_run_actions_with_abort_already_set(tmp_path):
    journal: list[str] = []
    abort = threading.Event()
    abort.set()

    ActionRegistry([RecordingAction(tmp_path, "a", journal)]).run_actions(abort)
    assert journal == []
