"""Ordered, immutable set of actions run against one watched root."""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

from ...constants import PAUSE_SECS
from ..errors.FixtureError import FixtureError
from .Action import Action
from .DeleteAction import DeleteAction
from .EmptyAction import EmptyAction
from .MoveAsideAction import MoveAsideAction
from .MoveFromOutsideAction import MoveFromOutsideAction
from .MoveOutsideAction import MoveOutsideAction
from .OneAndOneMegabyteAction import OneAndOneMegabyteAction
from .OneByteAction import OneByteAction
from .OneMegabyteAction import OneMegabyteAction

logger = logging.getLogger(__name__)

# Declaration order is execution order and report order
ACTION_TYPES: tuple[type[Action], ...] = (
    EmptyAction,
    OneByteAction,
    OneMegabyteAction,
    OneAndOneMegabyteAction,
    DeleteAction,
    MoveOutsideAction,
    MoveAsideAction,
    MoveFromOutsideAction,
)


def kinds() -> list[str]:
    """Kinds of all standard actions, in declaration order."""
    return [action_type.kind for action_type in ACTION_TYPES]


class ActionRegistry:
    """Runs every action's setup, then every action's act, in declaration order.

    Any ``OSError`` raised by an action is fatal and surfaces as a
    :class:`FixtureError` naming the action and the phase.
    """

    def __init__(self, actions: Sequence[Action]) -> None:
        seen: set[str] = set()
        for action in actions:
            if action.name in seen:
                raise ValueError(f"Duplicate action name: {action.name!r}")
            seen.add(action.name)
        self._actions: tuple[Action, ...] = tuple(actions)

    @classmethod
    def build(
        cls,
        root: Path,
        only: Iterable[str] | None = None,
        pause_secs: float = PAUSE_SECS,
    ) -> "ActionRegistry":
        """Bind the standard actions to ``root``.

        Args:
            root: Watched directory
            only: Optional subset of action kinds; declaration order is kept
            pause_secs: Pause used inside the two-burst write action
        """
        types = ACTION_TYPES
        if only is not None:
            wanted = set(only)
            unknown = sorted(wanted - set(kinds()))
            if unknown:
                raise ValueError(f"Unknown action kind(s): {', '.join(unknown)}. Known: {', '.join(kinds())}")
            types = tuple(action_type for action_type in ACTION_TYPES if action_type.kind in wanted)
        return cls([action_type(Path(root), pause_secs=pause_secs) for action_type in types])

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def names(self) -> list[str]:
        return [action.name for action in self._actions]

    def run_setup(self) -> None:
        for n, action in enumerate(self._actions):
            logger.debug("Setup %02d: %s", n, action.name)
            _invoke(action, "setup", action.setup)

    def run_actions(self, abort: threading.Event | None = None) -> None:
        """Act in order, stopping before the next action once ``abort`` is set."""
        for n, action in enumerate(self._actions):
            if abort is not None and abort.is_set():
                logger.debug("Aborted before action %02d: %s", n, action.name)
                return
            logger.debug("Action %02d: %s", n, action.name)
            _invoke(action, "act", action.act)


def _invoke(action: Action, phase: str, step: Callable[[], None]) -> None:
    try:
        step()
    except OSError as exc:
        raise FixtureError(action.name, phase, exc) from exc
