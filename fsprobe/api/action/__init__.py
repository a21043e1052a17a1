"""Action framework - scripted filesystem scenarios and their sequencer."""

from .Action import Action
from .ActionRegistry import ACTION_TYPES, ActionRegistry, kinds
from .DeleteAction import DeleteAction
from .EmptyAction import EmptyAction
from .MoveAsideAction import MoveAsideAction
from .MoveFromOutsideAction import MoveFromOutsideAction
from .MoveOutsideAction import MoveOutsideAction
from .OneAndOneMegabyteAction import OneAndOneMegabyteAction
from .OneByteAction import OneByteAction
from .OneMegabyteAction import OneMegabyteAction

__all__ = [
    "ACTION_TYPES",
    "Action",
    "ActionRegistry",
    "DeleteAction",
    "EmptyAction",
    "MoveAsideAction",
    "MoveFromOutsideAction",
    "MoveOutsideAction",
    "OneAndOneMegabyteAction",
    "OneByteAction",
    "OneMegabyteAction",
    "kinds",
]
