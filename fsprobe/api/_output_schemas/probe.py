"""Output schemas for probe commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ProbeRunOutput(BaseOutputSchema):
    """Output schema for the run command.

    Output structure:
    - root: str - scratch root that was recreated for the run
    - log_path: str - report file, empty string if the run failed before writing it
    - actions: list[str] - action names in execution order
    - report: dict[str, str] - action name -> compressed event tokens
    - unattributed: dict[str, str] - basenames no action owns -> compressed event tokens
    - event_count: int - events recorded
    - dropped_events: int - events lost to a full notification queue
    """

    root: str = Field(..., description="Scratch root recreated for the run")
    log_path: str = Field(..., description="Report file, empty string if not written")
    actions: list[str] = Field(..., description="Action names in execution order")
    report: dict[str, str] = Field(..., description="Action name -> compressed event tokens")
    unattributed: dict[str, str] = Field(..., description="Basenames no action owns -> compressed event tokens")
    event_count: int = Field(..., ge=0, description="Events recorded")
    dropped_events: int = Field(..., ge=0, description="Events lost to a full notification queue")


class ActionInfo(BaseModel):
    kind: str = Field(..., description="Variant identifier accepted by --only")
    name: str = Field(..., description="Report key and basename under test")
    has_setup: bool = Field(..., description="Whether the action prepares a file before watching")


class ProbeActionsOutput(BaseOutputSchema):
    """Output schema for the actions command."""

    actions: list[ActionInfo] = Field(..., description="Registered actions in execution order")


register_output_schema("probe", "run", ProbeRunOutput)
register_output_schema("probe", "actions", ProbeActionsOutput)
