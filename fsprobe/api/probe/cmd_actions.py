"""Actions command - list the scripted filesystem scenarios."""

from collections.abc import Iterator

from .._output_schemas.probe import ActionInfo, ProbeActionsOutput
from ..action.ActionRegistry import ACTION_TYPES
from ..StageResult import StageResult


def cmd_actions() -> StageResult:
    """List registered actions in execution order."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Collecting actions...")
        infos = [
            ActionInfo(
                kind=action_type.kind,
                name=action_type.name,
                has_setup=action_type.defines_setup(),
            )
            for action_type in ACTION_TYPES
        ]
        result_obj.result = f"{len(infos)} actions registered"
        result_obj.output = ProbeActionsOutput(errors=[], warnings=[], actions=infos).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Listing actions...",
        progress_callback=do_work,
    )
