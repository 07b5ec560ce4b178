"""Stage wrapper that emits start/complete/failure events around an action."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .logger import RunLogger

_StageResult = TypeVar("_StageResult")


def run_stage(
    run_logger: RunLogger,
    stage_name: str,
    action: Callable[[], _StageResult],
) -> _StageResult:
    """Run one named stage and emit telemetry events for it.

    String results are reported by length only.
    """

    run_logger.log_stage_start(stage_name)
    try:
        result = action()
    except Exception as exc:
        run_logger.log_stage_failure(stage_name, type(exc).__name__)
        raise
    if isinstance(result, str):
        run_logger.log_stage_complete(stage_name, chars=len(result))
    else:
        run_logger.log_stage_complete(stage_name)
    return result
