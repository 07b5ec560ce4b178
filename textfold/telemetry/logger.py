"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level logs for CLI commands via `loguru`.
- Keep text payloads out of logs; only sizes and identifiers are recorded.
- Touch only the handler this logger installs, so embedding programs keep theirs.
"""

from __future__ import annotations

import itertools
import sys
from types import TracebackType
from typing import TextIO

from loguru import logger as _loguru_logger

_RUN_IDS = itertools.count(1)


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit deterministic phase logs for one command run.

    Records are bound to a per-instance id and the sink handler filters on it,
    so two loggers never see each other's lines. Call `close()` (or use the
    instance as a context manager) to detach the handler.
    """

    def __init__(self, sink: TextIO | None = None, enabled: bool = True) -> None:
        self._sink = sink or sys.stderr
        self._enabled = enabled
        self._run_id = next(_RUN_IDS)
        self._logger = _loguru_logger.bind(textfold_run=self._run_id)
        self._handler_id: int | None = None
        if enabled:
            self._handler_id = _loguru_logger.add(
                self._sink,
                format="{message}",
                level="INFO",
                colorize=False,
                filter=lambda record: record["extra"].get("textfold_run") == self._run_id,
            )

    def __enter__(self) -> RunLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Remove this logger's handler; other loguru handlers are left alone."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            self._handler_id = None
        self._enabled = False

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        if not self._enabled:
            return
        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        self._logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
