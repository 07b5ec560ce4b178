"""Run-event logging for CLI commands."""

from .logger import RunLogger
from .stages import run_stage

__all__ = ["RunLogger", "run_stage"]
