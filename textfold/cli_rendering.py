"""CLI error rendering and exit-status mapping for textfold commands."""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import Stage, TextfoldError

# Bad flags/config are usage errors (2, as Click uses); I/O failures exit with 1.
STAGE_EXIT_CODES: dict[Stage, int] = {"config": 2, "read": 1, "write": 1}


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print a one-line diagnostic (plus optional hint) and exit by failure stage."""

    exit_code = 1
    if isinstance(exc, TextfoldError):
        exit_code = STAGE_EXIT_CODES[exc.stage]
        message = f"{command_name} failed at stage `{exc.stage}`: {exc.detail}"
    else:
        message = f"{command_name} failed: {type(exc).__name__}: {exc}"
    typer.secho(message, fg=typer.colors.RED, err=True)
    if isinstance(exc, TextfoldError) and exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=exit_code) from exc
