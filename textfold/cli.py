"""Command-line interface for textfold.

Responsibilities:
- Expose text folding and folded-form matching as shell commands.
- Resolve effective I/O settings from YAML, environment and CLI flags.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from .cli_rendering import exit_with_command_error
from .config import ConfigLoader, TextfoldConfig
from .errors import TextfoldError
from .io import read_text, split_lines, write_text
from .parsing import normalize_optional_string, parse_decode_errors
from .telemetry import RunLogger, run_stage
from .text import TextNormalizer, filter_matches

app = typer.Typer(
    name="textfold",
    no_args_is_help=True,
    help="Fold text into a case-, accent- and look-alike-insensitive form.",
)

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Read input from this file instead of stdin."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML config file."),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", help="Codec for input and output (default: utf-8)."),
]
ErrorsOption = Annotated[
    str | None,
    typer.Option(
        "--errors",
        help="Undecodable input policy: strict, replace or surrogateescape.",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log phase events to stderr."),
]


def _load_base_config(config_path: Path | None) -> TextfoldConfig:
    """Load YAML config when requested, else environment config, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise TextfoldError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `TEXTFOLD_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise TextfoldError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise TextfoldError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _resolve_config(
    config_path: Path | None,
    encoding: str | None,
    decode_errors: str | None,
    verbose: bool,
) -> TextfoldConfig:
    """Apply explicit CLI flags on top of YAML or environment settings."""

    base_config = _load_base_config(config_path)
    try:
        return base_config.with_overrides(
            encoding=normalize_optional_string(encoding),
            decode_errors=parse_decode_errors(decode_errors, "--errors"),
            log_events=True if verbose else None,
        )
    except ValueError as exc:
        raise TextfoldError(
            stage="config",
            detail=str(exc),
            hint="Check the `--encoding` and `--errors` values.",
        ) from exc


def _reject_mixed_sources(values: list[str] | None, file: Path | None, label: str) -> None:
    """Fail when both positional values and `--file` are supplied."""

    if values and file is not None:
        raise TextfoldError(
            stage="config",
            detail=f"Pass {label} either as arguments or via `--file`, not both.",
        )


@app.command("normalize")
def normalize_command(
    texts: Annotated[
        list[str] | None,
        typer.Argument(help="Values to fold; each is printed on its own line."),
    ] = None,
    file: FileOption = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write output to this file instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    encoding: EncodingOption = None,
    decode_errors: ErrorsOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Fold argument values, or a whole file/stdin payload with layout preserved."""

    normalizer = TextNormalizer()
    try:
        config = _resolve_config(config_file, encoding, decode_errors, verbose)
        _reject_mixed_sources(texts, file, "texts")
        with RunLogger(enabled=config.log_events) as run_logger:
            if texts:
                folded = run_stage(
                    run_logger,
                    "normalize",
                    lambda: "".join(f"{normalizer.normalize(text)}\n" for text in texts),
                )
            else:
                payload = run_stage(
                    run_logger,
                    "read",
                    lambda: read_text(file, config.encoding, config.decode_errors),
                )
                folded = run_stage(
                    run_logger, "normalize", lambda: normalizer.normalize(payload)
                )

            run_stage(
                run_logger,
                "write",
                lambda: write_text(out, folded, config.encoding, config.decode_errors),
            )
    except Exception as exc:
        exit_with_command_error("normalize", exc)


@app.command("match")
def match_command(
    query: Annotated[str, typer.Argument(help="Search query compared in folded form.")],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Candidate values; defaults to lines of `--file` or stdin."),
    ] = None,
    file: FileOption = None,
    config_file: ConfigOption = None,
    encoding: EncodingOption = None,
    decode_errors: ErrorsOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print candidates containing the query after folding; exit 1 when none match."""

    normalizer = TextNormalizer()
    try:
        config = _resolve_config(config_file, encoding, decode_errors, verbose)
        _reject_mixed_sources(candidates, file, "candidates")
        with RunLogger(enabled=config.log_events) as run_logger:
            if candidates:
                candidate_list = list(candidates)
            else:
                payload = run_stage(
                    run_logger,
                    "read",
                    lambda: read_text(file, config.encoding, config.decode_errors),
                )
                candidate_list = split_lines(payload)

            matches = run_stage(
                run_logger,
                "match",
                lambda: filter_matches(query, candidate_list, normalizer),
            )
            run_stage(
                run_logger,
                "write",
                lambda: write_text(
                    None,
                    "".join(f"{match}\n" for match in matches),
                    config.encoding,
                    config.decode_errors,
                ),
            )
    except Exception as exc:
        exit_with_command_error("match", exc)

    if not matches:
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts.

    The process belongs to the CLI here, so loguru's default stderr handler is
    dropped and only `RunLogger` handlers write phase lines.
    """

    logger.remove()
    app()


if __name__ == "__main__":
    main()
