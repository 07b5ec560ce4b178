"""Text input/output for CLI commands.

Responsibilities:
- Read whole text payloads from files or stdin with an explicit decode policy.
- Write folded text to files or stdout using the configured codec.
- Map filesystem and codec failures to stage-scoped `TextfoldError`s.
"""

from __future__ import annotations

from pathlib import Path
import sys

from ..errors import TextfoldError


def read_text(path: Path | None, encoding: str = "utf-8", errors: str = "strict") -> str:
    """Read and decode a text payload from `path`, or from stdin when `path` is None."""

    source = "stdin" if path is None else f"`{path}`"
    try:
        if path is None:
            raw = sys.stdin.buffer.read()
        else:
            raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise TextfoldError(
            stage="read",
            detail=f"Input file not found: {source}.",
            hint="Pass an existing path via `--file <path>` or pipe text on stdin.",
        ) from exc
    except OSError as exc:
        raise TextfoldError(
            stage="read",
            detail=f"Failed to read input {source}: {exc}",
            hint="Verify file permissions.",
        ) from exc

    try:
        return raw.decode(encoding, errors)
    except UnicodeDecodeError as exc:
        raise TextfoldError(
            stage="read",
            detail=f"Input {source} is not valid {encoding}: {exc.reason} at byte {exc.start}.",
            hint="Pass the right `--encoding`, or use `--errors replace` to substitute U+FFFD.",
        ) from exc


def write_text(
    path: Path | None,
    content: str,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> None:
    """Encode and write `content` to `path`, or to stdout when `path` is None."""

    target = "stdout" if path is None else f"`{path}`"
    try:
        payload = content.encode(encoding, errors)
    except UnicodeEncodeError as exc:
        raise TextfoldError(
            stage="write",
            detail=f"Output for {target} cannot be encoded as {encoding}: {exc.reason}.",
            hint="Choose another `--encoding` or use `--errors replace`.",
        ) from exc

    try:
        if path is None:
            sys.stdout.flush()
            sys.stdout.buffer.write(payload)
            sys.stdout.buffer.flush()
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise TextfoldError(
            stage="write",
            detail=f"Failed to write output {target}: {exc}",
            hint="Verify the output directory exists and is writable.",
        ) from exc


def split_lines(payload: str) -> list[str]:
    """Split a payload into file lines on `\\n` only, dropping one trailing `\\r` per line.

    Other Unicode line boundaries (form feed, U+0085, U+2028, ...) stay inside
    their line. A final newline does not produce an empty trailing line.
    """

    if not payload:
        return []
    lines = payload.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
