"""Stage-scoped exceptions raised around the folding transform.

`normalize` itself never raises these; they come from resolving settings
(`config`), decoding input (`read`) and encoding output (`write`).
"""

from __future__ import annotations

from typing import Literal

Stage = Literal["config", "read", "write"]


class TextfoldError(RuntimeError):
    """Raised when resolving settings, reading input or writing output fails.

    Attributes:
        stage: Which side of the transform failed.
        detail: One-line diagnostic naming the offending source or value.
        hint: Optional flag or fix suggestion shown to CLI users.
    """

    def __init__(self, *, stage: Stage, detail: str, hint: str | None = None) -> None:
        super().__init__(f"[{stage}] {detail}")
        self.stage: Stage = stage
        self.detail = detail
        self.hint = hint
