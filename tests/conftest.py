"""Shared pytest fixtures for the full textfold test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_textfold_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `TEXTFOLD_*` variables from leaking into config resolution."""

    for key in ("TEXTFOLD_ENCODING", "TEXTFOLD_DECODE_ERRORS", "TEXTFOLD_LOG_EVENTS"):
        monkeypatch.delenv(key, raising=False)
