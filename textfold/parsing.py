"""Value parsing for textfold settings coming from YAML, `TEXTFOLD_*` or flags.

Every helper treats blank text as "unset" so that an empty YAML value or an
exported-but-empty variable falls back to the next source in precedence.
"""

from __future__ import annotations

from typing import Literal, get_args

DecodeErrors = Literal["strict", "replace", "surrogateescape"]

SUPPORTED_DECODE_ERRORS: tuple[str, ...] = get_args(DecodeErrors)

_ENABLED_TOKENS = frozenset({"1", "true", "yes", "on"})
_DISABLED_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return stripped text, or `None` for missing/blank values."""

    if value is None:
        return None
    return str(value).strip() or None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse an on/off switch such as `log_events` or `TEXTFOLD_LOG_EVENTS`.

    Native booleans pass through; text tokens are matched case-insensitively.

    Raises:
        ValueError: If the token is blank or not an accepted switch value.
    """

    if isinstance(value, bool):
        return value
    token = (normalize_optional_string(value) or "").lower()
    if token in _ENABLED_TOKENS:
        return True
    if token in _DISABLED_TOKENS:
        return False
    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_decode_errors(value: object, field_name: str) -> DecodeErrors | None:
    """Parse an undecodable-input policy name, returning `None` when unset.

    Raises:
        ValueError: If the policy is not one of `SUPPORTED_DECODE_ERRORS`.
    """

    token = normalize_optional_string(value)
    if token is None:
        return None
    policy = token.lower()
    if policy not in SUPPORTED_DECODE_ERRORS:
        allowed = ", ".join(SUPPORTED_DECODE_ERRORS)
        raise ValueError(f"`{field_name}` must be one of: {allowed}; got `{token}`.")
    return policy  # type: ignore[return-value]
