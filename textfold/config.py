"""Configuration model and loaders for the textfold CLI.

Responsibilities:
- Define I/O and logging settings as a typed dataclass.
- Load settings from YAML files and environment variables.

Key types:
- `TextfoldConfig`: effective settings for one command invocation.
- `ConfigLoader`: static construction helpers for `TextfoldConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    DecodeErrors,
    normalize_optional_string,
    parse_decode_errors,
    parse_required_boolean,
)


_DEFAULT_ENCODING = "utf-8"
_DEFAULT_DECODE_ERRORS: DecodeErrors = "strict"


@dataclass(slots=True)
class TextfoldConfig:
    """Settings for reading, writing and logging around the folding transform.

    Attributes:
        encoding: Codec used for input files, stdin and output files.
        decode_errors: Policy for undecodable input bytes.
        log_events: Whether to emit phase log lines to stderr.
    """

    encoding: str = _DEFAULT_ENCODING
    decode_errors: DecodeErrors = _DEFAULT_DECODE_ERRORS
    log_events: bool = False

    def validate(self) -> None:
        """Validate codec and error-policy values."""

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding `{self.encoding}`.") from exc
        if parse_decode_errors(self.decode_errors, "decode_errors") != self.decode_errors:
            raise ValueError(
                f"`decode_errors` must be a lowercase policy name; got `{self.decode_errors}`."
            )

    def with_overrides(
        self,
        encoding: str | None = None,
        decode_errors: DecodeErrors | None = None,
        log_events: bool | None = None,
    ) -> TextfoldConfig:
        """Return a validated copy with explicit (CLI) values taking precedence."""

        config = TextfoldConfig(
            encoding=encoding if encoding is not None else self.encoding,
            decode_errors=decode_errors if decode_errors is not None else self.decode_errors,
            log_events=log_events if log_events is not None else self.log_events,
        )
        config.validate()
        return config


class ConfigLoader:
    """Factory helpers for loading `TextfoldConfig` instances."""

    _SUPPORTED_YAML_KEYS = frozenset({"encoding", "decode_errors", "log_events"})

    @staticmethod
    def from_yaml(path: Path) -> TextfoldConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TextfoldConfig:
        """Create a validated config from `TEXTFOLD_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        encoding = normalize_optional_string(env_map.get("TEXTFOLD_ENCODING"))
        decode_errors = parse_decode_errors(
            env_map.get("TEXTFOLD_DECODE_ERRORS"), "TEXTFOLD_DECODE_ERRORS"
        )
        raw_log_events = normalize_optional_string(env_map.get("TEXTFOLD_LOG_EVENTS"))

        config = TextfoldConfig(
            encoding=encoding or _DEFAULT_ENCODING,
            decode_errors=decode_errors or _DEFAULT_DECODE_ERRORS,
            log_events=(
                parse_required_boolean(raw_log_events, "TEXTFOLD_LOG_EVENTS")
                if raw_log_events is not None
                else False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> TextfoldConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(str(key) for key in set(payload) - ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        encoding = normalize_optional_string(payload.get("encoding"))
        decode_errors = parse_decode_errors(payload.get("decode_errors"), "decode_errors")
        log_events = False
        if normalize_optional_string(payload.get("log_events")) is not None:
            log_events = parse_required_boolean(payload["log_events"], "log_events")

        config = TextfoldConfig(
            encoding=encoding or _DEFAULT_ENCODING,
            decode_errors=decode_errors or _DEFAULT_DECODE_ERRORS,
            log_events=log_events,
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config
