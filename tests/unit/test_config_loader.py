"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from textfold.config import ConfigLoader, TextfoldConfig


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize blank/cased values."""

    config_path = tmp_path / "textfold.yml"
    config_path.write_text(
        """
encoding: " latin-1 "
decode_errors: " Replace "
log_events: " yes "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.encoding == "latin-1"
    assert config.decode_errors == "replace"
    assert config.log_events is True


def test_config_loader_from_yaml_accepts_native_booleans(tmp_path: Path) -> None:
    """Native YAML booleans should be accepted for `log_events`."""

    config_path = tmp_path / "textfold.yml"
    config_path.write_text("log_events: false\n", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path).log_events is False


def test_config_loader_from_yaml_uses_defaults_for_empty_file(tmp_path: Path) -> None:
    """An empty YAML document should produce default settings."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == TextfoldConfig()


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """Unsupported keys should fail fast with an actionable message."""

    config_path = tmp_path / "textfold.yml"
    config_path.write_text("encoding: utf-8\ncolor: red\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"includes unsupported key\(s\): color\."):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_root(tmp_path: Path) -> None:
    """A YAML list root is not a valid config document."""

    config_path = tmp_path / "textfold.yml"
    config_path.write_text("- utf-8\n- strict\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a top-level mapping/object"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_reports_syntax_errors(tmp_path: Path) -> None:
    """Malformed YAML should surface as a `ValueError`."""

    config_path = tmp_path / "textfold.yml"
    config_path.write_text("encoding: [utf-8\n", encoding="utf-8")

    with pytest.raises(ValueError, match="could not be parsed"):
        ConfigLoader.from_yaml(config_path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("encoding: no-such-codec\n", "Unknown encoding `no-such-codec`"),
        ("decode_errors: ignore\n", "`decode_errors` must be one of"),
        ("log_events: sometimes\n", "`log_events` must be a boolean value"),
    ],
)
def test_config_loader_from_yaml_rejects_invalid_values(
    tmp_path: Path, payload: str, message: str
) -> None:
    """Invalid codec, policy and boolean values should be rejected."""

    config_path = tmp_path / "textfold.yml"
    config_path.write_text(payload, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_textfold_variables() -> None:
    """Environment loader should read and normalize `TEXTFOLD_*` values."""

    config = ConfigLoader.from_env(
        {
            "TEXTFOLD_ENCODING": " cp1251 ",
            "TEXTFOLD_DECODE_ERRORS": "SurrogateEscape",
            "TEXTFOLD_LOG_EVENTS": "on",
            "UNRELATED": "ignored",
        }
    )

    assert config.encoding == "cp1251"
    assert config.decode_errors == "surrogateescape"
    assert config.log_events is True


def test_config_loader_from_env_defaults_when_unset() -> None:
    """Missing or blank variables should fall back to defaults."""

    assert ConfigLoader.from_env({"TEXTFOLD_ENCODING": "  "}) == TextfoldConfig()


def test_config_loader_from_env_rejects_invalid_boolean() -> None:
    """Invalid boolean tokens should name the environment variable."""

    with pytest.raises(ValueError, match="`TEXTFOLD_LOG_EVENTS` must be a boolean value"):
        ConfigLoader.from_env({"TEXTFOLD_LOG_EVENTS": "maybe"})


def test_with_overrides_prefers_explicit_values() -> None:
    """Explicit overrides win; `None` keeps the base value."""

    base = TextfoldConfig(encoding="latin-1", decode_errors="replace", log_events=False)

    resolved = base.with_overrides(decode_errors="strict", log_events=True)

    assert resolved == TextfoldConfig(encoding="latin-1", decode_errors="strict", log_events=True)
    assert base.decode_errors == "replace"


def test_with_overrides_validates_result() -> None:
    """Invalid override values should raise before any I/O happens."""

    with pytest.raises(ValueError, match="Unknown encoding"):
        TextfoldConfig().with_overrides(encoding="not-a-codec")


def test_config_loader_from_env_rejects_unknown_decode_policy() -> None:
    """Unknown decode policies should name the environment variable."""

    with pytest.raises(ValueError, match="`TEXTFOLD_DECODE_ERRORS` must be one of"):
        ConfigLoader.from_env({"TEXTFOLD_DECODE_ERRORS": "ignore"})


def test_validate_rejects_non_canonical_decode_policy() -> None:
    """Directly constructed configs must use the lowercase policy name."""

    with pytest.raises(ValueError, match="`decode_errors` must be a lowercase policy name"):
        TextfoldConfig(decode_errors="Replace").validate()
