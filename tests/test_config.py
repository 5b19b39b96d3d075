#!/usr/bin/python3
"""
Configuration parsing tests.

These tests validate that load_config():
- Parses required keys from noisy config files.
- Applies defaults correctly.
- Rejects missing/empty required values.
- Validates booleans, integers, log levels and supported algorithm names.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from config import AppConfig, ConfigError, load_config


def _write(tmp_path: Path, *lines: str) -> Path:
    cfg = tmp_path / "app.conf"
    cfg.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return cfg


def test_load_config_parses_linuxpath_among_noise(tmp_path: Path) -> None:
    """Ensure linuxpath is parsed even when surrounded by irrelevant keys."""
    cfg = _write(
        tmp_path,
        "# comment line",
        "something=else",
        "unrelated=123",
        "not a key value line",
        "linuxpath=/tmp/data.txt",
        "another=ignored",
    )

    parsed = load_config(cfg)
    assert isinstance(parsed, AppConfig)
    assert parsed.linuxpath == Path("/tmp/data.txt")


def test_load_config_missing_linuxpath_raises(tmp_path: Path) -> None:
    """Ensure missing linuxpath triggers a ConfigError."""
    cfg = _write(tmp_path, "foo=bar", "baz=qux")

    with pytest.raises(ConfigError, match=r"linuxpath="):
        load_config(cfg)


def test_load_config_empty_linuxpath_raises(tmp_path: Path) -> None:
    """Ensure an empty linuxpath value triggers a ConfigError."""
    cfg = _write(tmp_path, "linuxpath=")

    with pytest.raises(ConfigError, match="empty"):
        load_config(cfg)


def test_load_config_file_not_found_raises(tmp_path: Path) -> None:
    """Ensure missing config files raise ConfigError with a clear message."""
    cfg = tmp_path / "missing.conf"

    with pytest.raises(ConfigError, match="not found"):
        load_config(cfg)


def test_load_config_defaults(tmp_path: Path) -> None:
    """Ensure defaults are applied when optional keys are absent."""
    cfg = _write(tmp_path, "linuxpath=/tmp/data.txt")

    parsed = load_config(cfg)
    assert parsed.linuxpath == Path("/tmp/data.txt")
    assert parsed.reread_on_query is True
    assert parsed.search_algo == "kmp"
    assert parsed.context_chars == 5
    assert parsed.log_level == "INFO"


def test_load_config_parses_optional_keys(tmp_path: Path) -> None:
    """Ensure every optional key is parsed correctly."""
    cfg = _write(
        tmp_path,
        "linuxpath=/tmp/data.txt",
        "reread_on_query=off",
        "search_algo=str_find",
        "context_chars=12",
        "log_level=debug",
    )

    parsed = load_config(cfg)
    assert parsed.reread_on_query is False
    assert parsed.search_algo == "str_find"
    assert parsed.context_chars == 12
    assert parsed.log_level == "DEBUG"


def test_load_config_invalid_bool_raises(tmp_path: Path) -> None:
    """Ensure invalid boolean values raise ConfigError."""
    cfg = _write(tmp_path, "linuxpath=/tmp/data.txt", "reread_on_query=maybe")

    with pytest.raises(ConfigError, match="Invalid boolean"):
        load_config(cfg)


@pytest.mark.parametrize("value", ["lots", "-1", ""])
def test_load_config_invalid_context_chars_raises(
    tmp_path: Path, value: str
) -> None:
    """Ensure context_chars must be a non-negative integer."""
    cfg = _write(tmp_path, "linuxpath=/tmp/data.txt", f"context_chars={value}")

    with pytest.raises(ConfigError, match="context_chars"):
        load_config(cfg)


def test_load_config_unsupported_search_algo_raises(tmp_path: Path) -> None:
    """Ensure unsupported search_algo values raise ConfigError."""
    cfg = _write(
        tmp_path,
        "linuxpath=/tmp/data.txt",
        "search_algo=fastest_in_the_world",
    )

    with pytest.raises(ConfigError, match="Unsupported search_algo"):
        load_config(cfg)


def test_load_config_unsupported_log_level_raises(tmp_path: Path) -> None:
    """Ensure unknown logging level names raise ConfigError."""
    cfg = _write(tmp_path, "linuxpath=/tmp/data.txt", "log_level=chatty")

    with pytest.raises(ConfigError, match="Unsupported log_level"):
        load_config(cfg)
