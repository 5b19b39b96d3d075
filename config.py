#!/usr/bin/python3
"""
Application configuration parsing.

This module defines the configuration schema used by the server, client,
demo and benchmark, and provides a simple parser for key=value configuration
files.

Parsing rules:
- Unknown keys are ignored.
- Blank lines and comment lines starting with '#' are ignored.
- The 'linuxpath' key is required.
- Some values are validated (booleans, integers, search algorithm, log level).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


SUPPORTED_ALGOS = {"kmp", "naive", "str_find"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised when the configuration file is missing
    required values or invalid."""


@dataclass(frozen=True)
class AppConfig:
    """Parsed application configuration.

    Attributes:
        linuxpath: Path to the text file to search.
        reread_on_query: If True, re-read the file on each query.
        search_algo: Search strategy identifier.
        context_chars: Characters of surrounding text shown around a match.
        log_level: Logging level name for the server process.
    """

    linuxpath: Path
    reread_on_query: bool = True
    search_algo: str = "kmp"
    context_chars: int = 5
    log_level: str = "INFO"


def _parse_bool(value: str) -> bool:
    """Parse a boolean config value.

    Accepted truthy values: true, 1, yes, y, on.
    Accepted falsy values: false, 0, no, n, off.

    Args:
        value: Raw string value from the config file.

    Returns:
        Parsed boolean value.

    Raises:
        ConfigError: If the value cannot be interpreted as a boolean.
    """
    v = value.strip().lower()
    if v in {"true", "1", "yes", "y", "on"}:
        return True
    if v in {"false", "0", "no", "n", "off"}:
        return False
    raise ConfigError(f"Invalid boolean value: {value!r}")


def _parse_non_negative_int(key: str, value: str) -> int:
    """Parse a non-negative integer config value.

    Raises:
        ConfigError: If the value is not an integer or is negative.
    """
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid integer for {key}: {value!r}") from exc
    if parsed < 0:
        raise ConfigError(f"{key} must be >= 0, got {parsed}")
    return parsed


def load_config(config_path: str | Path) -> AppConfig:
    """Load and validate application configuration from a file.

    Supported keys:
        linuxpath=/path/to/text.txt               (required)
        reread_on_query=True|False                (optional)
        search_algo=kmp|naive|str_find            (optional)
        context_chars=5                           (optional)
        log_level=DEBUG|INFO|WARNING|...          (optional)

    Args:
        config_path: Path to the configuration file.

    Returns:
        A validated AppConfig instance.

    Raises:
        ConfigError: If the file cannot be read, required keys are missing, or
            values fail validation.
    """
    path = Path(config_path)

    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(
            f"Failed to read config file: {path} ({exc})"
        ) from exc

    linuxpath: Path | None = None
    reread_on_query: bool = True
    search_algo: str = "kmp"
    context_chars: int = 5
    log_level: str = "INFO"

    for line in raw.splitlines():
        stripped = line.strip()

        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()

        if key == "linuxpath":
            if not value:
                raise ConfigError("linuxpath is present but empty")
            linuxpath = Path(value)
        elif key == "reread_on_query":
            reread_on_query = _parse_bool(value)
        elif key == "search_algo":
            if not value:
                raise ConfigError("search_algo is present but empty")
            search_algo = value
        elif key == "context_chars":
            context_chars = _parse_non_negative_int(key, value)
        elif key == "log_level":
            log_level = value.upper()

        # Unknown keys are ignored.

    if linuxpath is None:
        raise ConfigError("Missing required config entry: linuxpath=")

    if search_algo not in SUPPORTED_ALGOS:
        raise ConfigError(
            f"Unsupported search_algo={search_algo!r}. "
            f"Allowed: {sorted(SUPPORTED_ALGOS)}"
        )

    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"Unsupported log_level={log_level!r}. "
            f"Allowed: {sorted(LOG_LEVELS)}"
        )

    return AppConfig(
        linuxpath=linuxpath,
        reread_on_query=reread_on_query,
        search_algo=search_algo,
        context_chars=context_chars,
        log_level=log_level,
    )
