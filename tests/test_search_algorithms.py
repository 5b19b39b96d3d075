#!/usr/bin/python3
"""
Tests for search algorithm correctness and consistency.

These tests ensure that all search algorithms:
- Report the same ascending offsets, overlapping matches included.
- Treat an empty pattern as having no occurrences.
- Behave consistently when used via SearchEngine.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from config import AppConfig
from search import (
    SearchError,
    read_text_file,
    search_file_kmp,
    search_file_naive,
    search_file_str_find,
    search_text_str_find,
)
from search_engine import EngineError, SearchEngine


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("HELLO", [0, 12]),
        ("L", [2, 3, 9, 14, 15]),
        ("LL", [2, 14]),
        ("HELLO!", []),
        ("", []),
    ],
)
def test_file_algorithms_consistency(
    tmp_path: Path,
    pattern: str,
    expected: list[int],
) -> None:
    """Ensure every file-level algorithm reports identical offsets."""
    data = tmp_path / "data.txt"
    data.write_text("HELLO WORLD HELLO", encoding="utf-8")

    assert search_file_kmp(data, pattern) == expected
    assert search_file_naive(data, pattern) == expected
    assert search_file_str_find(data, pattern) == expected


def test_str_find_reports_overlaps() -> None:
    """Ensure the str.find strategy steps past each hit by one character."""
    assert search_text_str_find("AAAA", "AA") == [0, 1, 2]
    assert search_text_str_find("AAAA", "") == []


def test_offsets_count_line_terminators(tmp_path: Path) -> None:
    """Ensure offsets refer to the file text with newlines preserved."""
    data = tmp_path / "data.txt"
    data.write_bytes(b"ab\r\nab\n")

    assert read_text_file(data) == "ab\r\nab\n"
    assert search_file_kmp(data, "ab") == [0, 4]
    assert search_file_kmp(data, "b\r\na") == [1]


def test_missing_file_raises(tmp_path: Path) -> None:
    """Ensure missing data files raise SearchError."""
    missing = tmp_path / "missing.txt"
    with pytest.raises(SearchError, match="not found"):
        search_file_kmp(missing, "anything")


@pytest.mark.parametrize("algo", ["kmp", "naive", "str_find"])
@pytest.mark.parametrize("reread", [True, False])
def test_engine_algorithms_consistency(
    tmp_path: Path, algo: str, reread: bool
) -> None:
    """Ensure every algorithm behaves the same via SearchEngine."""
    data = tmp_path / "data.txt"
    data.write_text("ABABDABACDABABCABAB", encoding="utf-8")

    cfg = AppConfig(
        linuxpath=data,
        reread_on_query=reread,
        search_algo=algo,
    )
    engine = SearchEngine.from_config(cfg)

    assert engine.find("ABABC") == [10]
    assert engine.find("ABAB") == [0, 10, 15]
    assert engine.find("ZZZ") == []
    assert engine.count("AB") == 7


def test_engine_rejects_unknown_algorithm(tmp_path: Path) -> None:
    """Ensure an unsupported algorithm name raises EngineError."""
    cfg = AppConfig(linuxpath=tmp_path / "data.txt", search_algo="grep")

    with pytest.raises(EngineError, match="Unsupported"):
        SearchEngine.from_config(cfg)


@pytest.mark.parametrize("reread", [True, False])
def test_engine_wraps_missing_file(tmp_path: Path, reread: bool) -> None:
    """Ensure a missing data file surfaces as EngineError."""
    cfg = AppConfig(
        linuxpath=tmp_path / "missing.txt",
        reread_on_query=reread,
    )
    engine = SearchEngine.from_config(cfg)

    with pytest.raises(EngineError, match="not found"):
        engine.find("x")


def test_supported_algorithms() -> None:
    assert SearchEngine.supported_algorithms() == {"kmp", "naive", "str_find"}
