#!/usr/bin/python3
"""
Tests for reread_on_query behavior.

These tests verify that the SearchEngine correctly reflects file changes
depending on the reread_on_query configuration:
- When True, file changes are visible immediately.
- When False, cached text remains unchanged until restart/warmup.
"""

from __future__ import annotations

from pathlib import Path

from config import AppConfig
from search_engine import SearchEngine


def test_reread_true_sees_file_changes(tmp_path: Path) -> None:
    """Ensure reread_on_query=True reflects file changes immediately."""
    data = tmp_path / "data.txt"
    data.write_text("alpha\n", encoding="utf-8")

    cfg = AppConfig(
        linuxpath=data,
        reread_on_query=True,
        search_algo="kmp",
    )
    engine = SearchEngine.from_config(cfg)

    assert engine.find("beta") == []

    # Modify file after engine creation.
    data.write_text("alpha\nbeta\n", encoding="utf-8")

    assert engine.find("beta") == [6]


def test_reread_false_does_not_see_changes_without_warmup(
    tmp_path: Path,
) -> None:
    """Ensure reread_on_query=False
    does not reflect file changes until warmup runs again."""
    data = tmp_path / "data.txt"
    data.write_text("alpha\n", encoding="utf-8")

    cfg = AppConfig(
        linuxpath=data,
        reread_on_query=False,
        search_algo="kmp",
    )
    engine = SearchEngine.from_config(cfg)
    engine.warmup()

    assert engine.find("beta") == []

    # Modify file after warmup.
    data.write_text("alpha\nbeta\n", encoding="utf-8")

    assert engine.find("beta") == []

    engine.warmup()
    assert engine.find("beta") == [6]


def test_reread_false_warms_up_lazily(tmp_path: Path) -> None:
    """Ensure the first query loads the cache when warmup was skipped."""
    data = tmp_path / "data.txt"
    data.write_text("AAAA", encoding="utf-8")

    cfg = AppConfig(linuxpath=data, reread_on_query=False)
    engine = SearchEngine.from_config(cfg)

    assert engine.find("AA") == [0, 1, 2]
    assert engine.text() == "AAAA"
