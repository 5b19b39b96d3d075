#!/usr/bin/python3
"""
Substring search over text files.

This module loads a data file and locates every occurrence of a pattern in it
using one of several strategies:

- kmp: Knuth-Morris-Pratt scan (see kmp.py), linear time.
- naive: brute-force reference scan, O(n*m) worst case.
- str_find: repeated str.find() calls, stepping one character past each hit.

All strategies report the same occurrences: ascending 0-based offsets,
overlapping matches included, and no occurrences for an empty pattern.

Errors are surfaced as SearchError with context.
"""

from __future__ import annotations

from pathlib import Path

from kmp import search, search_naive


class SearchError(RuntimeError):
    """Raised when the search subsystem cannot read the data file."""


def read_text_file(file_path: Path) -> str:
    """Read the whole data file as text.

    Line terminators are preserved so offsets refer to the file as stored.

    Args:
        file_path: Path to the data file.

    Returns:
        The decoded file contents.

    Raises:
        SearchError: If the file cannot be read.
    """
    try:
        with file_path.open(
            "r", encoding="utf-8", errors="replace", newline=""
        ) as f:
            return f.read()
    except FileNotFoundError as exc:
        raise SearchError(f"Data file not found: {file_path}") from exc
    except OSError as exc:
        raise SearchError(
            f"Failed reading data file: {file_path} ({exc})"
        ) from exc


def search_text_str_find(text: str, pattern: str) -> list[int]:
    """Find all occurrences using the built-in str.find().

    Args:
        text: Text to scan.
        pattern: Pattern to locate.

    Returns:
        Ascending start offsets, overlapping occurrences included.
    """
    if not pattern or not text:
        return []

    occurrences: list[int] = []
    start = 0
    while True:
        pos = text.find(pattern, start)
        if pos == -1:
            return occurrences
        occurrences.append(pos)
        start = pos + 1


def search_file_kmp(file_path: Path, pattern: str) -> list[int]:
    """Read the file and search it with Knuth-Morris-Pratt.

    Raises:
        SearchError: If the file cannot be read.
    """
    return search(read_text_file(file_path), pattern)


def search_file_naive(file_path: Path, pattern: str) -> list[int]:
    """Read the file and search it with the brute-force scan.

    Raises:
        SearchError: If the file cannot be read.
    """
    return search_naive(read_text_file(file_path), pattern)


def search_file_str_find(file_path: Path, pattern: str) -> list[int]:
    """Read the file and search it with repeated str.find().

    Raises:
        SearchError: If the file cannot be read.
    """
    return search_text_str_find(read_text_file(file_path), pattern)


TEXT_SEARCHERS = {
    "kmp": search,
    "naive": search_naive,
    "str_find": search_text_str_find,
}

FILE_SEARCHERS = {
    "kmp": search_file_kmp,
    "naive": search_file_naive,
    "str_find": search_file_str_find,
}
