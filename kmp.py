#!/usr/bin/python3
"""
Knuth-Morris-Pratt exact substring search.

This module provides the two core operations of the search service:

- build_failure_table(): preprocess a pattern into its longest proper
  prefix-suffix (LPS) table.
- search() / iter_search(): scan a text once, left to right, and report every
  start offset where the pattern occurs (overlapping occurrences included).

Edge policy:
- An empty (or None) pattern has no occurrences.
- A None text is treated as empty.
- A text shorter than the pattern is not scanned.

Both phases share advance_with_fallback(), which extends a partial match by one
symbol and falls back through the table on mismatch. The text index is never
moved backward, so a search runs in O(n + m).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence


def advance_with_fallback(
    table: Sequence[int],
    reference: Sequence,
    matched: int,
    symbol: object,
) -> int:
    """Extend a partial match of `reference` by one symbol.

    Args:
        table: Failure table of `reference`.
        reference: The sequence being matched against (the pattern).
        matched: How many leading symbols of `reference` are matched so far.
            Must be smaller than len(reference).
        symbol: The next symbol read from the scanned sequence.

    Returns:
        The new matched length after consuming `symbol`.
    """
    while matched > 0 and reference[matched] != symbol:
        matched = table[matched - 1]
    if reference[matched] == symbol:
        matched += 1
    return matched


def build_failure_table(pattern: Optional[Sequence]) -> list[int]:
    """Build the LPS table of a pattern.

    Entry i is the length of the longest proper prefix of pattern[:i + 1] that
    is also a suffix of it. The pattern is matched against itself using the
    same fallback step the matcher uses.

    Args:
        pattern: Pattern of any length; None is treated as empty.

    Returns:
        A list with one entry per pattern symbol ([] for an empty pattern).
    """
    if not pattern:
        return []

    table = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        length = advance_with_fallback(table, pattern, length, pattern[i])
        table[i] = length
    return table


def iter_search(
    text: Optional[Sequence],
    pattern: Optional[Sequence],
    table: Optional[Sequence[int]] = None,
) -> Iterator[int]:
    """Lazily yield the start offsets of `pattern` in `text`.

    Offsets are produced in strictly increasing order. Scan state is kept
    between yields, so the caller can stop early.

    Args:
        text: Text to scan; None is treated as empty.
        pattern: Pattern to find; None or empty yields nothing.
        table: Optional precomputed failure table for `pattern`.

    Yields:
        0-based start offsets of every occurrence.

    Raises:
        ValueError: If a supplied table does not match the pattern length.
    """
    if not pattern:
        return

    m = len(pattern)
    if table is not None and len(table) != m:
        raise ValueError(
            f"Failure table length {len(table)} does not match "
            f"pattern length {m}"
        )

    if not text or len(text) < m:
        return

    if table is None:
        table = build_failure_table(pattern)

    j = 0
    for i, symbol in enumerate(text):
        j = advance_with_fallback(table, pattern, j, symbol)
        if j == m:
            yield i - m + 1
            j = table[j - 1]


def search(
    text: Optional[Sequence],
    pattern: Optional[Sequence],
) -> list[int]:
    """Return every start offset of `pattern` in `text`, ascending.

    Overlapping occurrences are reported: search("AAAA", "AA") == [0, 1, 2].
    An empty pattern returns [] rather than matching at every position.
    """
    return list(iter_search(text, pattern))


def search_naive(
    text: Optional[Sequence],
    pattern: Optional[Sequence],
) -> list[int]:
    """Brute-force O(n*m) scan with the same edge policy as search()."""
    if not pattern or not text:
        return []

    n = len(text)
    m = len(pattern)
    occurrences: list[int] = []
    for start in range(n - m + 1):
        k = 0
        while k < m and text[start + k] == pattern[k]:
            k += 1
        if k == m:
            occurrences.append(start)
    return occurrences


@dataclass(frozen=True)
class CompiledPattern:
    """A pattern paired with its precomputed failure table.

    The table is stored as a tuple and never changes, so one instance can be
    shared across threads and reused against many texts.

    Attributes:
        pattern: The pattern to search for.
        table: Failure table of `pattern`.
    """

    pattern: Sequence
    table: tuple[int, ...] = field(repr=False)

    def finditer(self, text: Optional[Sequence]) -> Iterator[int]:
        """Yield occurrence offsets of the pattern in `text`."""
        return iter_search(text, self.pattern, self.table)

    def findall(self, text: Optional[Sequence]) -> list[int]:
        """Return all occurrence offsets of the pattern in `text`."""
        return list(self.finditer(text))

    def count(self, text: Optional[Sequence]) -> int:
        """Return the number of (possibly overlapping) occurrences."""
        return sum(1 for _ in self.finditer(text))


def compile_pattern(pattern: Optional[Sequence]) -> CompiledPattern:
    """Preprocess `pattern` once for repeated searches."""
    if pattern is None:
        pattern = ""
    return CompiledPattern(
        pattern=pattern,
        table=tuple(build_failure_table(pattern)),
    )
