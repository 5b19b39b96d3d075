#!/usr/bin/python3
"""
Command-line demonstration of Knuth-Morris-Pratt search.

Without arguments, this runs a fixed set of scenarios (short string,
repeating text, long DNA-like sequence, a no-match case and matches at the
text boundaries), times each search, and prints the occurrences with a few
characters of surrounding context followed by a complexity summary.

Ad-hoc searches are also supported:

    python3 -m demo --text "HELLO WORLD HELLO" --pattern HELLO
    python3 -m demo --file data.txt --pattern GCTAGCTA
    python3 -m demo --config app.conf --text AAAA --pattern AA
"""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path

from config import ConfigError, load_config
from kmp import search
from search import SearchError, read_text_file


PREVIEW_CHARS = 100
RULE = "=" * 80

NUCLEOTIDES = "ACGT"
DNA_MARKER = "GCTAGCTA"

COMPLEXITY_ANALYSIS = """\
TIME COMPLEXITY:
  - Preprocessing (LPS computation): O(m) where m = pattern length
  - Searching: O(n) where n = text length
  - Overall: O(n + m)

SPACE COMPLEXITY:
  - LPS array: O(m)
  - Additional variables: O(1)
  - Overall: O(m)

PROPERTIES:
  - The text is never rescanned: mismatches fall back through the LPS table
  - Overlapping occurrences are reported
  - Worst case stays linear (naive scanning is O(n*m))"""


def generate_repeating_text(base: str, repetitions: int) -> str:
    """Return `base` repeated `repetitions` times."""
    return base * repetitions


def generate_dna_sequence(
    length: int, seed: int = 42, marker: str = DNA_MARKER
) -> str:
    """Generate a reproducible random nucleotide sequence.

    `marker` is written over the sequence at length // 4 and length // 2 so
    at least two occurrences are guaranteed when it fits.

    Args:
        length: Number of characters to generate.
        seed: Seed for the random generator.
        marker: Substring planted in the sequence.

    Returns:
        A string of `length` characters drawn from "ACGT".
    """
    rng = random.Random(seed)
    chars = [rng.choice(NUCLEOTIDES) for _ in range(length)]

    for pos in (length // 4, length // 2):
        if pos + len(marker) <= length:
            chars[pos:pos + len(marker)] = marker

    return "".join(chars)


def format_results(
    text: str,
    pattern: str,
    occurrences: list[int],
    elapsed_ns: int,
    context_chars: int = 5,
) -> str:
    """Render a search result as a human-readable report.

    Args:
        text: Text that was searched.
        pattern: Pattern that was searched for.
        occurrences: Offsets returned by the search.
        elapsed_ns: Search duration in nanoseconds.
        context_chars: Characters shown on each side of a match.

    Returns:
        The multi-line report.
    """
    lines = [
        RULE,
        "SEARCH RESULTS",
        RULE,
        f"Text length: {len(text)} characters",
        f"Pattern length: {len(pattern)} characters",
        f'Pattern: "{pattern}"',
        "",
        f"Text preview (first {PREVIEW_CHARS} chars):",
        f'"{text[:PREVIEW_CHARS]}..."',
        "",
    ]

    if not occurrences:
        lines.append("Pattern not found in text.")
    else:
        lines.append(
            f"Pattern found {len(occurrences)} time(s) at position(s):"
        )
        for pos in occurrences:
            start = max(0, pos - context_chars)
            end = min(len(text), pos + len(pattern) + context_chars)
            lines.append(f'  - Index {pos}: "...{text[start:end]}..."')

    lines += [
        "",
        f"Execution time: {elapsed_ns} nanoseconds "
        f"({elapsed_ns / 1_000_000:.6f} ms)",
        RULE,
    ]
    return "\n".join(lines)


def timed_search(text: str, pattern: str) -> tuple[list[int], int]:
    """Run search() and return its result with the elapsed nanoseconds."""
    start = time.perf_counter_ns()
    occurrences = search(text, pattern)
    return occurrences, time.perf_counter_ns() - start


def builtin_scenarios() -> list[tuple[str, str, str]]:
    """Return (title, text, pattern) for the demonstration scenarios."""
    return [
        ("SHORT STRING", "ABABDABACDABABCABAB", "ABABC"),
        (
            "MEDIUM STRING",
            generate_repeating_text("ABCD", 100),
            "ABCDABCD",
        ),
        ("LONG STRING", generate_dna_sequence(10_000), DNA_MARKER),
        ("NO MATCH SCENARIO", "AAAAAAAAAAA", "AAAB"),
        ("PATTERN AT BOUNDARIES", "HELLO WORLD HELLO", "HELLO"),
    ]


def run_scenarios(context_chars: int = 5) -> None:
    print("KNUTH-MORRIS-PRATT (KMP) STRING MATCHING ALGORITHM")

    for number, (title, text, pattern) in enumerate(
        builtin_scenarios(), start=1
    ):
        print(f"\n### TEST CASE {number}: {title} ###")
        occurrences, elapsed_ns = timed_search(text, pattern)
        print(
            format_results(
                text, pattern, occurrences, elapsed_ns, context_chars
            )
        )

    print(f"\n{RULE}\nCOMPLEXITY ANALYSIS\n{RULE}")
    print(COMPLEXITY_ANALYSIS)
    print(RULE)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Demonstrate Knuth-Morris-Pratt substring search."
    )
    source = p.add_mutually_exclusive_group()
    source.add_argument("--text", help="Text to search.")
    source.add_argument("--file", type=Path, help="Text file to search.")
    p.add_argument("--pattern", help="Pattern to search for.")
    p.add_argument(
        "--context", type=int, default=None,
        help="Characters of context shown around each match "
             "(default: context_chars from --config, else 5)."
    )
    p.add_argument(
        "--config",
        help="Optional config file; supplies context_chars.",
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()

    if args.context is None:
        args.context = 5
        if args.config:
            try:
                args.context = load_config(args.config).context_chars
            except ConfigError as exc:
                raise SystemExit(f"Config error: {exc}") from exc

    if args.text is None and args.file is None:
        run_scenarios(args.context)
        return

    if args.pattern is None:
        raise SystemExit("--pattern is required with --text or --file")

    if args.file is not None:
        try:
            text = read_text_file(args.file)
        except SearchError as exc:
            raise SystemExit(f"Search error: {exc}") from exc
    else:
        text = args.text

    occurrences, elapsed_ns = timed_search(text, args.pattern)
    print(
        format_results(
            text, args.pattern, occurrences, elapsed_ns, args.context
        )
    )


if __name__ == "__main__":
    main()
