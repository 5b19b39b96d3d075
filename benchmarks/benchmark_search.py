#!/usr/bin/python3
# benchmarks/benchmark_search.py

from __future__ import annotations

import argparse
import csv
import random
import statistics
import time
from pathlib import Path
from typing import Any

from config import AppConfig
from demo import generate_dna_sequence
from search_engine import EngineError, SearchEngine


# ----------------------------
# Utilities
# ----------------------------

def percentile(values: list[float], pct: float) -> float:
    if not values:
        return 0.0
    values_sorted = sorted(values)
    k = int(round((pct / 100.0) * (len(values_sorted) - 1)))
    k = max(0, min(k, len(values_sorted) - 1))
    return float(values_sorted[k])


def now_ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


# ----------------------------
# Data generation
# ----------------------------

def generate_data_file(path: Path, length: int, seed: int = 123) -> str:
    """
    Write a deterministic DNA-like text of `length` characters to `path`.
    Returns the generated text.
    """
    ensure_dir(path.parent)
    text = generate_dna_sequence(length, seed=seed)
    path.write_text(text, encoding="utf-8")
    return text


def make_patterns(
        text: str, total: int, pattern_len: int = 8,
        hit_ratio: float = 0.5, seed: int = 456
) -> list[str]:
    """
    Build `total` patterns: slices of `text` (hits) and random
    nucleotide strings, which mostly miss for longer patterns.
    """
    rng = random.Random(seed)
    patterns: list[str] = []
    for _ in range(total):
        if rng.random() < hit_ratio and len(text) >= pattern_len:
            start = rng.randint(0, len(text) - pattern_len)
            patterns.append(text[start:start + pattern_len])
        else:
            patterns.append(
                "".join(rng.choice("ACGT") for _ in range(pattern_len))
            )
    return patterns


# ----------------------------
# Algo benchmark (direct engine.find)
# ----------------------------

def benchmark_algo(
    file_path: Path,
    algo: str,
    reread_on_query: bool,
    patterns: list[str],
) -> dict[str, Any]:
    cfg = AppConfig(
        linuxpath=file_path,
        reread_on_query=reread_on_query,
        search_algo=algo,
    )
    engine = SearchEngine.from_config(cfg)

    if not reread_on_query:
        engine.warmup()

    durations_ms: list[float] = []
    matches = 0

    # micro warmup
    for p in patterns[:10]:
        engine.find(p)

    for p in patterns:
        t0 = time.perf_counter()
        found = engine.find(p)
        t1 = time.perf_counter()
        durations_ms.append((t1 - t0) * 1000.0)
        matches += len(found)

    return {
        "ts": now_ts(),
        "algo": algo,
        "reread_on_query": str(reread_on_query).lower(),
        "chars": len(engine.text()),
        "patterns": len(patterns),
        "matches": matches,
        "avg_ms": statistics.mean(durations_ms),
        "p50_ms": percentile(durations_ms, 50),
        "p95_ms": percentile(durations_ms, 95),
        "min_ms": min(durations_ms),
        "max_ms": max(durations_ms),
    }


# ----------------------------
# CSV writing
# ----------------------------

def write_csv(path: Path, rows: list[dict[str, Any]]) -> None:
    if not rows:
        return
    ensure_dir(path.parent)

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        for r in rows:
            w.writerow(r)


# ----------------------------
# CLI
# ----------------------------

def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Benchmark substring search algorithms."
    )
    p.add_argument(
        "--outdir", default="benchmarks/results",
        help="Output directory for CSV results."
    )
    p.add_argument(
        "--datadir", default="benchmarks/data",
        help="Directory to store generated data files."
    )
    p.add_argument(
        "--sizes", default="10000,100000,1000000",
        help="Comma-separated text lengths in characters."
    )
    p.add_argument(
        "--patterns", type=int, default=100,
        help="Number of patterns per algo run."
    )
    p.add_argument(
        "--pattern-len", type=int, default=8,
        help="Length of each generated pattern."
    )
    p.add_argument(
        "--hit-ratio", type=float, default=0.5,
        help="Fraction of patterns sliced from the text."
    )
    p.add_argument(
        "--algos", default="kmp,naive,str_find",
        help="Comma-separated algos."
    )
    p.add_argument(
        "--verbose", action="store_true", help="Print progress updates."
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()

    outdir = Path(args.outdir)
    datadir = Path(args.datadir)
    ensure_dir(outdir)
    ensure_dir(datadir)

    sizes = [int(x.strip()) for x in args.sizes.split(",") if x.strip()]
    supported = SearchEngine.supported_algorithms()
    algos = [
        x.strip() for x in args.algos.split(",")
        if x.strip() in supported
    ]

    if args.verbose:
        print(f"Benchmarking algos: {algos}", flush=True)

    rows: list[dict[str, Any]] = []

    for n in sizes:
        data_file = datadir / f"dna_{n}.txt"
        text = generate_data_file(data_file, n, seed=123)
        patterns = make_patterns(
            text,
            total=args.patterns,
            pattern_len=args.pattern_len,
            hit_ratio=args.hit_ratio,
        )

        for algo in algos:
            for reread in (True, False):
                if args.verbose:
                    print(
                        f"chars={n} algo={algo} reread={reread}",
                        flush=True
                    )
                try:
                    rows.append(
                        benchmark_algo(data_file, algo, reread, patterns)
                    )
                except EngineError as exc:
                    print(f"  -> skipped: {exc}", flush=True)

    write_csv(outdir / "results_algo.csv", rows)
    print(f"Wrote results to: {outdir}", flush=True)


if __name__ == "__main__":
    main()
