# bench_profiling.py
"""
Profiling harness comparing Trie queries against linear string scans.

Usage:
    runetrie-bench --runs 200 --warmup 20
    python -m runetrie.core.bench_profiling --config bench.json
"""

from __future__ import annotations

import argparse
import itertools
import logging
import statistics
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
from typing_extensions import TypedDict

from runetrie.core.trie import Trie, new_trie
from runetrie.utils.config_manager import Config
from runetrie.utils.logger_utils import Log, configure

logger = logging.getLogger(__name__)

Query = Callable[[str], object]


class BenchStats(TypedDict):
    calls: int
    mean_ms: float
    median_ms: float
    p99_ms: float


def _words(alphabet: str, depth: int) -> List[str]:
    out: List[str] = []
    for n in range(1, depth + 1):
        out.extend("".join(p) for p in itertools.product(alphabet, repeat=n))
    return out


def build_corpus(alphabet: str = "ABC", noise_alphabet: str = "DEF", depth: int = 3) -> Tuple[List[str], List[str]]:
    """
    Return (targets, searches).
    searches: every string of length 1..depth over alphabet
    targets: searches plus the same over noise_alphabet (stored but never hit)
    """
    searches = sorted(_words(alphabet, depth))
    targets = sorted(searches + _words(noise_alphabet, depth))
    return targets, searches


# linear baselines -------------------------------------------------------------
def scan_shortest_prefix(targets: Sequence[str]) -> Query:
    """Shortest stored prefix by scanning targets in length order."""
    by_len = sorted(targets, key=len)

    def _q(s: str) -> Optional[str]:
        for t in by_len:
            if s.startswith(t):
                return t
        return None
    return _q


def scan_longest_prefix(targets: Sequence[str]) -> Query:
    """Longest stored prefix by scanning targets longest first."""
    by_len = sorted(targets, key=len, reverse=True)

    def _q(s: str) -> Optional[str]:
        for t in by_len:
            if s.startswith(t):
                return t
        return None
    return _q


def scan_exact(targets: Sequence[str]) -> Query:
    def _q(s: str) -> bool:
        for t in targets:
            if s == t:
                return True
        return False
    return _q


def trie_queries(trie: Trie) -> Dict[str, Query]:
    return {
        "trie.match_any": trie.match_any,
        "trie.match_any_prefix_of": trie.match_any_prefix_of,
        "trie.match_prefix_of": trie.match_prefix_of,
        "trie.longest_match_prefix_of": trie.longest_match_prefix_of,
    }


# timing -------------------------------------------------------------
def profile(fn: Query, queries: Sequence[str], runs: int = 200, warmup: int = 20) -> List[float]:
    """Time `runs` full passes of fn over queries. Returns milliseconds per pass."""
    for _ in range(warmup):
        for q in queries:
            fn(q)

    times = []
    for _ in range(runs):
        t0 = time.perf_counter()
        for q in queries:
            fn(q)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def summarize(times: Sequence[float]) -> BenchStats:
    if not times:
        raise ValueError("no timings to summarize")
    return BenchStats(
        calls=len(times),
        mean_ms=statistics.mean(times),
        median_ms=statistics.median(times),
        p99_ms=float(np.percentile(np.asarray(times, dtype=float), 99)),
    )


def run_benchmarks(config: Optional[Config] = None) -> Dict[str, BenchStats]:
    cfg = config or Config()
    with Log.time_block("build corpus"):
        targets, searches = build_corpus(cfg.get("alphabet"), cfg.get("noise_alphabet"), cfg.get("depth"))
        trie = new_trie(*targets)
    logger.debug("corpus: %d targets, %d searches", len(targets), len(searches))

    cases: Dict[str, Query] = {
        "scan.shortest_prefix": scan_shortest_prefix(targets),
        "scan.longest_prefix": scan_longest_prefix(targets),
        "scan.exact": scan_exact(targets),
    }
    cases.update(trie_queries(trie))

    results: Dict[str, BenchStats] = {}
    for name, fn in cases.items():
        stats = summarize(profile(fn, searches, runs=cfg.get("runs"), warmup=cfg.get("warmup")))
        Log.metric(f"{name} mean", round(stats["mean_ms"], 4), "ms")
        results[name] = stats
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark runetrie against linear scans")
    parser.add_argument("--config", default=None, help="JSON file overriding benchmark defaults")
    parser.add_argument("--runs", type=int, default=None)
    parser.add_argument("--warmup", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    configure(args.log_level)
    cfg = Config(args.config)
    if args.runs is not None:
        cfg.set("runs", args.runs)
    if args.warmup is not None:
        cfg.set("warmup", args.warmup)

    results = run_benchmarks(cfg)
    print(f"{'case':32} {'calls':>6} {'mean ms':>10} {'median ms':>10} {'p99 ms':>10}")
    for name, s in results.items():
        print(f"{name:32} {s['calls']:>6} {s['mean_ms']:>10.4f} {s['median_ms']:>10.4f} {s['p99_ms']:>10.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
