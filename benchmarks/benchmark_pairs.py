#!/usr/bin/env python3
"""
All-pairs similarity benchmark.

Compares, over a collection of synthetic strings with duplicates:
- Uncached scoring (histogram + match + coefficient per pair)
- Cached scoring (FIFO value cache keyed by pair hash)
- Cached scoring with a cache too small for the workload (eviction churn)

Metrics:
1. Throughput (pairs/s)
2. Cache hit rate
3. Evictions
"""

from __future__ import annotations

import random
import statistics
import time
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from pairsim import ValueCache, pairwise
from pairsim.types import CacheStats

# ---------------------------------------------------------------------------
# Workload generation
# ---------------------------------------------------------------------------

_WORDS = ["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog"]


def create_strings(count: int, duplicate_ratio: float = 0.3, seed: int = 7) -> list[str]:
    """
    Create ``count`` short strings, a fraction of which repeat earlier ones.

    Args:
        count: Number of strings
        duplicate_ratio: Probability that a string copies an earlier one
        seed: RNG seed for reproducibility
    """
    rng = random.Random(seed)
    result: list[str] = []
    for _ in range(count):
        if result and rng.random() < duplicate_ratio:
            result.append(rng.choice(result))
        else:
            result.append(" ".join(rng.choice(_WORDS) for _ in range(rng.randint(2, 8))))
    return result


# ---------------------------------------------------------------------------
# Benchmark framework
# ---------------------------------------------------------------------------


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""

    scenario: str
    pairs_per_s: float
    hit_rate: float
    evictions: int


def measure_throughput(
    scorer: Callable[[list[str]], np.ndarray],
    strings: list[str],
    iterations: int = 3,
) -> float:
    """
    Measure all-pairs scoring throughput.

    Returns pairs scored per second (upper triangle including the diagonal).
    """
    n = len(strings)
    pairs = n * (n + 1) // 2

    times: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        scorer(strings)
        times.append(time.perf_counter() - start)

    avg_time = statistics.mean(times)
    return pairs / avg_time if avg_time > 0 else 0.0


def run_cached(strings: list[str], capacity: int, coefficient: str = "jaccard") -> CacheStats:
    """Score all pairs once through a fresh cache and return its final stats."""
    with ValueCache().init(capacity) as cache:
        pairwise(strings, coefficient, cache=cache)
        return cache.info()


def run_benchmark(count: int = 300, coefficient: str = "jaccard") -> list[BenchmarkResult]:
    """Run the uncached, cached and undersized-cache scenarios."""
    strings = create_strings(count)
    pairs = count * (count + 1) // 2
    results: list[BenchmarkResult] = []

    throughput = measure_throughput(lambda s: pairwise(s, coefficient), strings)
    results.append(BenchmarkResult("uncached", throughput, 0.0, 0))

    for label, capacity in (("cached (fits)", pairs), ("cached (1/10)", max(1, pairs // 10))):
        throughput = measure_throughput(
            lambda s, cap=capacity: _cached_matrix(s, cap, coefficient), strings
        )
        stats = run_cached(strings, capacity, coefficient)
        results.append(BenchmarkResult(label, throughput, stats.hit_rate, stats.evictions))

    return results


def _cached_matrix(strings: list[str], capacity: int, coefficient: str) -> np.ndarray:
    with ValueCache().init(capacity) as cache:
        return pairwise(strings, coefficient, cache=cache)


def print_results(results: list[BenchmarkResult]) -> None:
    """Pretty-print benchmark results."""
    print("\n" + "=" * 60)
    print(f"{'Scenario':<18} {'Pairs/s':>14} {'Hit rate':>10} {'Evictions':>12}")
    print("-" * 60)
    for r in results:
        print(f"{r.scenario:<18} {r.pairs_per_s:>14,.0f} {r.hit_rate:>10.1%} {r.evictions:>12,}")
    print("-" * 60)


def main() -> None:
    """Run the benchmark for a few collection sizes."""
    print("All-pairs similarity benchmark\n")
    for count in (100, 300):
        print(f"Collection size: {count}")
        print_results(run_benchmark(count))


if __name__ == "__main__":
    main()
