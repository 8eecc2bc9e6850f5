from __future__ import annotations

"""
Timing benchmarks for the sequential sampler and the convex hull.

Exports:
- bench_sampler(low=1, high=100_000_000, count=1_000, repeats=20, seed=0) -> dict
- bench_hull(n_points=10_000, repeats=5, seed=0) -> dict
- run_bench(..., csv_path=None) -> dict

Notes:
- Deterministic inputs: every run draws from numpy.random.default_rng(seed).
- Outputs are JSON-native (lists/ints/floats/bools/str).
- The sampler bench is meant to show cost tracking `count`, not `high - low`.
"""

import argparse
import json
import time
from typing import Any, Dict, List, Optional

import numpy as np

from geometry import convex_hull
from sampling import sample_sequence
from utils.logging import bench_csv_writer, bench_row, get_logger, log_bench


def percentile_nearest_rank(values: List[float], p: float) -> float:
    """Nearest-rank percentile for p in [0, 100]; 0.0 for empty input."""
    data = sorted(float(x) for x in values)
    n = len(data)
    if n == 0:
        return 0.0
    if p <= 0.0:
        return float(data[0])
    if p >= 100.0:
        return float(data[-1])
    r = (p / 100.0) * n
    idx = int(r)
    if r - idx > 0.0:
        idx += 1
    idx = max(1, min(n, idx))
    return float(data[idx - 1])


def _stats_us(timings_us: List[float]) -> Dict[str, float]:
    return {
        "min_us": float(min(timings_us)),
        "max_us": float(max(timings_us)),
        "mean_us": float(sum(timings_us) / len(timings_us)),
        "p50_us": percentile_nearest_rank(timings_us, 50.0),
        "p95_us": percentile_nearest_rank(timings_us, 95.0),
    }


def bench_sampler(
    low: int = 1,
    high: int = 100_000_000,
    count: int = 1_000,
    repeats: int = 20,
    seed: int = 0,
) -> Dict[str, Any]:
    if repeats < 1:
        raise ValueError("repeats must be >= 1")
    rng = np.random.default_rng(seed)
    timings: List[float] = []
    valid = True
    for _ in range(int(repeats)):
        t0 = time.perf_counter_ns()
        res = sample_sequence(low, high, count, rng=rng)
        timings.append((time.perf_counter_ns() - t0) / 1_000.0)
        if res.shape[0] != count or (count > 1 and not bool(np.all(np.diff(res) > 0))):
            valid = False
    return {
        "low": int(low),
        "high": int(high),
        "count": int(count),
        "repeats": int(repeats),
        "valid": valid,
        "timings_us": timings,
        "stats": _stats_us(timings),
    }


def bench_hull(n_points: int = 10_000, repeats: int = 5, seed: int = 0) -> Dict[str, Any]:
    if repeats < 1:
        raise ValueError("repeats must be >= 1")
    rng = np.random.default_rng(seed)
    timings: List[float] = []
    sizes: List[int] = []
    for _ in range(int(repeats)):
        pts = rng.random((int(n_points), 2))
        t0 = time.perf_counter_ns()
        res = convex_hull(pts)
        timings.append((time.perf_counter_ns() - t0) / 1_000.0)
        sizes.append(len(res))
    return {
        "n_points": int(n_points),
        "repeats": int(repeats),
        "hull_sizes": sizes,
        "timings_us": timings,
        "stats": _stats_us(timings),
    }


def run_bench(
    low: int = 1,
    high: int = 100_000_000,
    count: int = 1_000,
    repeats: int = 20,
    seed: int = 0,
    hull_points: int = 10_000,
    csv_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Run both benches, log one summary line per section and optionally append CSV rows."""
    logger = get_logger("graph-numerics.bench")
    sp = bench_sampler(low=low, high=high, count=count, repeats=repeats, seed=seed)
    hl = bench_hull(n_points=hull_points, repeats=max(1, repeats // 4), seed=seed)

    rows = [bench_row("sampler", count, sp["stats"]), bench_row("hull", hull_points, hl["stats"])]
    for row in rows:
        log_bench(row, logger=logger)

    out: Dict[str, Any] = {"sampler": sp, "hull": hl}
    if csv_path is not None:
        append = bench_csv_writer(csv_path)
        for row in rows:
            append(row)
        out["csv_path"] = csv_path
    return out


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark the sequential sampler and convex hull")
    parser.add_argument("--low", type=int, default=1, help="Inclusive lower bound of the interval")
    parser.add_argument("--high", type=int, default=100_000_000, help="Inclusive upper bound of the interval")
    parser.add_argument("--count", type=int, default=1_000, help="Sample size")
    parser.add_argument("--repeats", type=int, default=20, help="Number of timed sampler runs")
    parser.add_argument("--seed", type=int, default=0, help="Seed for numpy.random.default_rng")
    parser.add_argument("--hull-points", type=int, default=10_000, help="Number of random points for the hull bench")
    parser.add_argument("--csv", type=str, help="Append one summary row per section to this CSV file")
    args = parser.parse_args()

    summary = run_bench(
        low=args.low,
        high=args.high,
        count=args.count,
        repeats=args.repeats,
        seed=args.seed,
        hull_points=args.hull_points,
        csv_path=args.csv,
    )
    print(json.dumps(summary, sort_keys=True, separators=(",", ":")))
