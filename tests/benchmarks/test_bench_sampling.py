from __future__ import annotations

import math

from harness.bench_sampling import bench_hull, bench_sampler, percentile_nearest_rank, run_bench
from utils.logging import BENCH_COLUMNS


def _is_num(x) -> bool:
    return isinstance(x, (int, float)) and math.isfinite(float(x))


def test_percentile_nearest_rank():
    vals = [5.0, 1.0, 3.0, 2.0, 4.0]
    assert percentile_nearest_rank(vals, 50.0) == 3.0
    assert percentile_nearest_rank(vals, 0.0) == 1.0
    assert percentile_nearest_rank(vals, 100.0) == 5.0
    assert percentile_nearest_rank([], 50.0) == 0.0


def test_bench_sampler_smoke():
    res = bench_sampler(low=1, high=10**8, count=50, repeats=4, seed=1)
    assert res["valid"] is True
    assert len(res["timings_us"]) == 4
    for k in ("min_us", "max_us", "mean_us", "p50_us", "p95_us"):
        assert _is_num(res["stats"][k])


def test_bench_hull_smoke():
    res = bench_hull(n_points=200, repeats=2, seed=3)
    assert len(res["hull_sizes"]) == 2
    assert all(s >= 3 for s in res["hull_sizes"])


def test_run_bench_writes_csv(tmp_path):
    path = tmp_path / "bench.csv"
    out = run_bench(count=20, repeats=4, hull_points=100, csv_path=str(path))
    assert out["csv_path"] == str(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ",".join(BENCH_COLUMNS)
    assert [ln.split(",")[:2] for ln in lines[1:]] == [["sampler", "20"], ["hull", "100"]]

    run_bench(count=5, repeats=1, hull_points=10, csv_path=str(path))
    assert len(path.read_text(encoding="utf-8").splitlines()) == 5
