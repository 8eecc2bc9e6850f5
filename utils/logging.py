"""Logger factory and benchmark-summary output for the harness.

A benchmark summary is one row per timed section ("sampler", "hull") with a
fixed column set: section, size (sample count or number of points) and the
timing statistics in STAT_KEYS. The same row is logged as a single line and
can be appended to a CSV file.
"""
from __future__ import annotations

import csv
import logging
import math
import os
from typing import Callable, Dict, Mapping, Optional

STAT_KEYS = ("min_us", "max_us", "mean_us", "p50_us", "p95_us")
BENCH_COLUMNS = ("section", "size") + STAT_KEYS
SECTIONS = ("sampler", "hull")

_HANDLER_ATTR = "_graph_numerics_handler"


def get_logger(name: str = "graph-numerics", level: int = logging.INFO) -> logging.Logger:
    """Return `name`'s logger with one compact stream handler attached."""
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    logger.propagate = False
    if not any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        setattr(handler, _HANDLER_ATTR, True)
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s", "%H:%M:%S"))
        logger.addHandler(handler)
    return logger


def bench_row(section: str, size: int, stats: Mapping[str, float]) -> Dict[str, object]:
    """
    Build a validated summary row keyed by BENCH_COLUMNS.

    Raises ValueError for an unknown section, a negative size, missing or
    extra stat keys, or non-finite timings.
    """
    if section not in SECTIONS:
        raise ValueError(f"section must be one of {SECTIONS}, got {section!r}")
    if isinstance(size, bool) or int(size) < 0:
        raise ValueError(f"size must be a non-negative integer, got {size!r}")
    if set(stats) != set(STAT_KEYS):
        raise ValueError(f"stats must have exactly the keys {STAT_KEYS}, got {sorted(stats)}")
    row: Dict[str, object] = {"section": section, "size": int(size)}
    for k in STAT_KEYS:
        v = float(stats[k])
        if not math.isfinite(v):
            raise ValueError(f"{k} must be finite, got {v}")
        row[k] = v
    return row


def log_bench(row: Mapping[str, object], logger: Optional[logging.Logger] = None) -> None:
    """Log a summary row as ``bench <section> size=N min_us=... p95_us=...``."""
    timings = " ".join(f"{k}={float(row[k]):.3f}" for k in STAT_KEYS)  # type: ignore[arg-type]
    lg = logger if logger is not None else get_logger()
    lg.info(f"bench {row['section']} size={row['size']} {timings}")


def bench_csv_writer(path: str) -> Callable[[Mapping[str, object]], None]:
    """
    Return a callable appending summary rows to the CSV at `path`.

    The header is BENCH_COLUMNS and is written only when the file is new or
    empty. An existing file with a different header is rejected.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("path must be a non-empty string")
    abs_path = os.path.abspath(path)

    def _append(row: Mapping[str, object]) -> None:
        if tuple(row) != BENCH_COLUMNS:
            raise ValueError(f"row columns must be {BENCH_COLUMNS}, got {tuple(row)}")
        fresh = not os.path.exists(abs_path) or os.path.getsize(abs_path) == 0
        if not fresh:
            with open(abs_path, "r", encoding="utf-8", newline="") as f:
                header = tuple(next(csv.reader(f), ()))
            if header != BENCH_COLUMNS:
                raise ValueError(f"{abs_path} has header {header}, expected {BENCH_COLUMNS}")
        with open(abs_path, "a", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=BENCH_COLUMNS, lineterminator="\n")
            if fresh:
                writer.writeheader()
            writer.writerow(dict(row))

    return _append


__all__ = [
    "STAT_KEYS",
    "BENCH_COLUMNS",
    "SECTIONS",
    "get_logger",
    "bench_row",
    "log_bench",
    "bench_csv_writer",
]
