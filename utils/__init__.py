from .logging import (
    STAT_KEYS,
    BENCH_COLUMNS,
    SECTIONS,
    get_logger,
    bench_row,
    log_bench,
    bench_csv_writer,
)

__all__ = [
    "STAT_KEYS",
    "BENCH_COLUMNS",
    "SECTIONS",
    "get_logger",
    "bench_row",
    "log_bench",
    "bench_csv_writer",
]
