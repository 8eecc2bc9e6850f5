import logging

import pytest

from utils.logging import BENCH_COLUMNS, bench_csv_writer, bench_row, get_logger, log_bench

_STATS = {"min_us": 1.0, "max_us": 9.0, "mean_us": 4.25, "p50_us": 4.0, "p95_us": 8.5}


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_get_logger_is_idempotent():
    a = get_logger("graph-numerics.test-idem")
    n = len(a.handlers)
    b = get_logger("graph-numerics.test-idem")
    assert a is b
    assert len(b.handlers) == n == 1
    assert b.propagate is False


def test_bench_row_orders_columns():
    row = bench_row("sampler", 10, dict(reversed(list(_STATS.items()))))
    assert tuple(row) == BENCH_COLUMNS
    assert row["section"] == "sampler"
    assert row["size"] == 10
    assert row["mean_us"] == 4.25


@pytest.mark.parametrize(
    "section,size,stats",
    [
        ("reservoir", 10, _STATS),
        ("hull", -1, _STATS),
        ("hull", True, _STATS),
        ("hull", 5, {k: v for k, v in _STATS.items() if k != "p95_us"}),
        ("hull", 5, {**_STATS, "extra_us": 1.0}),
        ("hull", 5, {**_STATS, "max_us": float("inf")}),
    ],
)
def test_bench_row_validation(section, size, stats):
    with pytest.raises(ValueError):
        bench_row(section, size, stats)


def test_log_bench_line():
    lg = get_logger("graph-numerics.test-line")
    h = _ListHandler()
    lg.addHandler(h)
    log_bench(bench_row("hull", 200, _STATS), logger=lg)
    assert h.messages == [
        "bench hull size=200 min_us=1.000 max_us=9.000 mean_us=4.250 p50_us=4.000 p95_us=8.500"
    ]


def test_csv_writer_header_once(tmp_path):
    path = tmp_path / "bench.csv"
    append = bench_csv_writer(str(path))
    append(bench_row("sampler", 10, _STATS))
    append(bench_row("hull", 200, _STATS))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ",".join(BENCH_COLUMNS)
    assert lines[1] == "sampler,10,1.0,9.0,4.25,4.0,8.5"
    assert lines[2].startswith("hull,200,")
    assert len(lines) == 3


def test_csv_writer_rejects_foreign_rows_and_files(tmp_path):
    path = tmp_path / "bench.csv"
    append = bench_csv_writer(str(path))
    with pytest.raises(ValueError):
        append({"section": "hull", "size": 1})
    assert not path.exists()

    other = tmp_path / "other.csv"
    other.write_text("a,b\n1,2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        bench_csv_writer(str(other))(bench_row("hull", 3, _STATS))
    assert other.read_text(encoding="utf-8") == "a,b\n1,2\n"


def test_csv_writer_rejects_empty_path():
    with pytest.raises(ValueError):
        bench_csv_writer("")
