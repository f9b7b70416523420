import pytest

from diskchannels.cli import main


def _pairs(path):
    lines = path.read_text().splitlines()
    return [line.split() for line in lines]


def _run(tmp_path, size, radius, seed=1):
    code = main(
        [
            "--size",
            str(size),
            "--radius",
            str(radius),
            "--seed",
            str(seed),
            "--output-dir",
            str(tmp_path),
        ]
    )
    return code


def test_main_writes_loads_in_range(tmp_path):
    assert _run(tmp_path, 5, 0.144) == 0
    rows = _pairs(tmp_path / "exemple_rhos.txt")
    assert [int(u) for u, _ in rows] == list(range(5))
    for _, value in rows:
        assert 0.1 - 1e-6 <= float(value) <= 0.6 + 1e-6


def test_main_allocation_puts_everything_on_channel_zero(tmp_path):
    _run(tmp_path, 5, 0.144)
    rows = _pairs(tmp_path / "exemple_allocation.txt")
    assert rows == [[str(u), "0"] for u in range(5)]


def test_main_performance_bounded_by_load(tmp_path):
    _run(tmp_path, 5, 0.144, seed=3)
    rhos = {u: float(v) for u, v in _pairs(tmp_path / "exemple_rhos.txt")}
    perf = {u: float(v) for u, v in _pairs(tmp_path / "exemple_model_performances.txt")}
    assert perf.keys() == rhos.keys()
    for u, value in perf.items():
        assert 0.0 <= value <= rhos[u] + 1e-5


def test_main_large_radius_gives_complete_graph(tmp_path):
    _run(tmp_path, 4, 1.0)
    rows = _pairs(tmp_path / "exemple_graph.txt")
    edges = [(int(u), int(v)) for u, v in rows]
    assert edges == [(u, v) for u in range(4) for v in range(u + 1, 4)]


def test_main_zero_radius_gives_no_edges(tmp_path):
    _run(tmp_path, 4, 0.0)
    assert (tmp_path / "exemple_graph.txt").read_text() == ""


def test_main_rejects_bad_size(tmp_path):
    with pytest.raises(SystemExit):
        main(["--size", "many", "--output-dir", str(tmp_path)])