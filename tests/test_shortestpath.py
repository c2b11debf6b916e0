import pytest

from algolab.shortestpath import main, solve

POSITIVE = "4 4\n0 1 4\n0 2 1\n2 1 2\n1 3 1\n0 3\n"
NEGATIVE = "3 3\n0 1 4\n0 2 5\n2 1 -3\n0 1\n"
CYCLE = "3 3\n0 1 1\n1 2 -1\n2 0 -1\n0 2\n"


def test_positive_weights():
    assert solve(POSITIVE) == "Shortest path cost: 4\n0 -> 2 -> 1 -> 3\n"


def test_negative_cycle_reported():
    assert solve(CYCLE) == "The graph contains a negative cycle\n"


def test_negative_weights_without_cycle():
    lines = solve(NEGATIVE).splitlines()
    assert lines[0] == "The graph does not contain a negative cycle"
    assert lines[1].startswith("Shortest path cost: ")
    assert lines[2] == "0 -> 2 -> 1"


def test_source_equals_destination():
    assert solve("2 1\n0 1 3\n1 1\n") == "Shortest path cost: 0\n1\n"


def test_truncated_input():
    with pytest.raises(ValueError):
        solve("3 2\n0 1 1\n")


def test_unreachable_destination():
    with pytest.raises(ValueError):
        solve("3 1\n0 1 1\n0 2\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(POSITIVE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == solve(POSITIVE)


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("3 1\n0 1 1\n0 2\n", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err