import random

import pytest

from algolab.binomial import BinomialHeap, main, run_commands


def _filled(values):
    heap = BinomialHeap()
    for value in values:
        heap.insert(value)
    return heap


def _drain(heap):
    return [heap.extract_min() for _ in range(len(heap))]


def test_extract_returns_sorted_values():
    values = [7, 12, 19, 5, 16, 6, 3, 3, 40, -2]
    heap = _filled(values)
    assert len(heap) == len(values)
    assert _drain(heap) == sorted(values)
    assert len(heap) == 0


@pytest.mark.parametrize("seed", range(5))
def test_random_sequences_sort(seed):
    rng = random.Random(seed)
    values = [rng.randrange(-500, 500) for _ in range(rng.randrange(1, 120))]
    assert _drain(_filled(values)) == sorted(values)


def test_find_min_does_not_remove():
    heap = _filled([9, 4, 11])
    assert heap.find_min() == 4
    assert heap.find_min() == 4
    assert len(heap) == 3


def test_single_element_extract_returns_it():
    heap = _filled([42])
    assert heap.extract_min() == 42
    with pytest.raises(IndexError):
        heap.find_min()


def test_empty_heap_raises():
    heap = BinomialHeap()
    with pytest.raises(IndexError):
        heap.find_min()
    with pytest.raises(IndexError):
        heap.extract_min()


def test_decrease_key_moves_value_to_front():
    heap = _filled([7, 12, 19, 5, 16, 6])
    heap.decrease_key(16, 1)
    assert heap.find_min() == 1
    assert _drain(heap) == [1, 5, 6, 7, 12, 19]


def test_decrease_key_errors():
    heap = _filled([7, 12])
    with pytest.raises(KeyError):
        heap.decrease_key(100, 1)
    with pytest.raises(ValueError):
        heap.decrease_key(7, 20)


def test_format_shows_trees_by_degree():
    heap = _filled([7, 12, 19])
    expected = (
        "Binomial Tree, B0\nLevel 0 : 19 \n"
        "Binomial Tree, B1\nLevel 0 : 7 \nLevel 1 : 12 \n"
    )
    assert heap.format() == expected


def test_format_negate_flips_signs():
    heap = _filled([-3])
    assert heap.format(negate=True) == "Binomial Tree, B0\nLevel 0 : 3 \n"


def test_format_level_sizes_are_binomial():
    heap = _filled(range(8))
    lines = heap.format().splitlines()
    assert lines[0] == "Binomial Tree, B3"
    counts = [len(line.split(" : ")[1].split()) for line in lines[1:]]
    assert counts == [1, 3, 3, 1]


def test_run_commands_as_max_heap():
    out = run_commands(["INS 5", "INS 3", "FIN", "EXT", "FIN", "BYE", "INS 9"])
    assert out == [
        "Inserted 5",
        "Inserted 3",
        "FindMax returned 5",
        "ExtractMax returned 5",
        "FindMax returned 3",
    ]


def test_run_commands_on_empty_heap():
    assert run_commands(["FIN EXT BYE"]) == ["FindMax returned 0", "ExtractMax returned 0"]


def test_run_commands_increase_and_print():
    out = run_commands(["INS 4", "INC 4 10", "PRI", "BYE"])
    assert out[1] == "Increased 4. The updated value is 10."
    assert out[2] == "Printing Binomial Heap..."
    assert out[4:6] == ["Binomial Tree, B0", "Level 0 : 10 "]
    assert out[3] == out[6]


def test_run_commands_truncated_input():
    with pytest.raises(ValueError):
        run_commands(["INS"])


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "commands.txt"
    path.write_text("INS 8\nINS 2\nEXT\nBYE\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "ExtractMax returned 8"