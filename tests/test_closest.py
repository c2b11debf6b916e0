import itertools
import random

import pytest

from algolab.closest import (
    Axis,
    Point,
    closest_pair,
    distance,
    random_points,
    second_closest_pair,
    sort_points,
)


def _by_id(points):
    return {p.id: p for p in points}


def test_distance_three_four_five():
    assert distance(Point(0, 0, 0), Point(3, 4, 1)) == 5.0


def test_distance_is_symmetric():
    a, b = Point(-2, 7, 0), Point(5, -1, 1)
    assert distance(a, b) == distance(b, a)


def test_sort_points_x_axis_breaks_ties_by_y():
    points = [Point(2, 5, 0), Point(1, 9, 1), Point(2, 1, 2)]
    assert [p.id for p in sort_points(points, Axis.X)] == [1, 2, 0]


def test_sort_points_y_axis_breaks_ties_by_x():
    points = [Point(5, 2, 0), Point(9, 1, 1), Point(1, 2, 2)]
    assert [p.id for p in sort_points(points, Axis.Y)] == [1, 2, 0]


def test_sort_points_does_not_change_input():
    points = [Point(3, 0, 0), Point(1, 0, 1)]
    sort_points(points)
    assert [p.id for p in points] == [0, 1]


def test_closest_pair_small_example():
    points = [Point(0, 0, 0), Point(10, 10, 1), Point(1, 1, 2)]
    result = closest_pair(points)
    assert {result.first, result.second} == {0, 2}
    assert result.distance == distance(points[0], points[2])


def test_closest_pair_two_points():
    points = [Point(0, 0, 0), Point(3, 4, 1)]
    result = closest_pair(points)
    assert result.distance == 5.0
    assert {result.first, result.second} == {0, 1}


def test_closest_pair_needs_two_points():
    with pytest.raises(ValueError):
        closest_pair([Point(0, 0, 0)])


@pytest.mark.parametrize("seed", range(8))
def test_closest_pair_is_minimal_on_random_points(seed):
    points = random_points(40, 200, -200, random.Random(seed))
    result = closest_pair(points)
    lookup = _by_id(points)
    assert result.first != result.second
    assert result.distance == distance(lookup[result.first], lookup[result.second])
    assert all(
        distance(a, b) >= result.distance for a, b in itertools.combinations(points, 2)
    )


def test_closest_pair_duplicate_points_give_zero():
    points = [Point(5, 5, 0), Point(100, 0, 1), Point(5, 5, 2), Point(-50, 40, 3)]
    result = closest_pair(points)
    assert result.distance == 0.0
    assert {result.first, result.second} == {0, 2}


def test_second_closest_pair_small_example():
    points = [Point(0, 0, 0), Point(1, 0, 1), Point(0, 3, 2), Point(50, 50, 3)]
    result = second_closest_pair(points)
    assert {result.first, result.second} == {0, 2}
    assert result.distance == distance(points[0], points[2])


def test_second_closest_pair_needs_three_points():
    with pytest.raises(ValueError):
        second_closest_pair([Point(0, 0, 0), Point(1, 1, 1)])


@pytest.mark.parametrize("seed", range(5))
def test_second_closest_pair_invariants(seed):
    points = random_points(30, 500, 0, random.Random(seed))
    best = closest_pair(points)
    second = second_closest_pair(points)
    lookup = _by_id(points)
    assert {second.first, second.second} != {best.first, best.second}
    assert second.distance >= best.distance
    assert second.distance == distance(lookup[second.first], lookup[second.second])
    others = [
        distance(a, b)
        for a, b in itertools.combinations(points, 2)
        if {a.id, b.id} != {best.first, best.second}
    ]
    assert all(d >= second.distance for d in others)


def test_random_points_ranges_and_ids():
    points = random_points(50, 10, -10, random.Random(3))
    assert [p.id for p in points] == list(range(50))
    assert all(-10 <= p.x <= 10 and -10 <= p.y <= 10 for p in points)


def test_random_points_reproducible_with_seed():
    first = random_points(10, 99, 0, random.Random(7))
    second = random_points(10, 99, 0, random.Random(7))
    assert [(p.x, p.y, p.id) for p in first] == [(p.x, p.y, p.id) for p in second]
    assert [p.id for p in first] == list(range(10))
    assert all(0 <= p.x <= 99 and 0 <= p.y <= 99 for p in first)


def test_random_points_rejects_inverted_limits():
    with pytest.raises(ValueError):
        random_points(5, 0, 10)


def test_main_prints_second_closest(tmp_path, capsys):
    from algolab.closest import main

    path = tmp_path / "input.txt"
    path.write_text("4\n0 0\n1 0\n0 3\n50 50\n", encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert set(lines[0].split()) == {"0", "2"}
    assert float(lines[1]) == 3.0


def test_main_rejects_short_input(tmp_path):
    from algolab.closest import main

    path = tmp_path / "input.txt"
    path.write_text("5\n0 0\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main([str(path)])