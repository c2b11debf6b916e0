"""Closest and second-closest pairs of points in the plane by divide and conquer."""

from __future__ import annotations

import argparse
import math
import random
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple, Sequence


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates and an identifier."""

    x: int
    y: int
    id: int


class Axis(Enum):
    """Primary sort axis; the other coordinate breaks ties."""

    X = 0
    Y = 1


class Pair(NamedTuple):
    """Distance between two points and their identifiers."""

    distance: float
    first: int
    second: int


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def sort_points(points: Iterable[Point], axis: Axis = Axis.X) -> list[Point]:
    """Return the points ordered along ``axis``, ties broken by the other coordinate."""
    if axis is Axis.X:
        return sorted(points, key=lambda p: (p.x, p.y))
    return sorted(points, key=lambda p: (p.y, p.x))


def _brute_force(points: Sequence[Point]) -> Pair:
    best = Pair(distance(points[0], points[-1]), points[0].id, points[-1].id)
    for i, a in enumerate(points):
        for b in points[i + 1 :]:
            d = distance(b, a)
            if d < best.distance:
                best = Pair(d, a.id, b.id)
    return best


def _strip_best(strip: list[Point], best: Pair) -> Pair:
    limit = best.distance
    ordered = sort_points(strip, Axis.Y)
    for i, a in enumerate(ordered):
        for b in ordered[i + 1 :]:
            if b.y - a.y > limit:
                break
            d = distance(b, a)
            if d <= best.distance:
                best = Pair(d, a.id, b.id)
    return best


def _closest(points: Sequence[Point]) -> Pair:
    if len(points) <= 3:
        return _brute_force(points)
    mid_index = (len(points) - 1) // 2
    mid = points[mid_index]
    left = _closest(points[: mid_index + 1])
    right = _closest(points[mid_index + 1 :])
    best = right if left.distance > right.distance else left
    strip = [p for p in points if abs(p.x - mid.x) <= best.distance]
    return _strip_best(strip, best)


def closest_pair(points: Iterable[Point]) -> Pair:
    """The pair of points nearest to each other."""
    ordered = sort_points(points, Axis.X)
    if len(ordered) < 2:
        raise ValueError("at least two points are needed")
    return _closest(ordered)


def second_closest_pair(points: Iterable[Point]) -> Pair:
    """The nearest pair other than the closest pair."""
    points = list(points)
    if len(points) < 3:
        raise ValueError("at least three points are needed")
    best = closest_pair(points)
    without_first = closest_pair(p for p in points if p.id != best.first)
    without_second = closest_pair(p for p in points if p.id != best.second)
    if without_first.distance < without_second.distance:
        return without_first
    return without_second


def random_points(
    size: int, max_limit: int, min_limit: int, rng: random.Random | None = None
) -> list[Point]:
    """``size`` points with coordinates in ``min_limit .. max_limit`` and ids from 0."""
    if min_limit > max_limit:
        raise ValueError("min_limit must not exceed max_limit")
    if size < 0:
        raise ValueError("size must not be negative")
    rng = rng or random.Random()
    return [
        Point(rng.randint(min_limit, max_limit), rng.randint(min_limit, max_limit), i)
        for i in range(size)
    ]


def _parse(text: str) -> list[Point]:
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"not an integer: {exc}") from None
    if not numbers:
        raise ValueError("expected the number of points")
    size = numbers[0]
    coords = numbers[1 : 1 + 2 * size]
    if size < 0 or len(coords) < 2 * size:
        raise ValueError(f"expected {size} points")
    return [Point(x, y, i) for i, (x, y) in enumerate(zip(coords[0::2], coords[1::2]))]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read 'size' and 'x y' lines; print the second-closest pair and its distance."
    )
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except FileNotFoundError:
            parser.error("File not found")
    else:
        text = sys.stdin.read()

    try:
        points = _parse(text)
        best = closest_pair(points)
        without_first = closest_pair(p for p in points if p.id != best.first)
        without_second = closest_pair(p for p in points if p.id != best.second)
    except ValueError as exc:
        parser.error(str(exc))

    if without_first.distance < without_second.distance:
        print(f"{without_first.first} {without_first.second}")
        print(f"{without_first.distance:g}")
    else:
        print(f"{without_second.first} {without_second.second}")
        print(f"{without_second.distance:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())