"""Friends collecting pieces scattered over connected cities, by BFS and by DFS."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence


@dataclass
class _City:
    pieces: int = 0
    visited: bool = False
    neighbours: list[int] = field(default_factory=list)


class CityGraph:
    """Undirected graph of cities; a visited city yields its pieces only once."""

    def __init__(self, city_count: int) -> None:
        if city_count < 0:
            raise ValueError("city count must not be negative")
        self._cities = [_City() for _ in range(city_count)]

    def _city(self, index: int) -> _City:
        if not 0 <= index < len(self._cities):
            raise ValueError(f"city {index} is outside 0..{len(self._cities) - 1}")
        return self._cities[index]

    def add_road(self, city1: int, city2: int) -> None:
        self._city(city1).neighbours.append(city2)
        self._city(city2).neighbours.append(city1)

    def add_pieces(self, city: int, pieces: int) -> None:
        self._city(city).pieces += pieces

    def reset_visits(self) -> None:
        for city in self._cities:
            city.visited = False

    def _collect(self, start: int, take: Callable[[deque[int]], int]) -> int:
        city = self._city(start)
        if city.visited:
            return 0
        city.visited = True
        total = city.pieces
        pending = deque([start])
        while pending:
            for index in self._cities[take(pending)].neighbours:
                neighbour = self._cities[index]
                if neighbour.visited:
                    continue
                neighbour.visited = True
                total += neighbour.pieces
                pending.append(index)
        return total

    def collect_bfs(self, city: int) -> int:
        """Pieces in unvisited cities reachable from ``city``, searched breadth-first."""
        return self._collect(city, deque.popleft)

    def collect_dfs(self, city: int) -> int:
        """Pieces in unvisited cities reachable from ``city``, searched depth-first."""
        return self._collect(city, deque.pop)


def _groups(tokens: list[int], start: int, count: int, width: int, what: str):
    end = start + count * width
    if count < 0 or len(tokens) < end:
        raise ValueError(f"expected {count} {what}")
    chunk = tokens[start:end]
    return list(zip(*(chunk[k::width] for k in range(width)))), end


def solve(text: str) -> str:
    """Report for input ``cities roads pieces friends``, then roads, pieces and friends."""
    try:
        tokens = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"not an integer: {exc}") from None
    if len(tokens) < 4:
        raise ValueError("expected the counts of cities, roads, pieces and friends")
    city_count, road_count, piece_count, friend_count = tokens[:4]

    roads, pos = _groups(tokens, 4, road_count, 2, "roads")
    pieces, pos = _groups(tokens, pos, piece_count, 2, "piece records")
    friends, _ = _groups(tokens, pos, friend_count, 2, "friends")

    graph = CityGraph(city_count)
    for city1, city2 in roads:
        graph.add_road(city1, city2)
    for city, amount in pieces:
        graph.add_pieces(city, amount)
    total = sum(amount for _, amount in pieces)

    starts: list[int | None] = [None] * friend_count
    for start, friend in friends:
        if not 0 <= friend < friend_count:
            raise ValueError(f"friend {friend} is outside 0..{friend_count - 1}")
        starts[friend] = start
    if None in starts:
        raise ValueError(f"no starting city for friend {starts.index(None)}")

    lines: list[str] = []
    for name, collect in (("BFS", graph.collect_bfs), ("DFS", graph.collect_dfs)):
        graph.reset_visits()
        collected = [collect(start) for start in starts]
        found = sum(collected)
        lines += ["", f"Solving using {name}", ""]
        lines.append("Mission Accomplished" if found == total else "Mission Impossible")
        lines.append(f"{found} out of {total} pieces are collected")
        lines += [f"{i} collected {amount} pieces" for i, amount in enumerate(collected)]
    return "".join(line + "\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    parser.add_argument("-o", "--output", default="solution.txt", help="report file")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        report = solve(text)
    except ValueError as exc:
        parser.error(str(exc))
    Path(args.output).write_text(report, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())