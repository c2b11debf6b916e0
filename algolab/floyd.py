"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

INF = 100001


def build_matrix(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """Weight matrix for 0-based directed edges ``(u, v, w)``; missing edges are INF.

    A later edge between the same pair replaces an earlier one.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[INF] * vertex_count for _ in range(vertex_count)]
    for i, row in enumerate(matrix):
        row[i] = 0
    for u, v, weight in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) is outside 0..{vertex_count - 1}")
        matrix[u][v] = weight
    return matrix


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a new matrix of shortest distances; the input is left unchanged."""
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    for k in range(n):
        via = dist[k]
        for row in dist:
            through = row[k]
            for j, cost in enumerate(via):
                if through + cost < row[j]:
                    row[j] = through + cost
    return dist


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Tab-separated rows, each value followed by a tab, INF written as ``INF``."""
    return "".join(
        "".join(("INF" if value == INF else str(value)) + "\t" for value in row) + "\n"
        for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read 'vertices edges' and 1-based 'u v w' edges; print all shortest distances."
    )
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        parser.error(str(exc))
    if len(numbers) < 2:
        parser.error("expected the number of vertices and of edges")
    vertex_count, edge_count = numbers[0], numbers[1]
    flat = numbers[2 : 2 + 3 * edge_count]
    if len(flat) < 3 * edge_count:
        parser.error(f"expected {edge_count} edges")
    edges = [(u - 1, v - 1, w) for u, v, w in zip(flat[0::3], flat[1::3], flat[2::3])]
    try:
        matrix = build_matrix(vertex_count, edges)
    except ValueError as exc:
        parser.error(str(exc))
    print(format_matrix(floyd_warshall(matrix)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())