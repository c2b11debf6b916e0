"""Read a directed weighted graph and report a shortest path between two vertices."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from algolab.graph import Graph, NegativeCycleError


def solve(text: str) -> str:
    """Answer for input ``nodes edges``, ``u v w`` triples, then ``source destination``."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected the number of nodes and of edges")
    node_count, edge_count = int(tokens[0]), int(tokens[1])
    end = 2 + 3 * edge_count
    if len(tokens) < end + 2:
        raise ValueError("input ended before the source and destination")
    body = tokens[2:end]
    edges = [
        (int(float(u)), int(float(v)), float(w))
        for u, v, w in zip(body[0::3], body[1::3], body[2::3])
    ]
    source, destination = int(tokens[end]), int(tokens[end + 1])
    graph = Graph(node_count, edges, directed=True)

    lines = []
    if any(weight < 0 for _, _, weight in edges):
        try:
            result = graph.bellman_ford(source, destination)
        except NegativeCycleError:
            return "The graph contains a negative cycle\n"
        lines.append("The graph does not contain a negative cycle")
    else:
        result = graph.bellman_ford(source, destination)
    lines.append(f"Shortest path cost: {int(result.cost)}")
    lines.append(" -> ".join(str(vertex) for vertex in result.path))
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        print(solve(text), end="")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())