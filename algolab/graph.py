"""Weighted adjacency-list graph: traversals, spanning trees and shortest paths."""

from __future__ import annotations

import heapq
import itertools
import math
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from pathlib import Path as FilePath
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Edge:
    """A weighted edge leading from ``source`` to ``destination``."""

    source: int
    destination: int
    weight: float


class Color(Enum):
    """Visit state of a vertex after a traversal."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


@dataclass
class BFSResult:
    """Hop distances, BFS-tree parents and final colours; None marks unreached."""

    distance: list[int | None]
    parent: list[int | None]
    color: list[Color]


@dataclass
class DFSResult:
    """Discovery and finishing times, DFS-tree parents and final colours."""

    discover: list[int | None]
    finish: list[int | None]
    parent: list[int | None]
    color: list[Color]


@dataclass(frozen=True)
class ShortestPath:
    """Cost of a shortest path and its vertices from source to destination."""

    cost: float
    path: list[int]


class NegativeCycleError(ValueError):
    """The graph holds a cycle of negative total weight."""


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with path halving."""

    def __init__(self, size: int) -> None:
        self._root = list(range(size))

    def find(self, item: int) -> int:
        root = self._root
        while root[item] != item:
            root[item] = root[root[item]]
            item = root[item]
        return item

    def union(self, a: int, b: int) -> None:
        self._root[self.find(a)] = self.find(b)


class Graph:
    """Graph on vertices ``0 .. node_count - 1`` stored as adjacency lists.

    In an undirected graph every edge is stored once in each direction.
    """

    def __init__(
        self,
        node_count: int,
        edges: Iterable[tuple[float, float, float]] = (),
        directed: bool = True,
    ) -> None:
        if node_count < 0:
            raise ValueError("node count must not be negative")
        self.node_count = node_count
        self.directed = directed
        self.edge_count = 0
        self._adj: list[list[Edge]] = [[] for _ in range(node_count)]
        for u, v, weight in edges:
            self.add_edge(int(u), int(v), float(weight))

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.node_count:
            raise ValueError(f"vertex {vertex} is outside 0..{self.node_count - 1}")

    def _all_edges(self) -> Iterator[Edge]:
        for edges in self._adj:
            yield from edges

    def add_edge(self, source: int, destination: int, weight: float) -> None:
        self._check(source)
        self._check(destination)
        self._adj[source].append(Edge(source, destination, weight))
        if not self.directed:
            self._adj[destination].append(Edge(destination, source, weight))
        self.edge_count += 1

    def has_edge(self, source: int, destination: int) -> bool:
        self._check(source)
        return any(e.destination == destination for e in self._adj[source])

    def _new_bfs(self) -> BFSResult:
        n = self.node_count
        return BFSResult([None] * n, [None] * n, [Color.WHITE] * n)

    def _bfs_from(self, source: int, result: BFSResult) -> None:
        color, distance, parent = result.color, result.distance, result.parent
        color[source] = Color.GRAY
        distance[source] = 0
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for edge in self._adj[v]:
                u = edge.destination
                if color[u] is Color.WHITE:
                    color[u] = Color.GRAY
                    distance[u] = distance[v] + 1
                    parent[u] = v
                    queue.append(u)
            color[v] = Color.BLACK

    def bfs(self, source: int) -> BFSResult:
        """Breadth-first search from ``source``."""
        self._check(source)
        result = self._new_bfs()
        self._bfs_from(source, result)
        return result

    def bfs_all(self) -> BFSResult:
        """Breadth-first search restarted from every vertex still unreached, in order."""
        result = self._new_bfs()
        for vertex in range(self.node_count):
            if result.color[vertex] is Color.WHITE:
                self._bfs_from(vertex, result)
        return result

    def _new_dfs(self) -> DFSResult:
        n = self.node_count
        return DFSResult([None] * n, [None] * n, [None] * n, [Color.WHITE] * n)

    def _dfs_from(self, source: int, result: DFSResult, clock: Iterator[int]) -> None:
        color, discover, finish, parent = (
            result.color,
            result.discover,
            result.finish,
            result.parent,
        )
        expanded: set[int] = set()
        color[source] = Color.GRAY
        discover[source] = next(clock)
        stack = [source]
        while stack:
            v = stack.pop()
            if v not in expanded:
                expanded.add(v)
                stack.append(v)
                for edge in self._adj[v]:
                    u = edge.destination
                    if color[u] is Color.WHITE:
                        color[u] = Color.GRAY
                        discover[u] = next(clock)
                        parent[u] = v
                        stack.append(u)
            else:
                color[v] = Color.BLACK
                finish[v] = next(clock)

    def dfs(self, source: int) -> DFSResult:
        """Depth-first search from ``source``; times start at 1."""
        self._check(source)
        result = self._new_dfs()
        self._dfs_from(source, result, itertools.count(1))
        return result

    def dfs_all(self) -> DFSResult:
        """Depth-first search over every vertex, sharing one clock."""
        result = self._new_dfs()
        clock = itertools.count(1)
        for vertex in range(self.node_count):
            if result.color[vertex] is Color.WHITE:
                self._dfs_from(vertex, result, clock)
        return result

    def prim_mst(self, source: int) -> list[Edge]:
        """Minimum spanning tree grown from ``source``, edges in the order taken."""
        self._check(source)
        visited = [False] * self.node_count
        visited[source] = True
        best = [math.inf] * self.node_count
        heap: list[tuple[float, int, Edge]] = []
        order = itertools.count()

        def push_from(vertex: int) -> None:
            for edge in self._adj[vertex]:
                if edge.weight < best[edge.destination]:
                    best[edge.destination] = edge.weight
                    heapq.heappush(heap, (edge.weight, next(order), edge))

        push_from(source)
        tree: list[Edge] = []
        while len(tree) < self.node_count - 1:
            if not heap:
                raise ValueError("graph is not connected")
            _, _, edge = heapq.heappop(heap)
            if visited[edge.destination]:
                continue
            visited[edge.destination] = True
            tree.append(edge)
            push_from(edge.destination)
        return tree

    def kruskal_mst(self) -> list[Edge]:
        """Minimum spanning forest built from the lightest edges first."""
        edges = sorted(self._all_edges(), key=lambda e: e.weight)
        sets = DisjointSet(self.node_count)
        tree: list[Edge] = []
        for edge in edges:
            if len(tree) >= self.node_count - 1:
                break
            if sets.find(edge.source) != sets.find(edge.destination):
                sets.union(edge.source, edge.destination)
                tree.append(edge)
        return tree

    def _path(
        self,
        source: int,
        destination: int,
        distance: list[float],
        parent: list[int | None],
    ) -> ShortestPath:
        if math.isinf(distance[destination]):
            raise ValueError(f"vertex {destination} is not reachable from {source}")
        path = [destination]
        vertex = destination
        while vertex != source:
            vertex = parent[vertex]
            path.append(vertex)
        path.reverse()
        return ShortestPath(distance[destination], path)

    def bellman_ford(self, source: int, destination: int) -> ShortestPath:
        """Shortest path allowing negative weights.

        Raises NegativeCycleError if a negative cycle is reachable from ``source``.
        """
        self._check(source)
        self._check(destination)
        distance = [math.inf] * self.node_count
        parent: list[int | None] = [None] * self.node_count
        distance[source] = 0
        edges = list(self._all_edges())
        for _ in range(self.node_count - 1):
            changed = False
            for edge in edges:
                candidate = distance[edge.source] + edge.weight
                if candidate < distance[edge.destination]:
                    distance[edge.destination] = candidate
                    parent[edge.destination] = edge.source
                    changed = True
            if not changed:
                break
        if any(distance[e.source] + e.weight < distance[e.destination] for e in edges):
            raise NegativeCycleError("The graph contains a negative cycle")
        return self._path(source, destination, distance, parent)

    def dijkstra(self, source: int, destination: int) -> ShortestPath:
        """Shortest path for non-negative weights."""
        self._check(source)
        self._check(destination)
        distance = [math.inf] * self.node_count
        parent: list[int | None] = [None] * self.node_count
        visited = [False] * self.node_count
        distance[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            dist, v = heapq.heappop(heap)
            if visited[v]:
                continue
            visited[v] = True
            for edge in self._adj[v]:
                candidate = dist + edge.weight
                if candidate < distance[edge.destination]:
                    distance[edge.destination] = candidate
                    parent[edge.destination] = v
                    heapq.heappush(heap, (candidate, edge.destination))
        return self._path(source, destination, distance, parent)

    def __str__(self) -> str:
        lines = [
            "",
            "Graph Description",
            "-----------------",
            f"Node: {self.node_count} Total Edge: {self.edge_count}",
            "",
        ]
        for vertex, edges in enumerate(self._adj):
            lines.append(f"Vertex: {vertex}")
            lines.append("".join(f"{e.destination}({e.weight:g}) " for e in edges))
        lines.append("")
        return "\n".join(lines) + "\n"


def generate_random_graph(
    directed: bool,
    node_count: int,
    edge_count: int,
    path: str | FilePath,
    rng: random.Random | None = None,
) -> Graph:
    """Build a random graph without loops or repeated edges and write it to ``path``.

    The file holds ``nodes edges`` followed by one ``u v weight`` line per edge;
    weights are hundredths between 0.01 and 1.
    """
    if node_count < 0 or edge_count < 0:
        raise ValueError("counts must not be negative")
    limit = node_count * (node_count - 1)
    if not directed:
        limit //= 2
    if edge_count > limit:
        raise ValueError(f"at most {limit} edges fit on {node_count} nodes")
    rng = rng or random.Random()
    graph = Graph(node_count, directed=directed)
    lines = [f"{node_count} {edge_count}"]
    while graph.edge_count < edge_count:
        u = rng.randrange(node_count)
        v = rng.randrange(node_count)
        while u == v:
            v = rng.randrange(node_count)
        if not graph.has_edge(u, v):
            weight = (1 + rng.randrange(100)) / 100
            graph.add_edge(u, v, weight)
            lines.append(f"{u} {v} {weight:g}")
    FilePath(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return graph


def read_graph(path: str | FilePath, directed: bool = True) -> Graph:
    """Read a graph written as ``nodes edges`` and then ``u v weight`` triples."""
    tokens = FilePath(path).read_text(encoding="utf-8").split()
    if len(tokens) < 2:
        raise ValueError("expected the number of nodes and of edges")
    node_count, edge_count = int(tokens[0]), int(tokens[1])
    body = tokens[2 : 2 + 3 * edge_count]
    if len(body) < 3 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    edges = [
        (int(float(u)), int(float(v)), float(w))
        for u, v, w in zip(body[0::3], body[1::3], body[2::3])
    ]
    return Graph(node_count, edges, directed=directed)