# algolab

A collection of classic data structures and algorithms. Each is usable as a
library, and most also come with a small command-line program. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module                  | Contents                                                                   |
|-------------------------|----------------------------------------------------------------------------|
| `algolab.hashfuncs`     | String hash functions (`basic_hash`, `poly_roll_hash`, `poly_sum_hash`, `djb_hash`, `sdbm_hash`) and `random_words` |
| `algolab.hashtables`    | `ChainHash`, `DoubleHash` and `CustomProbing` hash tables with `collisions` and `probes` counters |
| `algolab.hashbench`     | Benchmark rounds over the hash tables (`run_round`, `run_benchmark`, `RoundResult`) |
| `algolab.maxheap`       | `MaxHeap` with a fixed capacity and `heapsort` (descending order)          |
| `algolab.avl`           | Self-balancing `AVLTree`                                                    |
| `algolab.bst`           | `BinarySearchTree` with successor, predecessor, depth and traversals        |
| `algolab.binomial`      | `BinomialHeap` (a min-heap) with `decrease_key`, and `run_commands`         |
| `algolab.graph`         | Adjacency-list `Graph`: BFS, DFS, Prim, Kruskal, Bellman-Ford, Dijkstra; `DisjointSet`, `generate_random_graph`, `read_graph` |
| `algolab.shortestpath`  | `solve`: shortest path between two vertices, built on `Graph`               |
| `algolab.floyd`         | All-pairs shortest paths with Floyd-Warshall                                |
| `algolab.cityhunt`      | `CityGraph`: collecting pieces across connected cities with BFS and DFS     |
| `algolab.closest`       | Divide-and-conquer `closest_pair` and `second_closest_pair` of points       |
| `algolab.greedy`        | `min_plant_cost`: minimum total cost of buying plants with a group of friends |
| `algolab.dice`          | `count_dice_sums`: the ways a set of dice can reach a total, modulo 1000000007 |

Lookups that miss raise Python exceptions: `AVLTree.remove` raises
`KeyError`, the `BinarySearchTree` queries raise `ValueError`,
`Graph.bellman_ford` raises `NegativeCycleError` when a negative cycle is
reachable, and the heaps raise `IndexError` when empty.

## Library use

```python
from algolab.avl import AVLTree
from algolab.maxheap import MaxHeap, heapsort
from algolab.hashtables import ChainHash
from algolab.graph import Graph

tree = AVLTree()
for value in (30, 20, 10):
    tree.insert(value)
print(10 in tree, len(tree))
print(tree.format())

heap = MaxHeap(8)
heap.insert(5)
heap.insert(9)
print(heap.peek())
print(heapsort([3, 1, 2]))      # [3, 2, 1]

table = ChainHash(101)
table.insert("apple", 1)
print(table.search("apple"))

graph = Graph(3, [(0, 1, 2.0), (1, 2, 3.0), (0, 2, 10.0)])
print(graph.dijkstra(0, 2))     # ShortestPath(cost=5.0, path=[0, 1, 2])
```

## Commands

Most commands take an optional input file and read standard input when none
is given:

```
algolab-avl [FILE]            # AVL tree: I/D/F <value>, E to stop
algolab-binomial [FILE]       # max-heap commands: INS v, INC old new, FIN, EXT, PRI, BYE
algolab-shortestpath [FILE]   # shortest path between two vertices of a directed graph
algolab-floyd [FILE]          # all-pairs shortest distances (1-based edges)
algolab-closest [FILE]        # second closest pair of points
algolab-greedy [FILE]         # minimum plant cost
algolab-dice [FILE]           # number of ways to reach a dice total
```

Others work differently:

```
algolab-bst                   # interactive binary search tree menu on standard input
algolab-cityhunt [FILE] [-o OUTPUT]
                              # writes the BFS and DFS report to OUTPUT (default solution.txt)
algolab-hashbench [--method chain|double|custom] [--rounds N] [--words N]
                  [--length N] [--lookups N] [--size N] [--c1 N] [--c2 N] [--seed N]
                              # generates random words itself; prints collisions and
                              # mean probes per round, then their averages
```