"""Binomial min-heap, and a command loop that drives it as a max-heap."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


@dataclass(eq=False)
class _Node:
    value: int
    parent: _Node | None = None
    # Highest-degree child first, as each link puts the new child at the front.
    children: list[_Node] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.children)


def _merge(first: list[_Node], second: list[_Node]) -> list[_Node]:
    """Merge two root lists by degree; on equal degree the tree from ``second`` comes first."""
    merged: list[_Node] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i].degree < second[j].degree:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def _link(a: _Node, b: _Node) -> _Node:
    """Make the root with the larger value a child of the other; ties favour ``b``."""
    winner, loser = (a, b) if a.value < b.value else (b, a)
    loser.parent = winner
    winner.children.insert(0, loser)
    return winner


def _consolidate(roots: list[_Node]) -> list[_Node]:
    i = 0
    while i + 1 < len(roots):
        if roots[i].degree != roots[i + 1].degree:
            i += 1
        else:
            roots[i : i + 2] = [_link(roots[i], roots[i + 1])]
        if i + 1 < len(roots) and roots[i].degree > roots[i + 1].degree:
            roots[i], roots[i + 1] = roots[i + 1], roots[i]
    return roots


class BinomialHeap:
    """Min-heap made of binomial trees kept in order of increasing degree."""

    def __init__(self) -> None:
        self._roots: list[_Node] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _union(self, other: list[_Node]) -> None:
        self._roots = _consolidate(_merge(self._roots, other))

    def insert(self, value: int) -> None:
        self._union([_Node(value)])
        self._size += 1

    def find_min(self) -> int:
        """Return the smallest value without removing it."""
        if not self._roots:
            raise IndexError("find_min on an empty heap")
        return min(root.value for root in self._roots)

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._roots:
            raise IndexError("extract_min on an empty heap")
        index, node = min(enumerate(self._roots), key=lambda pair: pair[1].value)
        del self._roots[index]
        children = list(reversed(node.children))
        for child in children:
            child.parent = None
        self._union(children)
        self._size -= 1
        return node.value

    def _nodes(self) -> Iterator[_Node]:
        pending = deque(self._roots)
        while pending:
            node = pending.popleft()
            yield node
            pending.extend(node.children)

    def decrease_key(self, old: int, new: int) -> None:
        """Lower the first value equal to ``old`` (breadth-first) to ``new``.

        Raises KeyError if ``old`` is absent and ValueError if ``new`` is larger.
        """
        if new > old:
            raise ValueError(f"new key {new} is larger than {old}")
        target = next((node for node in self._nodes() if node.value == old), None)
        if target is None:
            raise KeyError(old)
        target.value = new
        while target.parent is not None and target.value < target.parent.value:
            parent = target.parent
            target.value, parent.value = parent.value, target.value
            target = parent

    def format(self, negate: bool = False) -> str:
        """Each tree level by level; ``negate`` prints every value with its sign flipped."""
        lines: list[str] = []
        for tree in self._roots:
            lines.append(f"Binomial Tree, B{tree.degree}")
            level = [tree]
            for depth in range(tree.degree + 1):
                values = "".join(f"{-n.value if negate else n.value} " for n in level)
                lines.append(f"Level {depth} : {values}")
                level = [child for node in level for child in node.children]
        return "".join(line + "\n" for line in lines)


_RULE = "--------------------------"


def run_commands(lines: Iterable[str]) -> list[str]:
    """Run INS, PRI, INC, FIN, EXT commands on a max-heap until BYE; return the output lines."""
    tokens = (token for line in lines for token in line.split())
    heap = BinomialHeap()
    out: list[str] = []

    def read_int() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("input ended in the middle of a command") from None

    for command in tokens:
        if command == "BYE":
            break
        if command == "INS":
            value = read_int()
            out.append(f"Inserted {value}")
            heap.insert(-value)
        elif command == "PRI":
            out.append("Printing Binomial Heap...")
            out.append(_RULE)
            out.extend(heap.format(negate=True).splitlines())
            out.append(_RULE)
        elif command == "INC":
            old, new = read_int(), read_int()
            out.append(f"Increased {old}. The updated value is {new}.")
            try:
                heap.decrease_key(-old, -new)
            except (KeyError, ValueError):
                pass
        elif command == "FIN":
            result = -heap.find_min() if len(heap) else 0
            out.append(f"FindMax returned {result}")
        elif command == "EXT":
            result = -heap.extract_min() if len(heap) else 0
            out.append(f"ExtractMax returned {result}")
    return out


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run max-heap commands: INS v, INC old new, FIN, EXT, PRI, BYE."
    )
    parser.add_argument("input", nargs="?", help="command file (default: standard input)")
    args = parser.parse_args(argv)

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                output = run_commands(handle)
        else:
            output = run_commands(sys.stdin)
    except ValueError as exc:
        parser.error(str(exc))
    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())