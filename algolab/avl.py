"""Self-balancing AVL tree of integers with an interactive command loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

_REBALANCE_NOTICE = "Height Invariant Violated.\nAfter Balancing:"


@dataclass
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> tuple[_Node, bool]:
    """Restore the height invariant at ``node``; report whether a rotation happened."""
    _update(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node), True
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node), True
    return node, False


def _insert(node: _Node | None, value: int) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), False
    if node.key < value:
        node.right, rotated = _insert(node.right, value)
    else:
        node.left, rotated = _insert(node.left, value)
    node, here = _rebalance(node)
    return node, rotated or here


def _pop_min(node: _Node) -> tuple[_Node | None, bool, int]:
    if node.left is None:
        return node.right, False, node.key
    node.left, rotated, key = _pop_min(node.left)
    node, here = _rebalance(node)
    return node, rotated or here, key


def _remove(node: _Node | None, value: int) -> tuple[_Node | None, bool]:
    if node is None:
        raise KeyError(value)
    if node.key < value:
        node.right, rotated = _remove(node.right, value)
    elif node.key > value:
        node.left, rotated = _remove(node.left, value)
    else:
        if node.left is None:
            return node.right, False
        if node.right is None:
            return node.left, False
        node.right, rotated, successor = _pop_min(node.right)
        node.key = successor
    node, here = _rebalance(node)
    return node, rotated or here


def _format(node: _Node | None, out: list[str]) -> None:
    if node is None:
        return
    if node.left is None and node.right is None:
        out.append(str(node.key))
        return
    out.append(f"{node.key} (")
    _format(node.left, out)
    out.append(") (")
    _format(node.right, out)
    out.append(") ")


def _in_order(node: _Node | None) -> Iterator[int]:
    if node is None:
        return
    yield from _in_order(node.left)
    yield node.key
    yield from _in_order(node.right)


class AVLTree:
    """AVL tree; equal keys go to the left subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: int) -> bool:
        """Insert ``value``; return whether the tree had to be rebalanced."""
        self._root, rotated = _insert(self._root, value)
        self._size += 1
        return rotated

    def remove(self, value: int) -> bool:
        """Remove one ``value``; return whether the tree had to be rebalanced.

        Raises KeyError if the value is not in the tree.
        """
        self._root, rotated = _remove(self._root, value)
        self._size -= 1
        return rotated

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.key == value:
                return True
            node = node.right if node.key < value else node.left
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return _in_order(self._root)

    def format(self) -> str:
        """Parenthesised layout: ``key (left) (right) ``, leaves as bare keys."""
        out: list[str] = []
        _format(self._root, out)
        return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run AVL commands: I/D/F <value> to insert, delete, find; E to stop."
    )
    parser.add_argument("input", nargs="?", help="command file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            tokens = handle.read().split()
    else:
        tokens = sys.stdin.read().split()

    tree = AVLTree()
    stream = iter(tokens)
    for op, raw in zip(stream, stream):
        try:
            value = int(raw)
        except ValueError:
            parser.error(f"not an integer: {raw!r}")
        command = op.lower()
        if command == "i":
            if tree.insert(value):
                print(_REBALANCE_NOTICE)
            print(tree.format())
        elif command == "e":
            break
        elif command == "d":
            try:
                if tree.remove(value):
                    print(_REBALANCE_NOTICE)
            except KeyError:
                print("Can't find node", end="")
            print(tree.format())
        elif command == "f":
            print("True" if value in tree else "False")
    return 0


if __name__ == "__main__":
    sys.exit(main())