"""Unbalanced binary search tree of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence, TextIO


@dataclass(eq=False)
class _Node:
    value: int
    parent: _Node | None = None
    left: _Node | None = None
    right: _Node | None = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """Binary search tree; equal values go to the left subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def _find(self, value: int) -> _Node | None:
        node = self._root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def _require(self, value: int) -> _Node:
        node = self._find(value)
        if node is None:
            raise ValueError("The element is not in the tree")
        return node

    def insert(self, value: int) -> None:
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
        new.parent = node

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._find(value) is not None

    def successor(self, value: int) -> int:
        """Next value in in-order sequence after ``value``."""
        node = self._require(value)
        if node.right is not None:
            return _leftmost(node.right).value
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        if parent is None:
            raise ValueError("No successor available")
        return parent.value

    def predecessor(self, value: int) -> int:
        """Previous value in in-order sequence before ``value``."""
        node = self._require(value)
        if node.left is not None:
            return _rightmost(node.left).value
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        if parent is None:
            raise ValueError("No predecessor available")
        return parent.value

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; a node with two children takes its successor."""
        node = self._require(value)
        if node.left is not None and node.right is not None:
            successor = _leftmost(node.right)
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def depth(self, value: int) -> int:
        """Depth of ``value``, the root being at depth 0."""
        depth = 0
        node = self._root
        while node is not None:
            if value == node.value:
                return depth
            node = node.left if value < node.value else node.right
            depth += 1
        raise ValueError("Item not in tree")

    def maximum(self) -> int:
        if self._root is None:
            raise ValueError("No Item in tree")
        return _rightmost(self._root).value

    def minimum(self) -> int:
        if self._root is None:
            raise ValueError("No Item in tree")
        return _leftmost(self._root).value

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def in_order(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[int]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[int]:
        out: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            out.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(out)

    def __iter__(self) -> Iterator[int]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size


_MENU = (
    "1. Insert Item",
    "2. Search Item",
    "3. Get In Order Successor",
    "4. Get In Order Predecessor",
    "5. Delete Item",
    "6. Get Item Depth",
    "7. Get Max Item",
    "8. Get Min Item",
    "9. Get Height",
    "10. Print In Order",
    "11. Print Pre Order",
    "12. Print Post Order",
    "13. Get Size",
    "14. Exit",
)
_RULE = "_________________________"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _data(values: Iterator[int]) -> str:
    return "Data: " + "".join(f"{v} " for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive binary search tree menu.")
    parser.parse_args(argv)

    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)

    def read_int() -> int | None:
        try:
            return int(next(tokens))
        except (StopIteration, ValueError):
            return None

    prompts = {
        1: "Type Integer to Insert: ",
        2: "Type Integer to Search: ",
        3: "Type Integer to get Successor: ",
        4: "Type Integer to get Predecessor: ",
        5: "Type Integer to Delete: ",
        6: "Type Integer to get Depth: ",
    }

    while True:
        print("\n".join(_MENU))
        print(">>>", end="")
        option = read_int()
        if option is None or option == 14:
            break
        if option in prompts:
            print(prompts[option])
            value = read_int()
            if value is None:
                break
        try:
            if option == 1:
                tree.insert(value)
                print(f"{value} inserted in tree.")
            elif option == 2:
                verdict = "is in the tree." if value in tree else "is not in the tree."
                print(f"{value} {verdict}")
            elif option == 3:
                print(f"Successor of {value}: {tree.successor(value)}")
            elif option == 4:
                print(f"Predecessor of {value}: {tree.predecessor(value)}")
            elif option == 5:
                tree.delete(value)
                print(f"{value} Deleted from tree")
            elif option == 6:
                print(f"Depth of {value}: {tree.depth(value)}")
            elif option == 7:
                print(f"Max Item: {tree.maximum()}")
            elif option == 8:
                print(f"Min Item: {tree.minimum()}")
            elif option == 9:
                print(f"Height of the tree: {tree.height()}")
            elif option == 10:
                print(_data(tree.in_order()))
            elif option == 11:
                print(_data(tree.pre_order()))
            elif option == 12:
                print(_data(tree.post_order()))
            elif option == 13:
                print(f"Size of the tree: {len(tree)}")
            else:
                continue
        except ValueError as exc:
            print(exc)
        print(_RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())