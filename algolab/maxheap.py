"""Fixed-capacity binary max-heap and a heapsort built on it."""

from __future__ import annotations

from typing import Iterable


def _parent(i: int) -> int:
    return (i + 1) // 2 - 1


def _left(i: int) -> int:
    return 2 * i + 1


def _right(i: int) -> int:
    return 2 * i + 2


class MaxHeap:
    """Binary max-heap holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._data: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def insert(self, value: int) -> None:
        if len(self._data) >= self.capacity:
            raise IndexError("Capacity full. Can not store more than capacity.")
        data = self._data
        data.append(value)
        i = len(data) - 1
        while _parent(i) != -1 and data[_parent(i)] <= data[i]:
            p = _parent(i)
            data[p], data[i] = data[i], data[p]
            i = p

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._data:
            raise IndexError("peek from an empty heap")
        return self._data[0]

    def pop(self) -> int:
        """Remove and return the largest value."""
        data = self._data
        if not data:
            raise IndexError("No more data to delete")
        top = data[0]
        last = data.pop()
        if not data:
            return top
        data[0] = last
        n = len(data)
        i = 0
        while _left(i) < n and (
            data[_left(i)] > data[i] or (_right(i) != n and data[_right(i)] > data[i])
        ):
            left, right = _left(i), _right(i)
            if right == n:
                data[left], data[i] = data[i], data[left]
                i = right
            else:
                child = left if data[left] > data[right] else right
                data[child], data[i] = data[i], data[child]
                i = child
        return top


def heapsort(values: Iterable[int]) -> list[int]:
    """Return the values in descending order."""
    items = list(values)
    heap = MaxHeap(len(items))
    for value in items:
        heap.insert(value)
    return [heap.pop() for _ in range(len(items))]