import random

import pytest

from algolab.maxheap import MaxHeap, heapsort


@pytest.mark.parametrize("seed", range(5))
def test_heapsort_descending(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(60)]
    assert heapsort(values) == sorted(values, reverse=True)


def test_heapsort_empty_and_duplicates():
    assert heapsort([]) == []
    assert heapsort([3, 3, 3, 1]) == [3, 3, 3, 1]


def test_peek_tracks_maximum():
    heap = MaxHeap(10)
    inserted = []
    for value in [4, 9, 2, 9, 7]:
        heap.insert(value)
        inserted.append(value)
        assert heap.peek() == max(inserted)
    assert len(heap) == len(inserted)


def test_pop_returns_values_in_order():
    values = [5, 1, 8, 3, 8, 0]
    heap = MaxHeap(len(values))
    for value in values:
        heap.insert(value)
    popped = [heap.pop() for _ in values]
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


def test_capacity_enforced():
    heap = MaxHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(IndexError):
        heap.insert(3)


def test_empty_heap_errors():
    heap = MaxHeap(3)
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()