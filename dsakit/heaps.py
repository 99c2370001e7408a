"""Binary heap structures and heap-based algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def _parent(index: int) -> int:
    return (index - 1) // 2


def is_min_heap(values: Sequence[Any]) -> bool:
    """Tell whether ``values`` laid out as an array satisfies the min-heap order."""
    return all(values[_parent(i)] <= values[i] for i in range(1, len(values)))


def max_heapify(values: MutableSequence[Any], index: int) -> None:
    """Sift ``values[index]`` down in place until its subtree is a max-heap."""
    size = len(values)
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and values[largest] < values[child]:
                largest = child
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the values rearranged into max-heap order."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        max_heapify(items, index)
    return items


class BinaryHeap:
    """A fixed-capacity array-backed min-heap."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")

    def _sift_up(self, index: int, *, to_root: bool = False) -> None:
        items = self._items
        while index != 0 and (to_root or items[_parent(index)] > items[index]):
            parent = _parent(index)
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, value: Any) -> None:
        """Add a value; raises ``IndexError`` when the heap is at capacity."""
        if len(self._items) >= self.capacity:
            raise IndexError("heap capacity is full")
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def extract_min(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        items = self._items
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def decrease_key(self, index: int, value: Any) -> None:
        """Replace the value at ``index`` with a value no larger, restoring order."""
        self._check_index(index)
        self._items[index] = value
        self._sift_up(index)

    def delete(self, index: int) -> Any:
        """Remove and return the value stored at ``index``."""
        self._check_index(index)
        self._sift_up(index, to_root=True)
        return self.extract_min()


def k_sorted_sort(values: Iterable[Any], k: int) -> list[Any]:
    """Sort values where each is at most ``k`` places from its sorted position."""
    if k < 0:
        raise ValueError("k must not be negative")
    items = list(values)
    heap = items[: k + 1]
    heapq.heapify(heap)
    result = [heapq.heapreplace(heap, value) for value in items[k + 1 :]]
    while heap:
        result.append(heapq.heappop(heap))
    return result


class KthLargest:
    """Track the k-th largest value of a growing stream."""

    def __init__(self, k: int, values: Iterable[Any]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap: list[Any] = []
        for value in values:
            self._push(value)

    def _push(self, value: Any) -> None:
        heapq.heappush(self._heap, value)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)

    def add(self, value: Any) -> Any:
        """Add a value and return the current k-th largest."""
        self._push(value)
        return self._heap[0]


def max_pair_sums(first: Iterable[int], second: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` largest sums ``a + b`` over pairs from the two inputs, descending."""
    left = sorted(first, reverse=True)
    right = sorted(second, reverse=True)
    if k <= 0 or not left or not right:
        return []
    heap = [(-(left[0] + right[0]), 0, 0)]
    visited = {(0, 0)}
    result: list[int] = []
    while heap and len(result) < k:
        negated, i, j = heapq.heappop(heap)
        result.append(-negated)
        for a, b in ((i + 1, j), (i, j + 1)):
            if a < len(left) and b < len(right) and (a, b) not in visited:
                visited.add((a, b))
                heapq.heappush(heap, (-(left[a] + right[b]), a, b))
    return result