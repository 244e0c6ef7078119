"""Binary min-heap, heap sort and top-k selection."""

from __future__ import annotations

import os
from itertools import islice
from typing import Any, Iterable, MutableSequence, Union


def adjust_up(data: MutableSequence[Any], child: int) -> None:
    """Sift ``data[child]`` up until its parent is not larger."""
    while child > 0:
        parent = (child - 1) // 2
        if data[child] < data[parent]:
            data[child], data[parent] = data[parent], data[child]
            child = parent
        else:
            break


def adjust_down(data: MutableSequence[Any], size: int, parent: int) -> None:
    """Sift ``data[parent]`` down within the first ``size`` items of a min-heap."""
    child = parent * 2 + 1
    while child < size:
        if child + 1 < size and data[child + 1] < data[child]:
            child += 1
        if data[child] < data[parent]:
            data[child], data[parent] = data[parent], data[child]
            parent = child
            child = parent * 2 + 1
        else:
            break


class MinHeap:
    """A growable binary min-heap."""

    def __init__(self) -> None:
        self._data: list[Any] = []

    def push(self, x: Any) -> None:
        """Add ``x`` to the heap."""
        self._data.append(x)
        adjust_up(self._data, len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("pop from empty heap")
        data = self._data
        data[0], data[-1] = data[-1], data[0]
        smallest = data.pop()
        adjust_down(data, len(data), 0)
        return smallest

    def top(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._data:
            raise IndexError("top of empty heap")
        return self._data[0]

    def empty(self) -> bool:
        """Whether the heap holds no values."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)


def heap_sort_descending(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place from largest to smallest using a min-heap."""
    size = len(data)
    for parent in range((size - 2) // 2, -1, -1):
        adjust_down(data, size, parent)
    for end in range(size - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        adjust_down(data, end, 0)


def top_k(numbers: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` largest values, arranged as a min-heap.

    Raises ValueError if ``k`` is negative or fewer than ``k`` values are given.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    it = iter(numbers)
    heap: list[Any] = []
    for value in islice(it, k):
        heap.append(value)
        adjust_up(heap, len(heap) - 1)
    if len(heap) < k:
        raise ValueError(f"need at least {k} values, got {len(heap)}")
    for x in it:
        if x > heap[0]:
            heap[0] = x
            adjust_down(heap, k, 0)
    return heap


def print_top_k(path: Union[str, os.PathLike], k: int) -> None:
    """Print the ``k`` largest integers found in the file at ``path``."""
    with open(path, encoding="utf-8") as f:
        numbers = (int(token) for line in f for token in line.split())
        heap = top_k(numbers, k)
    print("".join(f"{v} " for v in heap))