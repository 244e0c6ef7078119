"""Classic in-place comparison and counting sorts."""

from __future__ import annotations

from typing import Any, Iterator, MutableSequence, Optional

from dskit.stack import Stack


def bubble_sort(data: MutableSequence[Any]) -> None:
    """Bubble sort with early exit when a pass makes no swap."""
    size = len(data)
    for j in range(size - 1):
        exchanged = False
        for i in range(1, size - j):
            if data[i - 1] > data[i]:
                data[i - 1], data[i] = data[i], data[i - 1]
                exchanged = True
        if not exchanged:
            break


def count_sort(data: MutableSequence[int]) -> None:
    """Counting sort over the range between the minimum and maximum integer."""
    if not data:
        return
    lo, hi = min(data), max(data)
    counts = [0] * (hi - lo + 1)
    for v in data:
        counts[v - lo] += 1
    data[:] = [lo + offset for offset, c in enumerate(counts) for _ in range(c)]


def _sift_down_max(data: MutableSequence[Any], size: int, parent: int) -> None:
    child = parent * 2 + 1
    while child < size:
        if child + 1 < size and data[child + 1] > data[child]:
            child += 1
        if data[child] > data[parent]:
            data[child], data[parent] = data[parent], data[child]
            parent = child
            child = parent * 2 + 1
        else:
            break


def heap_sort(data: MutableSequence[Any]) -> None:
    """Ascending heap sort using a max-heap."""
    size = len(data)
    for parent in range((size - 2) // 2, -1, -1):
        _sift_down_max(data, size, parent)
    for end in range(size - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down_max(data, end, 0)


def insert_sort(data: MutableSequence[Any]) -> None:
    """Straight insertion sort."""
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and key < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key


def _merge_runs(left: list[Any], right: list[Any]) -> Iterator[Any]:
    """Merge two sorted runs, taking from ``left`` on ties."""
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1
    yield from left[i:]
    yield from right[j:]


def _merge_sort(data: MutableSequence[Any], begin: int, end: int) -> None:
    if begin >= end:
        return
    mid = (begin + end) // 2
    _merge_sort(data, begin, mid)
    _merge_sort(data, mid + 1, end)
    data[begin:end + 1] = list(
        _merge_runs(list(data[begin:mid + 1]), list(data[mid + 1:end + 1]))
    )


def merge_sort(data: MutableSequence[Any]) -> None:
    """Top-down recursive merge sort."""
    _merge_sort(data, 0, len(data) - 1)


def merge_sort_iterative(data: MutableSequence[Any]) -> None:
    """Bottom-up merge sort with doubling run width."""
    size = len(data)
    gap = 1
    while gap < size:
        for begin in range(0, size, 2 * gap):
            mid = begin + gap
            if mid >= size:
                break
            end = min(begin + 2 * gap, size)
            data[begin:end] = list(
                _merge_runs(list(data[begin:mid]), list(data[mid:end]))
            )
        gap *= 2


def _last_index(data: MutableSequence[Any], end: Optional[int]) -> int:
    return len(data) - 1 if end is None else end


def median_of_three(data: MutableSequence[Any], begin: int, end: int) -> int:
    """Index of the median among ``data[begin]``, the middle item and ``data[end]``."""
    midi = (begin + end) // 2
    if data[begin] < data[midi]:
        if data[midi] < data[end]:
            return midi
        if data[begin] > data[end]:
            return begin
        return end
    if data[midi] > data[end]:
        return midi
    if data[begin] < data[end]:
        return begin
    return end


def quick_sort_hoare(
    data: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Quick sort of ``data[begin:end + 1]`` with Hoare partitioning."""
    end = _last_index(data, end)
    if begin >= end:
        return
    left, right = begin, end
    key = begin
    while left < right:
        while left < right and data[right] >= data[key]:
            right -= 1
        while left < right and data[left] <= data[key]:
            left += 1
        data[left], data[right] = data[right], data[left]
    data[left], data[key] = data[key], data[left]
    quick_sort_hoare(data, begin, left - 1)
    quick_sort_hoare(data, left + 1, end)


def quick_sort_hole(
    data: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Quick sort of ``data[begin:end + 1]`` using the hole-filling scheme."""
    end = _last_index(data, end)
    if begin >= end:
        return
    left, right = begin, end
    key = data[begin]
    hole = begin
    while left < right:
        while left < right and data[right] >= key:
            right -= 1
        data[hole] = data[right]
        hole = right
        while left < right and data[left] <= key:
            left += 1
        data[hole] = data[left]
        hole = left
    data[hole] = key
    quick_sort_hole(data, begin, hole - 1)
    quick_sort_hole(data, hole + 1, end)


def partition(data: MutableSequence[Any], begin: int, end: int) -> int:
    """Partition around ``data[begin]`` with two forward pointers; return its final index."""
    prev = begin
    for cur in range(begin + 1, end + 1):
        if data[cur] < data[begin]:
            prev += 1
            if prev != cur:
                data[prev], data[cur] = data[cur], data[prev]
    data[prev], data[begin] = data[begin], data[prev]
    return prev


def quick_sort_lomuto(
    data: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Quick sort of ``data[begin:end + 1]`` with the two-pointer partition."""
    end = _last_index(data, end)
    if begin >= end:
        return
    key = partition(data, begin, end)
    quick_sort_lomuto(data, begin, key - 1)
    quick_sort_lomuto(data, key + 1, end)


def quick_sort(
    data: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Recursive quick sort of ``data[begin:end + 1]`` built on :func:`partition`."""
    end = _last_index(data, end)
    if begin >= end:
        return
    key = partition(data, begin, end)
    quick_sort(data, begin, key - 1)
    quick_sort(data, key + 1, end)


def quick_sort_iterative(
    data: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Quick sort of ``data[begin:end + 1]`` driven by an explicit stack of ranges."""
    end = _last_index(data, end)
    if begin >= end:
        return
    ranges = Stack()
    ranges.push((begin, end))
    while not ranges.empty():
        left, right = ranges.pop()
        key = partition(data, left, right)
        if left < key - 1:
            ranges.push((left, key - 1))
        if key + 1 < right:
            ranges.push((key + 1, right))


def select_sort(data: MutableSequence[Any]) -> None:
    """Selection sort placing both the minimum and maximum on each pass."""
    begin, end = 0, len(data) - 1
    while begin < end:
        mini = maxi = begin
        for i in range(begin + 1, end + 1):
            if data[i] < data[mini]:
                mini = i
            if data[i] > data[maxi]:
                maxi = i
        data[begin], data[mini] = data[mini], data[begin]
        if maxi == begin:
            maxi = mini
        data[end], data[maxi] = data[maxi], data[end]
        begin += 1
        end -= 1


def shell_sort(data: MutableSequence[Any]) -> None:
    """Shell sort with gap sequence ``gap // 3 + 1``, all groups interleaved."""
    size = len(data)
    gap = size
    while gap > 1:
        gap = gap // 3 + 1
        for i in range(size - gap):
            key = data[i + gap]
            j = i
            while j >= 0 and key < data[j]:
                data[j + gap] = data[j]
                j -= gap
            data[j + gap] = key