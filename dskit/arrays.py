"""Array exercises: missing number, rotation, merging and in-place removal."""

from __future__ import annotations

import heapq
from itertools import groupby
from typing import Any, MutableSequence, Sequence


def missing_number(nums: Sequence[int]) -> int:
    """The one value of ``0..len(nums)`` that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def rotate(nums: MutableSequence[Any], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[len(nums) - k:]) + list(nums[:len(nums) - k])


def merge(
    nums1: MutableSequence[Any], m: int, nums2: Sequence[Any], n: int
) -> None:
    """Merge the sorted ``nums2[:n]`` into the sorted ``nums1[:m]``, in ``nums1``.

    ``nums1`` must have room for ``m + n`` values.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    nums1[:m + n] = list(heapq.merge(list(nums1[:m]), list(nums2[:n])))


def remove_duplicates(nums: MutableSequence[Any]) -> int:
    """Compact runs of equal values in place; return how many remain."""
    unique = [key for key, _ in groupby(nums)]
    nums[:len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[Any], val: Any) -> int:
    """Move every value other than ``val`` to the front; return how many there are."""
    kept = [v for v in nums if v != val]
    nums[:len(kept)] = kept
    return len(kept)