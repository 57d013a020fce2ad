"""Searching sorted and unsorted integer sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

NOT_FOUND = -1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or -1 when it is absent."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return NOT_FOUND


def check_if_double_exists_sorted(arr: Sequence[int]) -> bool:
    """Whether some element's double sits at another position, via sorting.

    The values are sorted and each double looked up by binary search. As in
    the original approach, the largest element is not tried as the halved
    member of a pair. ``arr`` itself is left unchanged.
    """
    ordered = sorted(arr)
    for value in ordered[:-1]:
        double = value * 2
        matches = bisect_right(ordered, double) - bisect_left(ordered, double)
        # A zero matches itself, so it needs a second zero.
        if matches > (1 if double == value else 0):
            return True
    return False


def check_if_double_exists(arr: Sequence[int]) -> bool:
    """Whether some element's double sits at another position, via a hash map."""
    last_index = {value: index for index, value in enumerate(arr)}
    return any(
        last_index.get(value * 2, index) != index for index, value in enumerate(arr)
    )