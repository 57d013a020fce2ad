"""Classic array and sequence exercises."""

from __future__ import annotations

from itertools import accumulate
from operator import mul

_PAIRS = {")": "(", "]": "[", "}": "{"}


def three_sum(nums: list[int]) -> list[list[int]]:
    """Return triples ``[a, b, c]`` from ``nums`` that sum to zero.

    Every pair ``(i, j)`` with ``j`` short of the last index is tried, and the
    third number is looked up by the last position it occupies; duplicate
    triples are not removed.
    """
    if len(nums) < 3:
        return []
    last_index = {value: index for index, value in enumerate(nums)}
    result = []
    for i, first in enumerate(nums[:-2]):
        for j in range(i + 1, len(nums) - 1):
            second = nums[j]
            third = -(first + second)
            position = last_index.get(third)
            if position is not None and position not in (i, j):
                result.append([first, second, third])
    return result


def merge_intervals(intervals: list[list[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into a sorted list."""
    ordered = sorted(list(pair) for pair in intervals)
    if not ordered:
        return []
    merged = [ordered[0]]
    for start, end in ordered[1:]:
        current = merged[-1]
        if start <= current[1]:
            current[1] = max(current[1], end)
        else:
            merged.append([start, end])
    return merged


def move_zeroes(nums: list[int]) -> list[int]:
    """Move zeros to the end of ``nums`` in place, keeping the order of the rest.

    Returns ``nums`` itself.
    """
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))
    return nums


def product_except_self(nums: list[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    left = accumulate(nums[:-1], mul, initial=1)
    right = list(accumulate(reversed(nums[1:]), mul, initial=1))
    right.reverse()
    return [lhs * rhs for lhs, rhs in zip(left, right)]


def remove_duplicates(nums: list[int]) -> int:
    """Drop repeated values from sorted ``nums`` in place; return the new length."""
    kept: list[int] = []
    for value in nums:
        if not kept or value != kept[-1]:
            kept.append(value)
    nums[:] = kept
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def sorted_squares(nums: list[int]) -> list[int]:
    """Squares of sorted ``nums`` in ascending order, using two pointers."""
    result = [0] * len(nums)
    left, right = 0, len(nums) - 1
    for position in range(len(nums) - 1, -1, -1):
        if abs(nums[left]) > abs(nums[right]):
            chosen = nums[left]
            left += 1
        else:
            chosen = nums[right]
            right -= 1
        result[position] = chosen * chosen
    return result


def sorted_squares_by_sorting(nums: list[int]) -> list[int]:
    """Squares of ``nums`` in ascending order, by squaring then sorting."""
    return sorted(value * value for value in nums)


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer, so
    other characters make the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in "({[":
            stack.append(char)
        elif stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack