"""Bit-level exercises: binary string addition and the missing number."""

from __future__ import annotations

from functools import reduce
from itertools import zip_longest
from operator import xor

_BINARY_DIGITS = frozenset("01")


def add_binary(a: str, b: str) -> str:
    """Add two binary strings and return the binary string of their sum.

    The result is as long as the longer operand, plus one leading ``1``
    when the final addition carries. Leading zeros of the operands are kept.
    """
    for operand in (a, b):
        if not set(operand) <= _BINARY_DIGITS:
            raise ValueError(f"not a binary string: {operand!r}")
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = int(x) + int(y) + carry
        digits.append(str(total & 1))
        carry = total >> 1
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def missing_number(nums: list[int]) -> int:
    """Return the one number of ``0..len(nums)`` that ``nums`` does not hold."""
    return reduce(xor, (value ^ index for index, value in enumerate(nums)), len(nums))