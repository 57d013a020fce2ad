"""String exercises: unique characters, hex parsing, substrings, numerals, atoi."""

from __future__ import annotations

import re
from collections import Counter
from itertools import takewhile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
NOT_FOUND = -1

_DIGITS = frozenset("0123456789")
_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}
_HEX_BYTE = re.compile(r"x([0-9a-fA-F]?)([0-9a-fA-F]?)")


class InvalidHexStringError(ValueError):
    """Raised when an ``x`` in a hex string is not followed by a hex digit."""


def first_unique_char(s: str) -> int:
    """Index of the first character that occurs only once in ``s``, or -1."""
    counts = Counter(s)
    return next(
        (index for index, char in enumerate(s) if counts[char] == 1), NOT_FOUND
    )


def hex_to_bytes(text: str) -> bytes:
    """Collect the bytes written as ``x`` plus one or two hex digits in ``text``.

    Everything outside such markers is skipped, so ``"0xf1, 0xC"`` gives
    ``b"\\xf1\\x0c"``. An ``x`` not followed by a hex digit makes the whole
    string invalid.
    """
    result = bytearray()
    for match in _HEX_BYTE.finditer(text):
        high, low = match.groups()
        if not high:
            raise InvalidHexStringError(
                f"invalid hex string at position {match.start()}: {text!r}"
            )
        result.append(int(high + low, 16))
    return bytes(result)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of ``s`` without a repeated character.

    Uses a sliding window in linear time.
    """
    window: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in window:
            window.remove(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring_brute(s: str) -> int:
    """Same as :func:`length_of_longest_substring`, by trying every start."""
    if len(s) <= 1:
        return len(s)
    best = 0
    for start in range(len(s) - 1):
        seen: set[str] = set()
        for char in s[start:]:
            if char in seen:
                break
            seen.add(char)
        best = max(best, len(seen))
    return best


def roman_to_int(s: str) -> int:
    """Value of the Roman numeral ``s``.

    A symbol smaller than the one after it is subtracted from the total.
    """
    total = 0
    previous = 0
    for char in s:
        try:
            current = _ROMAN_VALUES[char]
        except KeyError:
            raise ValueError(f"not a Roman numeral symbol: {char!r}") from None
        if previous < current:
            current -= 2 * previous
        total += current
        previous = current
    return total


def _digits_to_int(digits: str, negative: bool) -> int:
    """Fold decimal digits into a 32-bit signed value, clamping on overflow."""
    result = 0
    limit, last_digit = divmod(INT_MAX, 10)
    for char in digits:
        digit = int(char)
        if result > limit or (result == limit and digit > last_digit):
            return INT_MIN if negative else INT_MAX
        result = 10 * result + digit
    return -result if negative else result


def my_atoi(s: str) -> int:
    """Parse a leading integer from ``s`` the way C ``atoi`` does, clamped to 32 bits.

    Leading spaces are skipped, one optional sign is read, then digits up to
    the first non-digit. Anything else before the number gives 0.
    """
    negative = False
    started = False
    digits: list[str] = []
    for char in s:
        if not started:
            if char == " ":
                continue
            if char in "+-":
                negative = char == "-"
                started = True
            elif char in _DIGITS:
                digits.append(char)
                started = True
            else:
                return 0
        elif char in _DIGITS:
            digits.append(char)
        else:
            break
    return _digits_to_int("".join(digits), negative)


def my_atoi_scanning(s: str) -> int:
    """Same result as :func:`my_atoi`, by scanning spaces, sign and digits in turn."""
    rest = s.lstrip(" ")
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, rest))
    return _digits_to_int(digits, negative)