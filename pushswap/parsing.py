"""Reading the command-line numbers and preparing them for sorting."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the input numbers are malformed, out of range or repeated."""


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer with no surrounding characters."""
    if not text:
        raise InputError("empty number")
    sign = 1
    digits = text
    if digits[0] in "+-":
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
        if not digits:
            raise InputError(f"sign without digits: {text!r}")
    limit = INT_MAX if sign > 0 else -INT_MIN
    result = 0
    for char in digits:
        if char not in _DIGITS:
            raise InputError(f"not a number: {text!r}")
        result = result * 10 + _DIGITS.index(char)
        if result > limit:
            raise InputError(f"out of range: {text!r}")
    return sign * result


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument as a number, rejecting duplicates."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values


def is_sorted(values: Iterable[int]) -> bool:
    """Return whether ``values`` never decrease."""
    return all(left <= right for left, right in pairwise(values))


def normalize(values: Sequence[int]) -> list[int]:
    """Replace each value with its rank, counted from one, in sorted order.

    A sequence of fewer than two values is returned unchanged.
    """
    if len(values) <= 1:
        return list(values)
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(values), start=1):
        ranks.setdefault(value, rank)
    return [ranks[value] for value in values]