"""Brute-force search for numbers that contain the digits 666."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count, islice

_MARK = "666"


def _doom_numbers() -> Iterator[int]:
    return (i for i in count(666) if _MARK in str(i))


def nth_doom_number(n: int) -> int:
    """Return the n-th smallest positive number whose decimal form contains 666."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return next(islice(_doom_numbers(), n - 1, None))