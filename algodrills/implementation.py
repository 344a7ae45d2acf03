"""Implementation drills: digit sets for room numbers and basic statistics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = "0123456789"


def sets_needed(room_number: str | int) -> int:
    """Return how many 0-9 digit sets are needed to spell a room number.

    A 6 may be turned upside down to serve as a 9 and the other way round.
    """
    text = str(room_number)
    if not text or any(ch not in _DIGITS for ch in text):
        raise ValueError(f"room number must be made of digits, got {room_number!r}")
    counts = Counter(text)
    flippable = (counts.pop("6", 0) + counts.pop("9", 0) + 1) // 2
    return max([flippable, *counts.values()])


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("at least one value is needed")


def rounded_mean(values: Sequence[int]) -> int:
    """Return the arithmetic mean rounded to the nearest integer, halves away from zero."""
    _require_values(values)
    total = sum(values)
    n = len(values)
    rounded = (2 * abs(total) + n) // (2 * n)
    return rounded if total >= 0 else -rounded


def median(values: Sequence[int]) -> int:
    """Return the middle value; for an even count, the upper of the two middle values."""
    _require_values(values)
    return sorted(values)[len(values) // 2]


def mode(values: Sequence[int]) -> int:
    """Return the most frequent value; on a tie, the second smallest of the tied values."""
    _require_values(values)
    counts = Counter(values)
    highest = max(counts.values())
    tied = sorted(value for value, count in counts.items() if count == highest)
    return tied[1] if len(tied) >= 2 else tied[0]


def value_range(values: Sequence[int]) -> int:
    """Return the difference between the largest and smallest value."""
    _require_values(values)
    return max(values) - min(values)


@dataclass(frozen=True)
class Summary:
    """The four statistics of a list of integers."""

    mean: int
    median: int
    mode: int
    range: int


def summarize(values: Sequence[int]) -> Summary:
    """Compute mean, median, mode and range of values."""
    return Summary(
        mean=rounded_mean(values),
        median=median(values),
        mode=mode(values),
        range=value_range(values),
    )