"""Sorting drills: student grade ordering, serial numbers and hiring counts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Student:
    """A student's name and scores in Korean, English and mathematics."""

    name: str
    korean: int
    english: int
    math: int


def sort_students(students: Iterable[Student]) -> list[Student]:
    """Sort by Korean descending, English ascending, math descending, then name."""
    return sorted(students, key=lambda s: (-s.korean, s.english, -s.math, s.name))


def _digit_sum(serial: str) -> int:
    return sum(int(ch) for ch in serial if ch in _DIGITS)


def sort_serials(serials: Iterable[str]) -> list[str]:
    """Sort serial numbers by length, then by the sum of their digits, then by text."""
    return sorted(serials, key=lambda s: (len(s), _digit_sum(s), s))


def count_hires(applicants: Iterable[tuple[int, int]]) -> int:
    """Count applicants not beaten in both document and interview rank by anyone else.

    Each applicant is a (document rank, interview rank) pair; lower is better.
    """
    hired = 0
    best_interview: int | None = None
    for _, interview in sorted(applicants):
        if best_interview is None or interview < best_interview:
            best_interview = interview
            hired += 1
    return hired