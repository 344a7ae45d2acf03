"""Backtracking drills: sequences from 1..n and the N-Queens count."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import combinations, permutations


def _check_sizes(n: int, m: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if m < 0:
        raise ValueError(f"m must be non-negative, got {m}")


def sequences(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """Yield every sequence of m distinct numbers from 1..n in lexicographic order."""
    _check_sizes(n, m)
    yield from permutations(range(1, n + 1), m)


def increasing_sequences(n: int, m: int) -> Iterator[tuple[int, ...]]:
    """Yield every strictly increasing sequence of m numbers from 1..n in lexicographic order."""
    _check_sizes(n, m)
    yield from combinations(range(1, n + 1), m)


def count_n_queens(n: int) -> int:
    """Count the ways to place n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")

    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in diagonals or col - row in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(col - row)
            total += place(row + 1)
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(col - row)
        return total

    return place(0)