"""Greedy drills: coin change, waiting times, file merging and meeting rooms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def min_coin_count(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins that make amount, always taking the largest coin that fits.

    Raises ValueError if a coin is not positive, the amount is negative,
    or the coins cannot make the amount exactly.
    """
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")

    used = 0
    remaining = amount
    for coin in denominations:
        if remaining == 0:
            break
        taken, remaining = divmod(remaining, coin)
        used += taken
    if remaining:
        raise ValueError(f"the coins cannot make {amount} exactly")
    return used


def total_wait_time(times: Iterable[int]) -> int:
    """Return the smallest total of waiting times when everyone queues at one machine.

    Each person's wait includes the time of everyone served before them
    and their own; serving the shortest jobs first gives the minimum.
    """
    ordered = sorted(times)
    if not ordered:
        raise ValueError("at least one person is needed")
    total = 0
    elapsed = 0
    for duration in ordered:
        elapsed += duration
        total += elapsed
    return total


def min_merge_cost(sizes: Iterable[int]) -> int:
    """Return the least total cost of merging files pairwise into one.

    Merging two files costs the sum of their sizes; always merging the two
    smallest files gives the minimum.
    """
    heap = list(sizes)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Return the most meetings one room can host without overlap.

    Each meeting is a (start, end) pair; a meeting may start when the
    previous one ends.
    """
    ordered = sorted(meetings, key=lambda meeting: (meeting[1], meeting[0]))
    count = 0
    room_free_at: int | None = None
    for start, end in ordered:
        if room_free_at is None or start >= room_free_at:
            count += 1
            room_free_at = end
    return count