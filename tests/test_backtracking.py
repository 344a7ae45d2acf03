import math

import pytest

from algodrills.backtracking import count_n_queens, increasing_sequences, sequences


@pytest.mark.parametrize("n,m", [(1, 1), (3, 1), (4, 2), (4, 4), (5, 3)])
def test_sequences_count_matches_permutations(n, m):
    result = list(sequences(n, m))
    assert len(result) == math.perm(n, m)


@pytest.mark.parametrize("n,m", [(3, 2), (4, 3), (5, 2)])
def test_sequences_are_sorted_distinct_and_in_range(n, m):
    result = list(sequences(n, m))
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    for seq in result:
        assert len(seq) == m
        assert len(set(seq)) == m
        assert all(1 <= x <= n for x in seq)


def test_sequences_longer_than_pool_is_empty():
    assert list(sequences(2, 3)) == []


def test_sequences_of_length_zero_has_one_empty_tuple():
    assert list(sequences(3, 0)) == [()]


@pytest.mark.parametrize("n,m", [(1, 1), (4, 2), (5, 3), (6, 6)])
def test_increasing_count_matches_combinations(n, m):
    assert len(list(increasing_sequences(n, m))) == math.comb(n, m)


@pytest.mark.parametrize("n,m", [(4, 2), (5, 3)])
def test_increasing_is_the_sorted_subset_of_sequences(n, m):
    increasing = list(increasing_sequences(n, m))
    from_all = [s for s in sequences(n, m) if list(s) == sorted(s)]
    assert increasing == from_all


def test_increasing_sequences_strictly_increase():
    for seq in increasing_sequences(6, 4):
        assert all(a < b for a, b in zip(seq, seq[1:]))


@pytest.mark.parametrize("func", [sequences, increasing_sequences])
def test_negative_sizes_rejected(func):
    with pytest.raises(ValueError):
        list(func(-1, 2))
    with pytest.raises(ValueError):
        list(func(3, -1))


def test_n_queens_known_counts():
    assert count_n_queens(4) == 2
    assert count_n_queens(8) == 92
    assert count_n_queens(3) == 0


def test_n_queens_single_square():
    assert count_n_queens(1) == 1


def test_n_queens_negative_rejected():
    with pytest.raises(ValueError):
        count_n_queens(-2)