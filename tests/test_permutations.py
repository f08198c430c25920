import math

import pytest

from istree.permutations import (
    all_permutations,
    identity,
    index_to_permutation,
    inverse,
    rightmost_misplaced,
    swap_next,
)


def test_identity_values():
    assert identity(4) == (1, 2, 3, 4)
    assert identity(0) == ()


def test_identity_negative_raises():
    with pytest.raises(ValueError):
        identity(-1)


@pytest.mark.parametrize("v", [(3, 1, 2), (2, 4, 1, 3), (1,)])
def test_inverse_maps_symbols_to_positions(v):
    inv = inverse(v)
    assert sorted(inv) == sorted(v)
    assert all(v[pos] == sym for sym, pos in inv.items())


def test_swap_next_swaps_adjacent():
    assert swap_next((1, 2, 3), 1) == (2, 1, 3)
    assert swap_next((1, 2, 3), 2, inverse((1, 2, 3))) == (1, 3, 2)


def test_swap_next_last_position_unchanged():
    assert swap_next((1, 2, 3), 3) == (1, 2, 3)


def test_swap_next_missing_symbol_raises():
    with pytest.raises(ValueError):
        swap_next((1, 2, 3), 7)


def test_swap_next_is_involution_on_pairs():
    v = (4, 1, 3, 2)
    once = swap_next(v, 1)
    assert swap_next(once, once[inverse(once)[1] - 1]) == v


def test_rightmost_misplaced_identity_is_none():
    assert rightmost_misplaced(identity(5)) is None


def test_rightmost_misplaced_value():
    assert rightmost_misplaced((2, 1, 3)) == 2


@pytest.mark.parametrize("v", list(all_permutations(4))[1:])
def test_rightmost_misplaced_invariant(v):
    r = rightmost_misplaced(v)
    assert v[r - 1] != r
    assert all(v[i] == i + 1 for i in range(r, len(v)))


def test_index_to_permutation_matches_lexicographic_order():
    perms = list(all_permutations(4))
    for rank, perm in enumerate(perms):
        assert index_to_permutation(rank, 4) == perm


def test_index_to_permutation_ends():
    assert index_to_permutation(0, 5) == identity(5)
    assert index_to_permutation(math.factorial(5) - 1, 5) == tuple(reversed(identity(5)))


@pytest.mark.parametrize("index", [-1, math.factorial(4)])
def test_index_to_permutation_out_of_range(index):
    with pytest.raises(ValueError):
        index_to_permutation(index, 4)


def test_all_permutations_count_and_order():
    perms = list(all_permutations(5))
    assert len(perms) == math.factorial(5)
    assert perms == sorted(perms)
    assert len(set(perms)) == len(perms)
    assert perms[0] == identity(5)