"""Parent rule of the t-th independent spanning tree of the bubble-sort graph."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from istree.permutations import (
    Permutation,
    identity,
    inverse,
    rightmost_misplaced,
    swap_next,
)


def find_position(
    v: Sequence[int], t: int, inv: Mapping[int, int], rval: int | None
) -> Permutation:
    """Parent of ``v`` in tree ``t`` when the last symbol is already in place."""
    n = len(v)
    swapped = swap_next(v, t, inv)
    if t == 2 and swapped == identity(n):
        return swap_next(v, t - 1, inv)
    second_last = v[n - 2]
    if second_last == t or second_last == n - 1:
        if rval is not None and rval > 0 and rval in inv:
            return swap_next(v, rval, inv)
        return tuple(v)
    return swapped


def parent(v: Sequence[int], t: int) -> Permutation:
    """Return the parent of ``v`` in the ``t``-th tree (``1 <= t <= n - 1``).

    The identity permutation is the root of every tree and has no parent.
    """
    v = tuple(v)
    n = len(v)
    if n < 2:
        raise ValueError("permutations must have at least two symbols")
    if sorted(v) != list(identity(n)):
        raise ValueError(f"{v} is not a permutation of 1..{n}")
    if not 1 <= t <= n - 1:
        raise ValueError(f"tree index must be between 1 and {n - 1}, got {t}")
    root = identity(n)
    if v == root:
        raise ValueError("the identity permutation is the root and has no parent")

    inv = inverse(v)
    last, second_last = v[n - 1], v[n - 2]

    if last == n:
        if t != n - 1:
            return find_position(v, t, inv, rightmost_misplaced(v))
        return swap_next(v, second_last, inv)

    if last == n - 1 and second_last == n and swap_next(v, n, inv) != root:
        return swap_next(v, n, inv) if t == 1 else swap_next(v, t - 1, inv)
    return swap_next(v, n, inv) if last == t else swap_next(v, t, inv)