"""Permutation helpers for independent spanning trees on the bubble-sort graph.

Permutations are tuples of the symbols ``1..n``; positions are 0-based.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Mapping, Sequence

Permutation = tuple[int, ...]


def identity(n: int) -> Permutation:
    """Return the identity permutation ``(1, 2, ..., n)``."""
    if n < 0:
        raise ValueError(f"permutation size must be non-negative, got {n}")
    return tuple(range(1, n + 1))


def inverse(v: Sequence[int]) -> dict[int, int]:
    """Map each symbol of ``v`` to its 0-based position."""
    return {symbol: position for position, symbol in enumerate(v)}


def swap_next(
    v: Sequence[int], symbol: int, inv: Mapping[int, int] | None = None
) -> Permutation:
    """Swap ``symbol`` with the symbol right after it.

    If ``symbol`` already sits in the last position, ``v`` is returned unchanged.
    """
    if inv is None:
        inv = inverse(v)
    try:
        position = inv[symbol]
    except KeyError:
        raise ValueError(f"symbol {symbol} does not occur in {tuple(v)}") from None
    result = list(v)
    if position + 1 >= len(result):
        return tuple(result)
    result[position], result[position + 1] = result[position + 1], result[position]
    return tuple(result)


def rightmost_misplaced(v: Sequence[int]) -> int | None:
    """Return the 1-based position of the rightmost symbol not in its place.

    Returns ``None`` for the identity permutation.
    """
    for position in reversed(range(len(v))):
        if v[position] != position + 1:
            return position + 1
    return None


def index_to_permutation(index: int, n: int) -> Permutation:
    """Return the permutation of rank ``index`` in lexicographic order (Lehmer code)."""
    total = math.factorial(n) if n >= 0 else 0
    if not 0 <= index < total:
        raise ValueError(f"index {index} out of range for permutations of size {n}")
    remaining = list(range(1, n + 1))
    result = []
    for i in reversed(range(n)):
        block, index = divmod(index, math.factorial(i))
        result.append(remaining.pop(block))
    return tuple(result)


def all_permutations(n: int) -> Iterator[Permutation]:
    """Yield every permutation of ``1..n`` in lexicographic order."""
    if n < 0:
        raise ValueError(f"permutation size must be non-negative, got {n}")
    yield from itertools.permutations(range(1, n + 1))