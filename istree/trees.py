"""Build, serialize and display the independent spanning trees of the bubble-sort graph.

A tree is a ``dict`` mapping each child permutation to its parent; the identity
permutation is the root and does not appear as a key.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from istree.parent import parent
from istree.permutations import Permutation, all_permutations, identity

IST = dict[Permutation, Permutation]


def _parents_for_share(
    n: int, worker: int, workers: int
) -> list[tuple[Permutation, list[Permutation]]]:
    """Compute the parents in every tree of the permutations assigned to ``worker``."""
    root = identity(n)
    results = []
    for index, v in enumerate(all_permutations(n)):
        if index % workers != worker or v == root:
            continue
        results.append((v, [parent(v, t) for t in range(1, n)]))
    return results


def build_ists(n: int, workers: int = 1) -> list[IST]:
    """Return the ``n - 1`` trees; entry ``t - 1`` is tree ``T_t``.

    Permutations are shared round-robin between ``workers`` threads. Each tree's
    entries are ordered lexicographically by child.
    """
    if n < 2:
        raise ValueError(f"permutation size must be at least 2, got {n}")
    if workers < 1:
        raise ValueError(f"number of workers must be positive, got {workers}")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        shares = list(
            pool.map(lambda k: _parents_for_share(n, k, workers), range(workers))
        )

    collected: list[IST] = [{} for _ in range(n - 1)]
    for share in shares:
        for child, parents in share:
            for tree, par in zip(collected, parents):
                tree[child] = par
    return [dict(sorted(tree.items())) for tree in collected]


def serialize_ist(tree: Mapping[Permutation, Permutation]) -> list[int]:
    """Flatten a tree into ``child + parent`` symbol runs, ordered by child."""
    data: list[int] = []
    for child, par in sorted(tree.items()):
        data.extend(child)
        data.extend(par)
    return data


def deserialize_ist(data: Sequence[int], n: int) -> IST:
    """Rebuild a tree from the flat form produced by :func:`serialize_ist`."""
    if n < 1:
        raise ValueError(f"permutation size must be positive, got {n}")
    record = 2 * n
    if len(data) % record:
        raise ValueError(
            f"data size mismatch: {len(data)} integers is not a multiple of {record}"
        )
    tree: IST = {}
    for start in range(0, len(data), record):
        child = tuple(data[start : start + n])
        tree[child] = tuple(data[start + n : start + record])
    return tree


def children_map(
    tree: Mapping[Permutation, Permutation],
) -> dict[Permutation, list[Permutation]]:
    """Map each parent to its children, sorted lexicographically."""
    result: dict[Permutation, list[Permutation]] = {}
    for child, par in tree.items():
        result.setdefault(par, []).append(child)
    for children in result.values():
        children.sort()
    return result


def level_order(
    root: Sequence[int], tree: Mapping[Permutation, Permutation]
) -> Iterator[list[Permutation]]:
    """Yield the levels of the tree breadth-first, starting with ``[root]``."""
    children = children_map(tree)
    level = [tuple(root)]
    while level:
        yield level
        level = [child for node in level for child in children.get(node, [])]


def _format_permutation(v: Sequence[int]) -> str:
    return "".join(f"{symbol} " for symbol in v) + "| "


def format_level_order(
    root: Sequence[int], tree: Mapping[Permutation, Permutation]
) -> str:
    """Render the tree one level per line, each node as ``"1 2 3 | "``."""
    lines = (
        "".join(_format_permutation(v) for v in level)
        for level in level_order(root, tree)
    )
    return "\n".join(lines) + "\n"


def format_level_order_all(
    trees: Sequence[Mapping[Permutation, Permutation]], root: Sequence[int]
) -> str:
    """Render the level-order traversal of every tree under a ``T<t>`` heading."""
    return "".join(
        f"\nLevel-order traversal of IST T{t}:\n" + format_level_order(root, tree)
        for t, tree in enumerate(trees, start=1)
    )


def format_ists(trees: Sequence[Mapping[Permutation, Permutation]]) -> str:
    """Render every tree as ``child -> parent`` lines ordered by child."""
    parts = []
    for t, tree in enumerate(trees, start=1):
        parts.append(f"\nIST T{t}:\n")
        for child, par in sorted(tree.items()):
            parts.append(
                "".join(map(str, child)) + " -> " + "".join(map(str, par)) + "\n"
            )
    return "".join(parts)