# istree

`istree` builds the n − 1 independent spanning trees (ISTs) of the
bubble-sort graph on the permutations of `1..n`. All trees are rooted at the
identity permutation. For every non-identity permutation `v` and every tree
index `t` in `1..n-1`, it works out the parent of `v` in tree `T_t`. A parent
differs from its child by one adjacent swap.

Permutations are tuples of the symbols `1..n`. A tree is a `dict` that maps
each child permutation to its parent. The root is never a key.

## Installation

```
pip install .
```

Run `pip install .[test]` to get the test dependencies as well.

## Command line

```
istree
```

This builds every tree for `n = 9` and prints `Time taken: <seconds> seconds`.
Run `istree --help` to see all the options:

- `-n N`: number of symbols (default 9, must be at least 2).
- `-w N`, `--workers N`: number of worker threads used to compute parents
  (default 1). Permutations are handed out to the threads round-robin.
- `--sizes`: print the number of entries in each tree.
- `--print-ists`: print each tree as `child -> parent` lines, ordered by child.
- `--level-order`: print each tree level by level, starting from the root.

The number of permutations grows as n!, so printing whole trees is only
practical for small `n`.

## Library use

```python
from istree.permutations import identity
from istree.parent import parent
from istree.trees import build_ists, format_ists, format_level_order_all

v = (2, 1, 3, 4)
print(parent(v, 1))          # parent of v in tree T1

trees = build_ists(4, 1)     # list of n-1 dicts: child -> parent
print(format_ists(trees))
print(format_level_order_all(trees, identity(4)))
```

`parent(v, t)` raises `ValueError` when `v` is not a permutation of `1..n`,
when `n < 2`, when `t` is outside `1..n-1`, and when `v` is the identity,
which is the root and has no parent.

Other helpers:

- `istree.permutations`: `identity`, `inverse` (symbol to 0-based position),
  `swap_next` (swap a symbol with the one after it), `rightmost_misplaced`,
  `index_to_permutation` (lexicographic rank to permutation), and
  `all_permutations` (all permutations in lexicographic order).
- `istree.parent`: `find_position`, the rule used when the last symbol is
  already in place.
- `istree.trees`: `build_ists(n, workers)` builds all trees.
  `serialize_ist` and `deserialize_ist` turn a tree into a flat list of
  integers (child symbols followed by parent symbols) and back;
  `deserialize_ist` raises `ValueError` if the length is not a multiple of
  `2 * n`. `children_map`, `level_order` and `format_level_order` walk a tree
  level by level.

## What it does not do

All work happens in one process, split over threads. There is no way to
spread the computation over several machines. The trees are kept in memory
only: nothing is written to or read from files apart from the command's
printed output.