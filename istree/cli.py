"""Command line entry point: build the trees and report on them."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from istree.permutations import identity
from istree.trees import build_ists, format_ists, format_level_order_all


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="istree",
        description="Build the n-1 independent spanning trees of the bubble-sort graph.",
    )
    parser.add_argument(
        "-n", type=int, default=9, help="number of symbols (default: 9)"
    )
    parser.add_argument(
        "-w", "--workers", type=int, default=1, help="worker threads (default: 1)"
    )
    parser.add_argument(
        "--print-ists", action="store_true", help="print every child -> parent pair"
    )
    parser.add_argument(
        "--level-order", action="store_true", help="print each tree level by level"
    )
    parser.add_argument(
        "--sizes", action="store_true", help="print the number of entries per tree"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.n < 2:
        parser.error("-n must be at least 2")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    start = time.perf_counter()
    trees = build_ists(args.n, args.workers)
    elapsed = time.perf_counter() - start
    print(f"Time taken: {elapsed} seconds")

    if args.sizes:
        print("Sizes of gathered ISTs:")
        for t, tree in enumerate(trees, start=1):
            print(f"  T{t}: {len(tree)} entries")
    if args.print_ists:
        sys.stdout.write(format_ists(trees))
    if args.level_order:
        sys.stdout.write(format_level_order_all(trees, identity(args.n)))
    return 0


if __name__ == "__main__":
    sys.exit(main())