"""Independent spanning trees of the bubble-sort graph on the permutations of 1..n."""

__version__ = "0.1.0"
__all__ = ["permutations", "parent", "trees", "cli"]