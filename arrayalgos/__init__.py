"""Classic array and matrix algorithms over plain Python lists, with a small command line."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "matrix",
    "pair_sums",
    "rotation",
    "scans",
    "sequences",
    "sorted_sets",
    "sorting",
]