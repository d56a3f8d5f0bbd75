"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "containers",
    "expressions",
    "geometry",
    "matrix",
    "primes",
    "searching",
    "sequences",
    "sorting",
    "tree",
    "weekday",
]