"""Factorials and Fibonacci numbers."""

from __future__ import annotations

__all__ = ["factorial", "fibonacci", "fibonacci_series"]


def factorial(n: int) -> int:
    """Return ``n!``; ``0!`` and ``1!`` are 1."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci term, counting from 1: terms 1 and 2 are 0 and 1."""
    if n < 1:
        raise ValueError(f"terms are numbered from 1, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci terms, starting 0, 1."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    terms: list[int] = []
    previous, current = 0, 1
    for _ in range(count):
        terms.append(previous)
        previous, current = current, previous + current
    return terms