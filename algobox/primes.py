"""Primality testing by trial division and prime listing with the Sieve of Atkin."""

from __future__ import annotations

from math import isqrt

__all__ = ["is_prime", "atkin_primes"]

DEFAULT_LIMIT = 100000


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, trying divisors from 2 up to ``n // 2``."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def atkin_primes(limit: int = DEFAULT_LIMIT) -> list[int]:
    """Return every prime below ``limit`` in ascending order."""
    if limit <= 2:
        return []
    sieve = [False] * limit
    bound = isqrt(limit - 1)
    for x in range(1, bound + 1):
        xx = x * x
        for y in range(1, bound + 1):
            yy = y * y
            n = 4 * xx + yy
            if n < limit and n % 12 in (1, 5):
                sieve[n] = not sieve[n]
            n = 3 * xx + yy
            if n < limit and n % 12 == 7:
                sieve[n] = not sieve[n]
            n = 3 * xx - yy
            if x > y and n < limit and n % 12 == 11:
                sieve[n] = not sieve[n]

    for m in range(5, bound + 1):
        if sieve[m]:
            square = m * m
            for multiple in range(square, limit, square):
                sieve[multiple] = False

    small = [p for p in (2, 3) if p < limit]
    return small + [n for n in range(5, limit) if sieve[n]]