"""Small number routines: divisors, digit powers, leap years, polynomials and roots."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "RootKind",
    "QuadraticRoots",
    "gcd",
    "hcf",
    "is_armstrong",
    "is_leap_year",
    "swap",
    "product",
    "square_all",
    "evaluate_polynomial",
    "solve_quadratic",
    "ascii_code",
]


class RootKind(Enum):
    """How the roots of a quadratic equation turn out."""

    REAL = "real"
    REPEATED = "repeated"
    IMAGINARY = "imaginary"


@dataclass(frozen=True)
class QuadraticRoots:
    """The kind of roots of a quadratic and the real roots found, if any."""

    kind: RootKind
    roots: tuple[float, ...]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers by repeated subtraction."""
    if a <= 0 or b <= 0:
        raise ValueError(f"both numbers must be positive, got {a} and {b}")
    while a != b:
        if a > b:
            # Subtract b as many times as it fits, stopping at b rather than 0.
            a -= b * ((a - 1) // b)
        else:
            b -= a * ((b - 1) // a)
    return a


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def hcf(a: int, b: int) -> int:
    """Highest common factor by Euclid's algorithm; 0 if either number is 0."""
    if a == 0 or b == 0:
        return 0
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def is_armstrong(n: int) -> bool:
    """Whether ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    if n == 0:
        return True
    digits = str(n)
    power = len(digits)
    return sum(int(digit) ** power for digit in digits) == n


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def swap(x: int, y: int) -> tuple[int, int]:
    """Exchange two integers using only addition and subtraction."""
    x = x + y
    y = x - y
    x = x - y
    return x, y


def product(a: float, b: float) -> float:
    """Product of two numbers as a float."""
    return float(a) * float(b)


def square_all(values: Iterable[int]) -> tuple[list[int], int]:
    """Return the squares of ``values`` and their sum."""
    squares = [value * value for value in values]
    return squares, sum(squares)


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial by Horner's rule; coefficients run from the constant term up."""
    if not coefficients:
        raise ValueError("a polynomial needs at least one coefficient")
    result = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        result = coefficient + x * result
    return result


def solve_quadratic(a: float, b: float, c: float) -> QuadraticRoots:
    """Classify and find the real roots of ``a*x**2 + b*x + c = 0``."""
    if a == 0:
        raise ValueError("the leading coefficient must not be zero")
    discriminant = b * b - 4 * a * c
    denominator = 2 * a
    if discriminant > 0:
        spread = math.sqrt(discriminant) / denominator
        base = -b / denominator
        return QuadraticRoots(RootKind.REAL, (base + spread, base - spread))
    if discriminant == 0:
        return QuadraticRoots(RootKind.REPEATED, (-b / denominator,))
    return QuadraticRoots(RootKind.IMAGINARY, ())


def ascii_code(char: str) -> int:
    """Character code of a single character."""
    if len(char) != 1:
        raise ValueError(f"expected exactly one character, got {char!r}")
    return ord(char)