"""Linear and binary search returning the index of a key, or None."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "linear_search"]


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        candidate = values[middle]
        if candidate == key:
            return middle
        if candidate < key:
            low = middle + 1
        else:
            high = middle - 1
    return None


def linear_search(values: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first occurrence of ``key``, or None if absent."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None