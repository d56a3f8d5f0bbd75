"""Comparison sorts: heap, quick, bubble, insertion and selection sort.

Each function takes any iterable and returns a new ascending list.
The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "heap_sort",
    "quick_sort",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
]


def _sift_down(items: list[Any], root: int, end: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:end]``."""
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < end and items[left] > items[largest]:
            largest = left
        if right < end and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range((size - 1) // 2, -1, -1):
        _sift_down(items, root, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition around the last element and return the pivot's final place."""
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, partitioning around the last element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for current in range(size - done - 1):
            if items[current] > items[current + 1]:
                items[current], items[current + 1] = items[current + 1], items[current]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items: list[Any] = []
    for value in values:
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    size = len(items)
    for start in range(size - 1):
        smallest = min(range(start, size), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items