"""Elementary comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by repeated adjacent swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] >= items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by inserting each into a sorted prefix."""
    items = list(values)
    for position in range(1, len(items)):
        current = items[position]
        j = position
        while j > 0 and items[j - 1] > current:
            items[j] = items[j - 1]
            j -= 1
        items[j] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by repeatedly selecting the minimum."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items