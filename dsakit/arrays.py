"""Array and string routines: windowed sums, ranking, unions and palindromes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous run of ``values`` summing to ``k``.

    Uses a sliding window, so it is only correct for non-negative values.
    Returns 0 when no such run exists.
    """
    values = list(values)
    best = 0
    total = 0
    left = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def second_largest(values: Iterable[int]) -> int | None:
    """Return the second largest distinct value, or ``None`` if there is none.

    Raises ``ValueError`` for an empty input.
    """
    iterator = iter(values)
    try:
        largest = next(iterator)
    except StopIteration:
        raise ValueError("second_largest() needs at least one value") from None
    second: int | None = None
    for value in iterator:
        if value > largest:
            second = largest
            largest = value
        elif value != largest and (second is None or value > second):
            second = value
    return second


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of both inputs in ascending order."""
    return sorted(set(first).union(second))


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, ignoring non-alphanumerics.

    The comparison is case sensitive.
    """
    left = 0
    right = len(text) - 1
    while left < right:
        if not _is_ascii_alnum(text[left]):
            left += 1
        elif not _is_ascii_alnum(text[right]):
            right -= 1
        elif text[left] != text[right]:
            return False
        else:
            left += 1
            right -= 1
    return True