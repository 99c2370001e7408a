import pytest

from dsakit.sorting import bubble_sort, insertion_sort, selection_sort

CASES = [
    ([], []),
    ([1], [1]),
    ([2, 1], [1, 2]),
    ([5, 3, 8, 1, 9, 2], [1, 2, 3, 5, 8, 9]),
    ([4, 4, 1, 4, 0], [0, 1, 4, 4, 4]),
    ([-3, 10, -7, 0, 2], [-7, -3, 0, 2, 10]),
    ([10, 9, 8, 7, 6, 5, 4, 3, 2, 1], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]),
    ([0, 1, 2, 3, 4, 5, 6, 7, 8, 9], [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]),
]


@pytest.mark.parametrize("values, expected", CASES)
def test_bubble_sort(values, expected):
    assert bubble_sort(values) == expected


@pytest.mark.parametrize("values, expected", CASES)
def test_insertion_sort(values, expected):
    assert insertion_sort(values) == expected


@pytest.mark.parametrize("values, expected", CASES)
def test_selection_sort(values, expected):
    assert selection_sort(values) == expected


def test_bubble_sort_does_not_mutate_input():
    values = [3, 1, 2]
    result = bubble_sort(values)
    assert values == [3, 1, 2]
    assert result == [1, 2, 3]


def test_insertion_sort_does_not_mutate_input():
    values = [3, 1, 2]
    result = insertion_sort(values)
    assert values == [3, 1, 2]
    assert result == [1, 2, 3]


def test_selection_sort_does_not_mutate_input():
    values = [3, 1, 2]
    result = selection_sort(values)
    assert values == [3, 1, 2]
    assert result == [1, 2, 3]


def test_bubble_sort_accepts_iterables():
    assert bubble_sort(iter([3, 2, 1])) == [1, 2, 3]


def test_insertion_sort_accepts_iterables():
    assert insertion_sort(iter([3, 2, 1])) == [1, 2, 3]


def test_selection_sort_accepts_iterables():
    assert selection_sort(iter([3, 2, 1])) == [1, 2, 3]


def test_bubble_sort_strings():
    assert bubble_sort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]


def test_insertion_sort_strings():
    assert insertion_sort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]


def test_selection_sort_strings():
    assert selection_sort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]