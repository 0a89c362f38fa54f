import random

import pytest

from algokit.sorting import bubble_sort, heap_sort, quicksort, sift_heap_sort

SAMPLES = [
    [48, 10, 23, 43, 28, 26, 1],
    [],
    [5],
    [2, 1],
    [3, 3, 3],
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
    [1, 2, 3, 4, 5],
    [-4, 10, -4, 0, 7, 7, -20],
]


@pytest.mark.parametrize("data", SAMPLES)
def test_sorts_match_builtin(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert sift_heap_sort(data) == expected
    assert quicksort(data) == expected


def test_heap_sort_known_example():
    assert heap_sort([48, 10, 23, 43, 28, 26, 1]) == [1, 10, 23, 26, 28, 43, 48]


def test_sorts_random_lists():
    rng = random.Random(1234)
    for size in range(0, 30):
        data = [rng.randint(-50, 50) for _ in range(size)]
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert heap_sort(data) == expected
        assert sift_heap_sort(data) == expected
        assert quicksort(data) == expected


def test_sorts_do_not_modify_input():
    original = [48, 10, 23, 43, 28, 26, 1]
    data = list(original)
    bubble_sort(data)
    assert data == original
    heap_sort(data)
    assert data == original
    sift_heap_sort(data)
    assert data == original
    quicksort(data)
    assert data == original


def test_sorts_accept_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert heap_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert sift_heap_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quicksort(iter([3, 1, 2])) == [1, 2, 3]


def test_sorted_result_is_permutation():
    data = [5, 1, 4, 1, 5, 9, 2, 6]
    for result in (
        bubble_sort(data),
        heap_sort(data),
        sift_heap_sort(data),
        quicksort(data),
    ):
        assert sorted(result) == sorted(data)
        assert all(a <= b for a, b in zip(result, result[1:]))