"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from typing import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent elements that are out of order."""
    items = list(values)
    n = len(items)
    for passes in range(n):
        for j in range(n - passes - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _heapify(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _heapify(items, n, i)
    for end in range(n - 1, -1, -1):
        items[0], items[end] = items[end], items[0]
        _heapify(items, end, 0)
    return items


def sift_heap_sort(values: Iterable[int]) -> list[int]:
    """Heap sort that builds the heap by sifting each new element up to the root."""
    heap = list(values)
    for i in range(1, len(heap)):
        child = i
        while child != 0:
            parent = (child - 1) // 2
            if heap[parent] < heap[child]:
                heap[parent], heap[child] = heap[child], heap[parent]
            child = parent
    for end in range(len(heap) - 1, -1, -1):
        heap[0], heap[end] = heap[end], heap[0]
        root = 0
        while True:
            child = 2 * root + 1
            if child < end - 1 and heap[child] < heap[child + 1]:
                child += 1
            if child < end and heap[root] < heap[child]:
                heap[root], heap[child] = heap[child], heap[root]
            root = child
            if child >= end:
                break
    return heap


def _partition(items: list[int], first: int, last: int) -> int:
    pivot = first
    i, j = first, last
    while i < j:
        while items[i] <= items[pivot] and i < last:
            i += 1
        while items[j] > items[pivot]:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[pivot], items[j] = items[j], items[pivot]
    return j


def quicksort(values: Iterable[int]) -> list[int]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        first, last = pending.pop()
        if first < last:
            split = _partition(items, first, last)
            pending.append((first, split - 1))
            pending.append((split + 1, last))
    return items