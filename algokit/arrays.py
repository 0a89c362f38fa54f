"""Array utilities: reversal, duplicate detection and searching."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence


def reversed_elements(values: Sequence[int]) -> list[int]:
    """Return the elements of ``values`` in reverse order."""
    return list(reversed(values))


@dataclass
class DuplicateReport:
    """Result of pairing up duplicate values.

    ``unique_count`` is the number of elements minus two for every pair found,
    as the pairing counts it; ``unique`` lists the non-zero values left over.
    """

    duplicates: list[int] = field(default_factory=list)
    unique: list[int] = field(default_factory=list)
    unique_count: int = 0


def find_duplicates(values: Sequence[int]) -> DuplicateReport:
    """Pair each value with its next equal occurrence and report both groups.

    Each element can belong to one pair only. Zero values are never paired
    and never listed as unique.
    """
    remaining: list[int | None] = list(values)
    duplicates = []
    for i, value in enumerate(remaining):
        if value is None or value == 0:
            continue
        try:
            j = remaining.index(value, i + 1)
        except ValueError:
            continue
        duplicates.append(value)
        remaining[i] = remaining[j] = None
    unique = [value for value in remaining if value is not None and value != 0]
    return DuplicateReport(
        duplicates=duplicates,
        unique=unique,
        unique_count=len(values) - 2 * len(duplicates),
    )


def linear_search(values: Sequence[int], item: int) -> int | None:
    """Return the index of the first occurrence of ``item``, or None."""
    return next((i for i, value in enumerate(values) if value == item), None)


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in the sorted ``values`` by jumping in blocks of about sqrt(n).

    Returns the index found, or None when the target is absent.
    """
    n = len(values)
    if n == 0:
        return None
    root = math.sqrt(n)
    step = int(root)
    prev = 0
    while values[min(step, n) - 1] < target:
        prev = step
        step = int(step + root)
        if prev >= n:
            return None
    while values[prev] < target:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if values[prev] == target else None