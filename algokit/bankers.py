"""The banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class SafetyReport:
    """Outcome of a safety check.

    ``order`` holds the 0-based processes in the order they ran, and
    ``available_history`` the available vector after each of them finished.
    """

    allocated_total: tuple[int, ...]
    initial_available: tuple[int, ...]
    order: list[int] = field(default_factory=list)
    available_history: list[tuple[int, ...]] = field(default_factory=list)
    safe: bool = True


def run_bankers(
    claim: Sequence[int],
    allocated: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> SafetyReport:
    """Check whether every process can run to completion.

    ``claim`` is the total of each resource, ``allocated`` what each process
    holds and ``maximum`` what each may claim. Each round the first process,
    in index order, whose remaining need fits the available resources runs
    and returns what it holds.
    """
    resources = len(claim)
    if len(allocated) != len(maximum):
        raise ValueError("allocated and maximum tables differ in process count")
    if any(len(row) != resources for row in (*allocated, *maximum)):
        raise ValueError("every row must have one entry per resource")

    total = tuple(sum(row[r] for row in allocated) for r in range(resources))
    available = tuple(c - t for c, t in zip(claim, total))
    report = SafetyReport(allocated_total=total, initial_available=available)

    pending = list(range(len(allocated)))
    while pending:
        runnable = next(
            (
                p
                for p in pending
                if all(m - c <= a for m, c, a in zip(maximum[p], allocated[p], available))
            ),
            None,
        )
        if runnable is None:
            report.safe = False
            break
        pending.remove(runnable)
        report.order.append(runnable)
        available = tuple(a + c for a, c in zip(available, allocated[runnable]))
        report.available_history.append(available)
    return report