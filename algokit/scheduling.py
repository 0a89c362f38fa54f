"""Round-robin CPU scheduling."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class ProcessResult:
    """Times of one finished process; ``pid`` counts from 1."""

    pid: int
    burst: int
    turnaround: int
    waiting: int


@dataclass
class ScheduleReport:
    """Finished processes in the order they completed."""

    processes: list[ProcessResult] = field(default_factory=list)

    @property
    def average_waiting(self) -> float:
        return sum(p.waiting for p in self.processes) / len(self.processes)

    @property
    def average_turnaround(self) -> float:
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def round_robin(arrivals: Sequence[int], bursts: Sequence[int], quantum: int) -> ScheduleReport:
    """Schedule processes with arrival times, cycling through them in index order.

    After a slice the scheduler moves to the next process if it has arrived,
    otherwise it returns to the first one. Raises ValueError when the CPU
    would wait forever for a process that has not arrived.
    """
    if len(arrivals) != len(bursts):
        raise ValueError("arrivals and bursts differ in length")
    if not bursts:
        raise ValueError("no processes to schedule")
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(burst <= 0 for burst in bursts):
        raise ValueError("burst times must be positive")

    n = len(bursts)
    remaining = list(bursts)
    left = n
    total = 0
    i = 0
    progressed = False
    report = ScheduleReport()

    while left:
        finished = False
        if 0 < remaining[i] <= quantum:
            total += remaining[i]
            remaining[i] = 0
            finished = progressed = True
        elif remaining[i] > 0:
            remaining[i] -= quantum
            total += quantum
            progressed = True
        if finished:
            left -= 1
            turnaround = total - arrivals[i]
            report.processes.append(
                ProcessResult(i + 1, bursts[i], turnaround, turnaround - bursts[i])
            )
        if i < n - 1 and arrivals[i + 1] <= total:
            i += 1
        else:
            if left and not progressed:
                raise ValueError("remaining processes never get the processor")
            progressed = False
            i = 0
    return report


def round_robin_queue(bursts: Sequence[int], quantum: int) -> ScheduleReport:
    """Schedule processes that all arrive at once, rotating a ready queue.

    A process finishes when its remaining time is below the quantum;
    otherwise it runs a full quantum and goes to the back of the queue.
    """
    if not bursts:
        raise ValueError("no processes to schedule")
    if quantum <= 0:
        raise ValueError("time quantum must be positive")

    queue = deque((pid, burst, burst) for pid, burst in enumerate(bursts, start=1))
    turn = 0
    report = ScheduleReport()
    while queue:
        pid, burst, left = queue.popleft()
        if left < quantum:
            turn += left
            report.processes.append(ProcessResult(pid, burst, turn, turn - burst))
        else:
            turn += quantum
            queue.append((pid, burst, left - quantum))
    return report