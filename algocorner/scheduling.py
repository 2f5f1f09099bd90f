"""Round-robin CPU scheduling with per-process waiting and turnaround times."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from statistics import fmean


@dataclass(frozen=True)
class ProcessStats:
    """Timing of one process; ``process`` numbers processes from 1."""

    process: int
    burst_time: int
    waiting_time: int
    turnaround_time: int


def round_robin(burst_times: Sequence[int], quantum: int) -> list[ProcessStats]:
    """Run every process in turn for at most ``quantum`` units until all finish.

    All processes arrive at time zero, in the order given.
    """
    if quantum <= 0:
        raise ValueError(f"quantum must be positive, got {quantum}")
    bursts = list(burst_times)
    if any(burst < 0 for burst in bursts):
        raise ValueError("burst times must not be negative")
    remaining = list(bursts)
    waiting = [0] * len(bursts)
    clock = 0
    while any(left > 0 for left in remaining):
        for index, left in enumerate(remaining):
            if left <= 0:
                continue
            if left > quantum:
                clock += quantum
                remaining[index] = left - quantum
            else:
                clock += left
                waiting[index] = clock - bursts[index]
                remaining[index] = 0
    return [
        ProcessStats(number, burst, wait, burst + wait)
        for number, (burst, wait) in enumerate(zip(bursts, waiting), 1)
    ]


def average_waiting_time(stats: Iterable[ProcessStats]) -> float:
    """Mean waiting time over the processes."""
    times = [item.waiting_time for item in stats]
    if not times:
        raise ValueError("no processes to average")
    return fmean(times)


def average_turnaround_time(stats: Iterable[ProcessStats]) -> float:
    """Mean turnaround time over the processes."""
    times = [item.turnaround_time for item in stats]
    if not times:
        raise ValueError("no processes to average")
    return fmean(times)