"""CPU scheduling: round robin, shortest job first, shortest remaining time."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Process:
    """A job with an identifier, a burst time and an arrival time."""

    pid: int
    burst: int
    arrival: int = 0


@dataclass(frozen=True)
class ScheduleResult:
    """Waiting and turnaround times, one per process, in ``processes`` order."""

    processes: tuple[Process, ...]
    waiting: tuple[int, ...]
    turnaround: tuple[int, ...]

    @property
    def order(self) -> tuple[int, ...]:
        return tuple(p.pid for p in self.processes)

    @property
    def average_waiting(self) -> float:
        return sum(self.waiting) / len(self.waiting) if self.waiting else 0.0

    @property
    def average_turnaround(self) -> float:
        return sum(self.turnaround) / len(self.turnaround) if self.turnaround else 0.0

    def rows(self) -> Iterator[tuple[Process, int, int]]:
        """Each process with its waiting and turnaround times."""
        return zip(self.processes, self.waiting, self.turnaround)


def _result(processes: list[Process], waiting: list[int]) -> ScheduleResult:
    return ScheduleResult(
        processes=tuple(processes),
        waiting=tuple(waiting),
        turnaround=tuple(p.burst + w for p, w in zip(processes, waiting)),
    )


def round_robin(burst_times: Iterable[int], quantum: int) -> ScheduleResult:
    """Round-robin schedule of processes 1..n, all arriving at time 0."""
    bursts = list(burst_times)
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    if any(b < 0 for b in bursts):
        raise ValueError("burst times must be non-negative")
    remaining = list(bursts)
    waiting = [0] * len(bursts)
    clock = 0
    while any(r > 0 for r in remaining):
        for i, left in enumerate(remaining):
            if left <= 0:
                continue
            if left > quantum:
                clock += quantum
                remaining[i] -= quantum
            else:
                clock += left
                waiting[i] = clock - bursts[i]
                remaining[i] = 0
    processes = [Process(pid, burst) for pid, burst in enumerate(bursts, start=1)]
    return _result(processes, waiting)


def shortest_remaining_time_first(processes: Iterable[Process]) -> ScheduleResult:
    """Preemptive shortest-remaining-time schedule, one time unit per step."""
    procs = list(processes)
    if any(p.burst <= 0 for p in procs):
        raise ValueError("burst times must be positive")
    remaining = [p.burst for p in procs]
    waiting = [0] * len(procs)
    complete = clock = shortest = 0
    best = math.inf
    chosen = False
    while complete != len(procs):
        for j, p in enumerate(procs):
            if p.arrival <= clock and 0 < remaining[j] < best:
                best = remaining[j]
                shortest = j
                chosen = True
        if not chosen:
            clock += 1
            continue
        remaining[shortest] -= 1
        best = remaining[shortest] or math.inf
        if remaining[shortest] == 0:
            complete += 1
            chosen = False
            finish = clock + 1
            job = procs[shortest]
            waiting[shortest] = max(0, finish - job.burst - job.arrival)
        clock += 1
    return _result(procs, waiting)


def shortest_job_first(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive schedule in order of burst time, all arriving at once."""
    ordered = sorted(processes, key=lambda p: p.burst)
    waiting = list(accumulate((p.burst for p in ordered[:-1]), initial=0)) if ordered else []
    return _result(ordered, waiting)