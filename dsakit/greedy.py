"""Greedy scheduling algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline slot and a profit."""

    id: int
    deadline: int
    profit: int


def max_meetings(start: Sequence[int], end: Sequence[int]) -> list[int]:
    """Return the 1-based positions of a largest set of non-overlapping meetings.

    Meetings are taken in order of finishing time; a meeting is chosen when it
    starts strictly after the last chosen one ends.
    """
    if len(start) != len(end):
        raise ValueError("start and end must have the same length")
    meetings = sorted(
        ((first, last, position) for position, (first, last) in enumerate(zip(start, end), 1)),
        key=lambda meeting: meeting[1],
    )
    chosen = []
    last_time = -1
    for first, last, position in meetings:
        if first > last_time:
            chosen.append(position)
            last_time = last
    return chosen


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the number of platforms needed so that no train waits."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    arrive = sorted(arrivals)
    depart = sorted(departures)
    count = len(arrive)
    best = current = 1
    i, j = 1, 0
    while i < count and j < count:
        if arrive[i] <= depart[j]:
            current += 1
            best = max(best, current)
            i += 1
        else:
            current -= 1
            j += 1
    return best


def average_wait_time(durations: Iterable[int]) -> int:
    """Return the integer average waiting time under shortest-job-first."""
    ordered = sorted(durations)
    if not ordered:
        raise ValueError("average_wait_time() needs at least one job")
    waiting = 0
    elapsed = 0
    for duration in ordered:
        waiting += elapsed
        elapsed += duration
    return waiting // len(ordered)


def schedule_jobs(jobs: Iterable[Job]) -> tuple[int, int]:
    """Return ``(jobs done, total profit)`` for deadline job sequencing.

    Jobs are considered by decreasing profit and placed in the latest free
    slot on or before their deadline.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    if not ordered:
        return 0, 0
    latest = max(job.deadline for job in ordered)
    taken = [False] * (max(latest, 0) + 1)
    done = 0
    profit = 0
    for job in ordered:
        for slot in range(job.deadline, 0, -1):
            if not taken[slot]:
                taken[slot] = True
                done += 1
                profit += job.profit
                break
    return done, profit