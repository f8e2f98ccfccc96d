"""Non-preemptive CPU scheduling: first come first served, shortest job first
and priority scheduling, with waiting and turnaround times."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class Process:
    """A process waiting for the CPU. Lower ``priority`` values run first."""

    pid: int
    burst_time: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst_time < 0:
            raise ValueError("burst time must not be negative")


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the times it got from a schedule."""

    process: Process
    waiting_time: int
    turnaround_time: int


@dataclass(frozen=True)
class Schedule:
    """Processes in the order they run, with their waiting and turnaround times."""

    entries: tuple[ScheduledProcess, ...]

    def __iter__(self) -> Iterator[ScheduledProcess]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def _mean(self, values: Iterable[int]) -> float:
        if not self.entries:
            raise ValueError("an empty schedule has no averages")
        return sum(values) / len(self.entries)

    def average_waiting_time(self) -> float:
        """Mean waiting time over all processes."""
        return self._mean(entry.waiting_time for entry in self.entries)

    def average_turnaround_time(self) -> float:
        """Mean turnaround time over all processes."""
        return self._mean(entry.turnaround_time for entry in self.entries)


def _run_in_order(ordered: list[Process]) -> Schedule:
    starts = accumulate((process.burst_time for process in ordered), initial=0)
    entries = tuple(
        ScheduledProcess(process, start, start + process.burst_time)
        for process, start in zip(ordered, starts)
    )
    return Schedule(entries)


def fcfs(processes: Iterable[Process]) -> Schedule:
    """Run the processes in the order given."""
    return _run_in_order(list(processes))


def sjf(processes: Iterable[Process]) -> Schedule:
    """Run the shortest bursts first; equal bursts keep their given order."""
    return _run_in_order(sorted(processes, key=lambda process: process.burst_time))


def priority_schedule(processes: Iterable[Process]) -> Schedule:
    """Run the lowest priority values first; ties keep their given order."""
    return _run_in_order(sorted(processes, key=lambda process: process.priority))


def format_schedule(schedule: Schedule) -> str:
    """Render a schedule as a table followed by the average times."""
    lines = ["Process ID\tBurst Time\tPriority\tWaiting Time\tTurnaround Time"]
    for entry in schedule:
        process = entry.process
        lines.append(
            f"{process.pid}\t\t{process.burst_time}\t\t{process.priority}"
            f"\t\t{entry.waiting_time}\t\t{entry.turnaround_time}"
        )
    text = "\n".join(lines)
    if len(schedule):
        text += (
            f"\n\nAverage Waiting Time = {schedule.average_waiting_time():f}"
            f"\nAverage Turnaround Time = {schedule.average_turnaround_time():f}\n"
        )
    return text