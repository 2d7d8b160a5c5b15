"""CPU scheduling simulations: FCFS, SJF, priority and round robin."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from statistics import fmean

Timeline = list["int | None"]


@dataclass(frozen=True)
class Process:
    """A process with an arrival time, a CPU burst and a priority.

    Lower priority numbers are scheduled first.
    """

    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"arrival must not be negative, got {self.arrival}")
        if self.burst < 1:
            raise ValueError(f"burst must be positive, got {self.burst}")


@dataclass(frozen=True)
class ProcessResult:
    """Completion data for one process."""

    process: Process
    finish: int

    @property
    def turnaround(self) -> int:
        return self.finish - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst


@dataclass
class Schedule:
    """A simulated run.

    ``timeline`` holds, for each time unit, the index of the running process
    or None when the CPU is idle. ``results`` follow the input order.
    """

    timeline: list[int | None] = field(default_factory=list)
    results: list[ProcessResult] = field(default_factory=list)

    def average_turnaround(self) -> float:
        """Mean turnaround time; raises ValueError when there are no processes."""
        return fmean(r.turnaround for r in self.results)

    def average_waiting(self) -> float:
        """Mean waiting time; raises ValueError when there are no processes."""
        return fmean(r.waiting for r in self.results)


def _build(procs: list[Process], timeline: list[int | None], finish: list[int]) -> Schedule:
    return Schedule(
        timeline=timeline,
        results=[ProcessResult(p, f) for p, f in zip(procs, finish)],
    )


def _arrivals(procs: list[Process], tick: int) -> list[int]:
    return [i for i, p in enumerate(procs) if p.arrival == tick]


def fcfs(processes: Sequence[Process]) -> Schedule:
    """First come, first served; simultaneous arrivals run in input order."""
    procs = list(processes)
    remaining = [p.burst for p in procs]
    finish = [0] * len(procs)
    queue: deque[int] = deque()
    timeline: list[int | None] = []
    running: int | None = None
    done = 0
    tick = 0
    while done < len(procs):
        queue.extend(_arrivals(procs, tick))
        if running is None and queue:
            running = queue.popleft()
        if running is None:
            timeline.append(None)
        else:
            remaining[running] -= 1
            timeline.append(running)
            if remaining[running] == 0:
                finish[running] = tick + 1
                done += 1
                running = None
        tick += 1
    return _build(procs, timeline, finish)


def _nonpreemptive(
    processes: Sequence[Process], key: Callable[[Process], int]
) -> Schedule:
    procs = list(processes)
    finish = [0] * len(procs)
    pending = list(range(len(procs)))
    timeline: list[int | None] = []
    time = 0
    while pending:
        ready = [i for i in pending if procs[i].arrival <= time]
        if not ready:
            timeline.append(None)
            time += 1
            continue
        chosen = min(ready, key=lambda i: key(procs[i]))
        timeline.extend([chosen] * procs[chosen].burst)
        time += procs[chosen].burst
        finish[chosen] = time
        pending.remove(chosen)
    return _build(procs, timeline, finish)


def sjf_nonpreemptive(processes: Sequence[Process]) -> Schedule:
    """Shortest job first without preemption; ties go to the earlier process."""
    return _nonpreemptive(processes, lambda p: p.burst)


def priority_nonpreemptive(processes: Sequence[Process]) -> Schedule:
    """Priority scheduling without preemption; ties go to the earlier process."""
    return _nonpreemptive(processes, lambda p: p.priority)


def priority_preemptive(processes: Sequence[Process]) -> Schedule:
    """Priority scheduling re-evaluated every time unit."""
    procs = list(processes)
    remaining = [p.burst for p in procs]
    finish = [0] * len(procs)
    timeline: list[int | None] = []
    done = 0
    time = 0
    while done < len(procs):
        ready = [
            i for i, p in enumerate(procs) if p.arrival <= time and remaining[i] > 0
        ]
        if ready:
            chosen = min(ready, key=lambda i: procs[i].priority)
            remaining[chosen] -= 1
            timeline.append(chosen)
            if remaining[chosen] == 0:
                finish[chosen] = time + 1
                done += 1
        else:
            timeline.append(None)
        time += 1
    return _build(procs, timeline, finish)


def sjf_preemptive(processes: Sequence[Process]) -> Schedule:
    """Shortest job first with preemption on arrival.

    A newly arrived process displaces the running one only if its burst is
    shorter than the running process's remaining time; displaced and waiting
    processes are resumed in first-in, first-out order.
    """
    procs = list(processes)
    remaining = [p.burst for p in procs]
    finish = [0] * len(procs)
    queue: deque[int] = deque()
    timeline: list[int | None] = []
    running: int | None = None
    done = 0
    tick = 0
    while done < len(procs):
        for arrived in _arrivals(procs, tick):
            if running is None:
                running = arrived
            elif procs[arrived].burst < remaining[running]:
                queue.append(running)
                running = arrived
            else:
                queue.append(arrived)
        if running is None and not queue:
            timeline.append(None)
            tick += 1
            continue
        if running is None:
            running = queue.popleft()
        timeline.append(running)
        remaining[running] -= 1
        if remaining[running] == 0:
            finish[running] = tick + 1
            running = None
            done += 1
        tick += 1
    return _build(procs, timeline, finish)


def round_robin(processes: Sequence[Process], quantum: int) -> Schedule:
    """Round robin with the given time quantum.

    Processes arriving during a time slice join the queue ahead of the
    preempted process.
    """
    if quantum < 1:
        raise ValueError(f"quantum must be positive, got {quantum}")
    procs = list(processes)
    remaining = [p.burst for p in procs]
    finish = [0] * len(procs)
    seen = [False] * len(procs)
    queue: deque[int] = deque()
    timeline: list[int | None] = []
    done = 0
    tick = 0

    def admit(now: int) -> None:
        for i in _arrivals(procs, now):
            if not seen[i]:
                seen[i] = True
                queue.append(i)

    while done < len(procs):
        admit(tick)
        if not queue:
            timeline.append(None)
            tick += 1
            continue
        running = queue.popleft()
        for _ in range(min(remaining[running], quantum)):
            timeline.append(running)
            tick += 1
            admit(tick)
            remaining[running] -= 1
        if remaining[running] == 0:
            finish[running] = tick
            done += 1
        else:
            queue.append(running)
    return _build(procs, timeline, finish)


def format_timeline(timeline: Sequence[int | None]) -> str:
    """Render a timeline with letters for processes and ``Idle`` for gaps."""
    return "  ".join("Idle" if slot is None else chr(65 + slot) for slot in timeline)