# ossim

`ossim` collects small simulations of the algorithms taught in an
operating-systems course. Each simulation is a plain Python function or class
and needs nothing beyond the standard library. Use it to check exercise
answers or to see how a policy behaves on your own input. Every simulation
apart from the threaded ones in `ossim.sync` is deterministic.

## CPU scheduling: `ossim.scheduling`

`Process(arrival, burst, priority=0)` is a frozen dataclass describing one
job. A negative arrival or a burst below 1 raises `ValueError`. A lower
priority number runs first.

Each scheduler takes a sequence of processes and returns a `Schedule`:

- `fcfs(processes)`: first come, first served. Processes that arrive at the
  same time run in input order.
- `sjf_nonpreemptive(processes)`: shortest job first. On a tie the earlier
  process wins.
- `sjf_preemptive(processes)`: a process that arrives displaces the running
  one only if its burst is shorter than the running process's remaining time.
  Displaced and waiting processes resume in first-in, first-out order.
- `priority_nonpreemptive(processes)`: priority scheduling without
  preemption.
- `priority_preemptive(processes)`: priority scheduling, re-evaluated at
  every time unit.
- `round_robin(processes, quantum)`: a quantum below 1 raises `ValueError`.
  A process that arrives during a time slice joins the queue ahead of the
  process that slice preempts.

A `Schedule` holds two lists:

- `timeline`: one entry per time unit. Each entry is the index of the running
  process in the input, or `None` when the CPU is idle.
- `results`: one `ProcessResult` per process, in input order. Each result has
  `process`, `finish`, `turnaround` and `waiting`.

`average_turnaround()` and `average_waiting()` return the means. Both raise
`ValueError` when there are no processes.

`format_timeline(timeline)` renders a timeline as text. Process indices become
letters (`A`, `B`, …) and idle units become `Idle`.

```python
from ossim.scheduling import Process, fcfs, format_timeline

run = fcfs([Process(0, 3), Process(1, 2)])
format_timeline(run.timeline)   # 'A  A  A  B  B'
run.average_turnaround()        # 3.5
run.average_waiting()           # 1.0
```

## Deadlocks: `ossim.deadlock`

Matrices are sequences of rows, with one row per process. Rows of the wrong
length raise `ValueError`.

- `compute_need(maximum, allocation)`: the need matrix, computed as maximum
  minus allocation.
- `bankers_safe_sequence(available, maximum, allocation)`: returns a safe
  sequence of process indices under the Banker's algorithm, or `None` when the
  state is unsafe. Each pass lets every unfinished process whose need fits run
  to completion.
- `detect_deadlock(available, allocation, request)`: returns the order in
  which all processes can finish given their outstanding requests, or `None`
  on deadlock. After each completion the search starts again from the
  lowest-numbered unfinished process.

## Disk scheduling: `ossim.disk`

Each function returns the total head movement for a list of track requests and
a starting head position.

- `fcfs_seek_time(requests, start)`: serves requests in the order given.
- `sstf_seek_time(requests, start)`: always serves the nearest pending
  request. On a tie the request earlier in the queue wins.
- `scan_seek_time(requests, start, direction, track_size)`: the head runs to
  the disk end in the initial direction, then reverses.
- `cscan_seek_time(requests, start, direction, track_size)`: circular SCAN.
  The total includes the jump across the disk.

`direction` takes `Direction.LEFT` or `Direction.RIGHT`, or the strings
`"left"` and `"right"`. A `track_size` below 1 raises `ValueError`.

```python
from ossim.disk import fcfs_seek_time

fcfs_seek_time([98, 183, 37, 122, 14, 124, 65, 67], 53)  # 640
```

## Page replacement: `ossim.paging`

- `fifo_replacement(reference, frame_count)`: evicts the page that has been
  resident longest.
- `lru_replacement(reference, capacity)`: evicts the page least recently
  used.
- `optimal_replacement(reference, frame_count)`: evicts the page whose next
  use lies furthest ahead. The first miss fills the last frame.

A frame count below 1 raises `ValueError`.

Each function returns a `ReplacementResult`. Its `steps` attribute holds one
`PageStep` per reference, with the fields `page`, `frames` and `hit`. `frames`
is a tuple of the frame contents after the reference, with `None` for an
empty frame. The result also provides `hits`, `faults`, `hit_ratio` and
`fault_ratio`. The two ratios raise `ValueError` for an empty reference
string.

## Synchronisation: `ossim.sync`

These are thread-based versions of the classic problems. Each runs a bounded
amount of work, so it always finishes.

### Dining philosophers

`DiningTable(size=5, think_time=0.0, eat_time=0.0)` coordinates the
philosophers with one mutex and one semaphore per philosopher.

- `take_forks(i)` blocks until both of philosopher `i`'s neighbours have
  stopped eating.
- `put_forks(i)` lets a hungry neighbour eat. It raises `RuntimeError` if
  philosopher `i` is not eating.
- `run(meals)` lets every philosopher eat `meals` times. It returns the state
  changes as `(philosopher, state)` pairs, where state is `"hungry"`,
  `"eating"` or `"thinking"`.

### Producer and consumer

`BoundedBuffer(capacity=5)` is a blocking buffer guarded by counting
semaphores.

- `put(item)` returns the new item count.
- `get()` removes and returns the most recently stored item.

`produce_consume(count, capacity=5, seed=None)` runs one producer and one
consumer over `count` random integers below 1000. It returns the items in
production order and in consumption order.

### Readers and writer

`ReadersWriterLock` gives readers preference. The first reader to enter locks
writers out, and the last reader to leave lets them back in. It provides
`acquire_read`, `release_read`, `acquire_write` and `release_write`.

`readers_writer(readers=3, rounds=10)` runs the given number of reader threads
and one writer, for `rounds` accesses each. It returns the
`(role, id, action)` events in the order they happened.

## What the package does not do

`ossim` is a library only. It provides no command-line program, does not
prompt for input, and prints no tables. Build your own input and output
around the functions above, for example by passing a `Schedule`'s `timeline`
to `format_timeline`.

## Requirements

Python 3.10 or newer. The package has no runtime dependencies. Install the
`test` extra to get pytest for the test suite.