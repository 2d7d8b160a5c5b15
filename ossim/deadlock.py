"""Deadlock avoidance with the Banker's algorithm and deadlock detection."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_matrix(name: str, matrix: Matrix, rows: int, cols: int) -> None:
    if len(matrix) != rows:
        raise ValueError(f"{name} must have {rows} rows, got {len(matrix)}")
    for pid, row in enumerate(matrix):
        if len(row) != cols:
            raise ValueError(
                f"{name} row for process {pid} must have {cols} entries, got {len(row)}"
            )


def _fits(demand: Sequence[int], work: Sequence[int]) -> bool:
    return all(d <= w for d, w in zip(demand, work))


def _release(work: list[int], held: Sequence[int]) -> list[int]:
    return [w + h for w, h in zip(work, held)]


def compute_need(maximum: Matrix, allocation: Matrix) -> list[list[int]]:
    """Return the need matrix: maximum demand minus current allocation."""
    rows = len(maximum)
    cols = len(maximum[0]) if rows else 0
    _check_matrix("maximum", maximum, rows, cols)
    _check_matrix("allocation", allocation, rows, cols)
    return [
        [m - a for m, a in zip(max_row, alloc_row)]
        for max_row, alloc_row in zip(maximum, allocation)
    ]


def bankers_safe_sequence(
    available: Sequence[int], maximum: Matrix, allocation: Matrix
) -> list[int] | None:
    """Return a safe sequence of process indices, or None if the state is unsafe.

    Each pass scans every unfinished process in index order and lets every one
    whose need fits the current work vector run to completion.
    """
    resources = len(available)
    processes = len(maximum)
    _check_matrix("maximum", maximum, processes, resources)
    _check_matrix("allocation", allocation, processes, resources)
    need = compute_need(maximum, allocation)

    work = list(available)
    pending = list(range(processes))
    sequence: list[int] = []
    while pending:
        progressed = False
        for pid in list(pending):
            if _fits(need[pid], work):
                work = _release(work, allocation[pid])
                sequence.append(pid)
                pending.remove(pid)
                progressed = True
        if not progressed:
            return None
    return sequence


def detect_deadlock(
    available: Sequence[int], allocation: Matrix, request: Matrix
) -> list[int] | None:
    """Return the order in which all processes can finish, or None on deadlock.

    After each process completes, the search restarts from the lowest-numbered
    unfinished process.
    """
    resources = len(available)
    processes = len(allocation)
    _check_matrix("allocation", allocation, processes, resources)
    _check_matrix("request", request, processes, resources)

    work = list(available)
    pending = list(range(processes))
    sequence: list[int] = []
    while pending:
        pid = next((p for p in pending if _fits(request[p], work)), None)
        if pid is None:
            return None
        work = _release(work, allocation[pid])
        sequence.append(pid)
        pending.remove(pid)
    return sequence