"""Disk head scheduling: FCFS, SSTF, SCAN and C-SCAN total seek times."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum


class Direction(str, Enum):
    """Initial direction of head movement."""

    LEFT = "left"
    RIGHT = "right"


def fcfs_seek_time(requests: Iterable[int], start: int) -> int:
    """Total head movement when serving requests in the order given."""
    total = 0
    position = start
    for track in requests:
        total += abs(track - position)
        position = track
    return total


def sstf_seek_time(requests: Iterable[int], start: int) -> int:
    """Total head movement when always serving the nearest pending request.

    Ties go to the request that appears earliest in the queue.
    """
    pending = list(requests)
    total = 0
    position = start
    while pending:
        index = min(range(len(pending)), key=lambda i: abs(pending[i] - position))
        track = pending.pop(index)
        total += abs(track - position)
        position = track
    return total


def _split(requests: Iterable[int], start: int) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for track in requests:
        (left if track < start else right).append(track)
    return left, right


def _check_track_size(track_size: int) -> None:
    if track_size < 1:
        raise ValueError(f"track_size must be positive, got {track_size}")


def scan_seek_time(
    requests: Sequence[int], start: int, direction: Direction | str, track_size: int
) -> int:
    """Total head movement for the elevator algorithm.

    The head runs to the disk end in the initial direction, then reverses and
    serves the remaining requests.
    """
    direction = Direction(direction)
    _check_track_size(track_size)
    left, right = _split(requests, start)
    if direction is Direction.LEFT:
        left.append(0)
    else:
        right.append(track_size - 1)
    left.sort()
    right.sort()

    if direction is Direction.LEFT:
        path = [*reversed(left), *right]
    else:
        path = [*right, *reversed(left)]
    return fcfs_seek_time(path, start)


def cscan_seek_time(
    requests: Sequence[int], start: int, direction: Direction | str, track_size: int
) -> int:
    """Total head movement for circular SCAN, counting the wrap-around jump."""
    direction = Direction(direction)
    _check_track_size(track_size)
    end = track_size - 1
    left, right = _split(requests, start)
    left = sorted([0, *left])
    right = sorted([end, *right])

    if direction is Direction.RIGHT:
        total = fcfs_seek_time(right, start) + fcfs_seek_time(left, 0)
    else:
        total = fcfs_seek_time(left, start) + fcfs_seek_time(right, end)
    return total + end