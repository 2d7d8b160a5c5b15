"""Page replacement simulations: FIFO, LRU and optimal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

Frames = tuple["int | None", ...]


@dataclass(frozen=True)
class PageStep:
    """One page reference: the page, the frames afterwards, and whether it hit.

    Empty frames are shown as None.
    """

    page: int
    frames: tuple[int | None, ...]
    hit: bool


@dataclass
class ReplacementResult:
    """The steps of a replacement run, in reference order."""

    steps: list[PageStep] = field(default_factory=list)

    @property
    def hits(self) -> int:
        return sum(step.hit for step in self.steps)

    @property
    def faults(self) -> int:
        return len(self.steps) - self.hits

    def _ratio(self, count: int) -> float:
        if not self.steps:
            raise ValueError("no page references were simulated")
        return count / len(self.steps)

    @property
    def hit_ratio(self) -> float:
        return self._ratio(self.hits)

    @property
    def fault_ratio(self) -> float:
        return self._ratio(self.faults)


def _check_frames(frame_count: int) -> None:
    if frame_count < 1:
        raise ValueError(f"frame count must be positive, got {frame_count}")


def fifo_replacement(reference: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page that has been resident longest."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    resident: set[int] = set()
    pointer = 0
    result = ReplacementResult()
    for page in reference:
        hit = page in resident
        if not hit:
            evicted = frames[pointer]
            if evicted is not None:
                resident.discard(evicted)
            frames[pointer] = page
            resident.add(page)
            pointer = (pointer + 1) % frame_count
        result.steps.append(PageStep(page, tuple(frames), hit))
    return result


def lru_replacement(reference: Iterable[int], capacity: int) -> ReplacementResult:
    """Replace the page whose last use lies furthest in the past."""
    _check_frames(capacity)
    frames: list[int | None] = [None] * capacity
    last_used: dict[int, int] = {}
    filled = 0
    result = ReplacementResult()
    for time, page in enumerate(reference):
        hit = page in frames
        if not hit:
            if filled < capacity:
                frames[filled] = page
                filled += 1
            else:
                victim = min(frames, key=lambda p: last_used.get(p, 0))
                frames[frames.index(victim)] = page
        last_used[page] = time
        result.steps.append(PageStep(page, tuple(frames), hit))
    return result


def _optimal_victim(frames: Sequence[int | None], future: Sequence[int]) -> int:
    """Slot to replace: the first page never used again, else the one used last."""
    best: int | None = None
    farthest = 0
    for slot, page in enumerate(frames):
        try:
            distance = future.index(page)  # type: ignore[arg-type]
        except ValueError:
            return slot
        if distance > farthest:
            farthest = distance
            best = slot
    return 0 if best is None else best


def optimal_replacement(reference: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page whose next use lies furthest in the future.

    The first miss fills the last frame; later misses fill empty frames or
    evict according to future references.
    """
    _check_frames(frame_count)
    pages = list(reference)
    frames: list[int | None] = [None] * frame_count
    result = ReplacementResult()
    for index, page in enumerate(pages):
        hit = page in frames
        if not hit:
            if frames[-1] is None:
                frames[-1] = page
            else:
                frames[_optimal_victim(frames, pages[index + 1:])] = page
        result.steps.append(PageStep(page, tuple(frames), hit))
    return result