"""Classic synchronisation problems: dining philosophers, producer-consumer and readers-writer."""

from __future__ import annotations

import random
import threading
import time
from enum import Enum
from typing import Any


class _State(Enum):
    THINKING = "thinking"
    HUNGRY = "hungry"
    EATING = "eating"


class DiningTable:
    """Dining philosophers solved with one mutex and a semaphore per philosopher.

    Every state change is recorded as ``(philosopher, state)`` where state is
    ``"hungry"``, ``"eating"`` or ``"thinking"``.
    """

    def __init__(self, size: int = 5, think_time: float = 0.0, eat_time: float = 0.0) -> None:
        if size < 2:
            raise ValueError(f"a table needs at least two philosophers, got {size}")
        self.size = size
        self.think_time = think_time
        self.eat_time = eat_time
        self._mutex = threading.Lock()
        self._may_eat = [threading.Semaphore(0) for _ in range(size)]
        self._states = [_State.THINKING] * size
        self._log: list[tuple[int, str]] = []

    def _left(self, philosopher: int) -> int:
        return (philosopher + self.size - 1) % self.size

    def _right(self, philosopher: int) -> int:
        return (philosopher + 1) % self.size

    def _check(self, philosopher: int) -> None:
        if not 0 <= philosopher < self.size:
            raise ValueError(f"no philosopher {philosopher} at a table of {self.size}")

    def _set(self, philosopher: int, state: _State) -> None:
        self._states[philosopher] = state
        self._log.append((philosopher, state.value))

    def _try_eat(self, philosopher: int) -> None:
        if (
            self._states[philosopher] is _State.HUNGRY
            and self._states[self._left(philosopher)] is not _State.EATING
            and self._states[self._right(philosopher)] is not _State.EATING
        ):
            self._set(philosopher, _State.EATING)
            self._may_eat[philosopher].release()

    def take_forks(self, philosopher: int) -> None:
        """Become hungry and block until both neighbouring forks are free."""
        self._check(philosopher)
        with self._mutex:
            self._set(philosopher, _State.HUNGRY)
            self._try_eat(philosopher)
        self._may_eat[philosopher].acquire()

    def put_forks(self, philosopher: int) -> None:
        """Put both forks down and let a hungry neighbour eat."""
        self._check(philosopher)
        with self._mutex:
            if self._states[philosopher] is not _State.EATING:
                raise RuntimeError(f"philosopher {philosopher} is not eating")
            self._set(philosopher, _State.THINKING)
            self._try_eat(self._left(philosopher))
            self._try_eat(self._right(philosopher))

    def run(self, meals: int) -> list[tuple[int, str]]:
        """Let every philosopher eat ``meals`` times; return the state changes."""
        if meals < 0:
            raise ValueError(f"meals must not be negative, got {meals}")
        with self._mutex:
            start = len(self._log)

        def dine(philosopher: int) -> None:
            for _ in range(meals):
                time.sleep(self.think_time)
                self.take_forks(philosopher)
                time.sleep(self.eat_time)
                self.put_forks(philosopher)

        threads = [threading.Thread(target=dine, args=(i,)) for i in range(self.size)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        with self._mutex:
            return self._log[start:]


class BoundedBuffer:
    """A fixed-size buffer guarded by counting semaphores.

    Items are taken from the most recently filled slot.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []
        self._mutex = threading.Lock()
        self._empty = threading.Semaphore(capacity)
        self._full = threading.Semaphore(0)

    def put(self, item: Any) -> int:
        """Store an item, blocking while the buffer is full; return the new count."""
        self._empty.acquire()
        with self._mutex:
            self._items.append(item)
            count = len(self._items)
        self._full.release()
        return count

    def get(self) -> Any:
        """Remove and return the newest item, blocking while the buffer is empty."""
        self._full.acquire()
        with self._mutex:
            item = self._items.pop()
        self._empty.release()
        return item


def produce_consume(
    count: int, capacity: int = 5, seed: int | None = None
) -> tuple[list[int], list[int]]:
    """Run one producer and one consumer over ``count`` random items below 1000.

    Returns the items in production order and in consumption order.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    buffer = BoundedBuffer(capacity)
    rng = random.Random(seed)
    produced: list[int] = []
    consumed: list[int] = []

    def producer() -> None:
        for _ in range(count):
            item = rng.randrange(1000)
            produced.append(item)
            buffer.put(item)

    def consumer() -> None:
        for _ in range(count):
            consumed.append(buffer.get())

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return produced, consumed


class ReadersWriterLock:
    """Readers-preference lock: the first reader in locks writers out, the last one out lets them in."""

    def __init__(self) -> None:
        self._count_mutex = threading.Lock()
        self._database = threading.Lock()
        self._readers = 0

    def acquire_read(self) -> None:
        with self._count_mutex:
            self._readers += 1
            if self._readers == 1:
                self._database.acquire()

    def release_read(self) -> None:
        with self._count_mutex:
            if self._readers == 0:
                raise RuntimeError("release_read without a matching acquire_read")
            self._readers -= 1
            if self._readers == 0:
                self._database.release()

    def acquire_write(self) -> None:
        self._database.acquire()

    def release_write(self) -> None:
        self._database.release()


def readers_writer(readers: int = 3, rounds: int = 10) -> list[tuple[str, int, str]]:
    """Run ``readers`` reader threads and one writer, each for ``rounds`` accesses.

    Returns events ``(role, id, action)`` with role ``"reader"`` or
    ``"writer"`` and action ``"begin"`` or ``"end"``, in the order they happened.
    """
    if readers < 0 or rounds < 0:
        raise ValueError("readers and rounds must not be negative")
    lock = ReadersWriterLock()
    log: list[tuple[str, int, str]] = []
    log_lock = threading.Lock()

    def record(role: str, ident: int, action: str) -> None:
        with log_lock:
            log.append((role, ident, action))

    def reader(ident: int) -> None:
        for _ in range(rounds):
            lock.acquire_read()
            record("reader", ident, "begin")
            time.sleep(0)
            record("reader", ident, "end")
            lock.release_read()
            time.sleep(0)

    def writer() -> None:
        for _ in range(rounds):
            time.sleep(0)
            lock.acquire_write()
            record("writer", 0, "begin")
            time.sleep(0)
            record("writer", 0, "end")
            lock.release_write()

    threads = [threading.Thread(target=reader, args=(i,)) for i in range(readers)]
    threads.append(threading.Thread(target=writer))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return log