"""Schedulers for delayed, fire-and-forget callbacks."""

import asyncio
import heapq
import itertools
from typing import Callable, Protocol


class Scheduler(Protocol):
    """Anything that can run a callback after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        ...


class VirtualScheduler:
    """A scheduler driven by an explicit virtual clock.

    Nothing fires until ``advance`` moves the clock past a deadline.
    Callbacks sharing a deadline run in the order they were scheduled.
    """

    def __init__(self):
        self._now = 0.0
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks not yet fired."""
        return len(self._queue)

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self._now + delay, next(self._counter), callback))

    def advance(self, delta: float) -> int:
        """Move the clock forward, firing every callback that comes due.

        Args:
            delta: Amount of virtual time to advance (must be >= 0).

        Returns:
            Number of callbacks fired.
        """
        if delta < 0:
            raise ValueError("Cannot move the clock backwards")

        target = self._now + delta
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, callback = heapq.heappop(self._queue)
            self._now = deadline
            callback()
            fired += 1
        self._now = target
        return fired


class AsyncioScheduler:
    """A scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(delay, callback)
