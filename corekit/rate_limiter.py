"""A token-bucket rate limiter measured in time credit."""

from __future__ import annotations

import asyncio
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["RateLimiter"]


@dataclass
class _WaitEntry:
    duration: float
    callback: Callable[[], Any]


class RateLimiter:
    """Admits ``rate`` units per second, bursting up to ``capacity`` seconds' worth.

    The bucket starts full. ``clock`` returns seconds (``time.monotonic`` by
    default); ``loop`` is any object with ``call_later`` (the running asyncio
    loop by default). Not thread-safe.
    """

    def __init__(
        self,
        rate: float,
        capacity: float,
        clock: Callable[[], float] | None = None,
        loop: Any = None,
    ) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._rate = rate
        self._capacity = capacity
        self._clock = clock or time.monotonic
        self._loop = loop
        self._credit = 0.0
        self._time: float | None = None
        self._queue: deque[_WaitEntry] = deque()

    def _refill(self, now: float) -> None:
        if self._time is None:
            self._credit = self._capacity
        else:
            self._credit = min(self._credit + (now - self._time), self._capacity)
        self._time = now

    def acquire(self, size: float, callback: Callable[[], Any]) -> None:
        """Call ``callback`` once ``size`` units are admitted, in request order."""
        self._queue.append(_WaitEntry(size / self._rate, callback))
        if len(self._queue) == 1:
            self._update(self._clock())

    def acquire_nowait(self, size: float) -> bool:
        """Take ``size`` units now if available; return whether they were taken."""
        self._refill(self._clock())
        duration = size / self._rate
        if self._credit < duration:
            return False
        self._credit -= duration
        return True

    def _update(self, now: float) -> None:
        self._refill(now)
        while True:
            front = self._queue[0]
            if front.duration > self._credit:
                front.duration -= self._credit
                self._credit = 0.0
                break
            self._credit -= front.duration
            front.callback()
            self._queue.popleft()
            if not self._queue:
                return
        deadline = now + min(self._queue[0].duration, self._capacity)
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._loop.call_later(
            max(0.0, deadline - self._clock()), self._update, deadline
        )