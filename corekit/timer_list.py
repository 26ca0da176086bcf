"""A single timer serving many work items that share one duration."""

from __future__ import annotations

import asyncio
import time
from collections import OrderedDict
from collections.abc import Callable
from types import TracebackType
from typing import Any

__all__ = ["TimerList", "Timer"]


class _Entry:
    __slots__ = ("expiry", "callback")

    def __init__(self, expiry: float, callback: Callable[[], Any]) -> None:
        self.expiry = expiry
        self.callback = callback


class TimerList:
    """Runs each scheduled callback ``duration`` seconds after it was last armed.

    ``clock`` returns the current time in seconds (``time.monotonic`` by
    default); ``loop`` is any object with ``call_later`` (the running asyncio
    loop by default). Not thread-safe.
    """

    def __init__(
        self,
        duration: float,
        clock: Callable[[], float] | None = None,
        loop: Any = None,
    ) -> None:
        self._duration = duration
        self._clock = clock or time.monotonic
        self._loop = loop
        self._entries: OrderedDict[_Entry, None] = OrderedDict()
        self._pending: Any = None

    def schedule(self, callback: Callable[[], Any]) -> _Entry:
        """Schedule ``callback`` and return a handle valid until it runs."""
        entry = _Entry(self._clock() + self._duration, callback)
        self._entries[entry] = None
        if self._pending is None:
            self._wait()
        return entry

    def update(self, handle: _Entry) -> None:
        """Push the expiry of ``handle`` to ``duration`` from now."""
        if handle not in self._entries:
            raise KeyError("timer handle is not scheduled")
        handle.expiry = self._clock() + self._duration
        self._entries.move_to_end(handle)

    def cancel(self, handle: _Entry) -> None:
        """Remove ``handle`` so its callback never runs."""
        del self._entries[handle]
        if not self._entries and self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _get_loop(self) -> Any:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _wait(self) -> None:
        self._arm(next(iter(self._entries)).expiry)

    def _arm(self, expiry: float) -> None:
        delay = max(0.0, expiry - self._clock())
        self._pending = self._get_loop().call_later(delay, self._expire, expiry)

    def _expire(self, expiry: float) -> None:
        self._pending = None
        if self._clock() < expiry:
            self._arm(expiry)
            return
        while self._entries:
            entry = next(iter(self._entries))
            if entry.expiry > expiry:
                break
            del self._entries[entry]
            entry.callback()
        if self._entries and self._pending is None:
            self._wait()


class Timer:
    """A scheduled callback on a :class:`TimerList`, cancelled on exit."""

    def __init__(self, timer_list: TimerList, callback: Callable[[], Any]) -> None:
        self._timer_list = timer_list
        self._callback = callback
        self._handle: _Entry | None = timer_list.schedule(self._fire)

    def _fire(self) -> None:
        self._handle = None
        self._callback()

    @property
    def active(self) -> bool:
        """Whether the callback is still waiting to run."""
        return self._handle is not None

    def update(self) -> None:
        """Restart the countdown; does nothing once the timer has fired."""
        if self._handle is not None:
            self._timer_list.update(self._handle)

    def cancel(self) -> None:
        """Prevent the callback from running."""
        if self._handle is not None:
            self._timer_list.cancel(self._handle)
            self._handle = None

    def __enter__(self) -> Timer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cancel()