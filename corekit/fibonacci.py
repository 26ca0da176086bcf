"""A stepping Fibonacci sequence, handy for growing back-off periods."""

from __future__ import annotations

__all__ = ["FibonacciSequence"]


class FibonacciSequence:
    """Holds two consecutive Fibonacci numbers, starting from 1, 1."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._a = 1
        self._b = 1

    @property
    def a(self) -> int:
        """The current number."""
        return self._a

    @property
    def b(self) -> int:
        """The number after the current one."""
        return self._b

    def next(self) -> None:
        """Advance by one step."""
        self._a, self._b = self._b, self._a + self._b