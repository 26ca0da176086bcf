import asyncio

import pytest

from corekit.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, start):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeLoop:
    def __init__(self, clock):
        self.clock = clock
        self.pending = []

    def call_later(self, delay, callback, *args):
        self.pending.append((self.clock() + delay, callback, args))

    def run(self):
        while True:
            ready = [p for p in self.pending if p[0] <= self.clock()]
            if not ready:
                return
            self.pending.remove(ready[0])
            ready[0][1](*ready[0][2])


@pytest.fixture
def clock():
    return FakeClock(10.0)


@pytest.fixture
def loop(clock):
    return FakeLoop(clock)


def test_nowait_starts_full(clock, loop):
    limiter = RateLimiter(100, 1.0, clock, loop)
    assert limiter.acquire_nowait(100) is True
    assert limiter.acquire_nowait(1) is False


def test_nowait_refills_with_time(clock, loop):
    limiter = RateLimiter(100, 1.0, clock, loop)
    assert limiter.acquire_nowait(100)
    clock.advance(0.5)
    assert limiter.acquire_nowait(50) is True
    assert limiter.acquire_nowait(50) is False


def test_nowait_capped_by_capacity(clock, loop):
    limiter = RateLimiter(100, 1.0, clock, loop)
    assert limiter.acquire_nowait(100)
    clock.advance(5.0)
    assert limiter.acquire_nowait(100) is True
    assert limiter.acquire_nowait(1) is False


def test_acquire_immediate_when_available(clock, loop):
    limiter = RateLimiter(100, 1.0, clock, loop)
    calls = []
    limiter.acquire(10, lambda: calls.append("a"))
    assert calls == ["a"]
    assert loop.pending == []


def test_acquire_waits_in_order(clock, loop):
    limiter = RateLimiter(100, 1.0, clock, loop)
    assert limiter.acquire_nowait(100)
    calls = []
    limiter.acquire(50, lambda: calls.append("a"))
    limiter.acquire(50, lambda: calls.append("b"))
    assert calls == []
    clock.advance(0.5)
    loop.run()
    assert calls == ["a"]
    clock.advance(0.5)
    loop.run()
    assert calls == ["a", "b"]


def test_rejects_bad_rate():
    with pytest.raises(ValueError):
        RateLimiter(0, 1.0)


@pytest.mark.asyncio
async def test_acquire_on_running_loop():
    limiter = RateLimiter(1000, 0.01)
    assert limiter.acquire_nowait(10)
    done = asyncio.Event()
    limiter.acquire(10, done.set)
    await asyncio.wait_for(done.wait(), 2)
    assert done.is_set()