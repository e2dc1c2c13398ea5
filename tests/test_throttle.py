"""Tests for the shared upstream throttle gate."""

import asyncio

from osm_tools.core.throttle import ThrottleGate


class FakeClock:
    """Manual clock; ``sleep`` advances it instead of waiting."""

    def __init__(self, now: float = 100.0):
        self.now = now
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestThrottleGate:
    async def test_first_acquire_does_not_wait(self):
        clock = FakeClock()
        gate = ThrottleGate(1.0, clock=clock, sleep=clock.sleep)
        await gate.acquire()
        assert clock.sleeps == []
        assert gate.last_acquired == 100.0

    async def test_second_acquire_waits_remaining_interval(self):
        clock = FakeClock()
        gate = ThrottleGate(1.0, clock=clock, sleep=clock.sleep)
        await gate.acquire()
        clock.now += 0.25
        await gate.acquire()
        assert clock.sleeps == [0.75]
        assert gate.last_acquired == 101.0

    async def test_no_wait_after_interval_elapsed(self):
        clock = FakeClock()
        gate = ThrottleGate(1.0, clock=clock, sleep=clock.sleep)
        await gate.acquire()
        clock.now += 5.0
        await gate.acquire()
        assert clock.sleeps == []

    async def test_zero_interval_never_waits(self):
        clock = FakeClock()
        gate = ThrottleGate(0, clock=clock, sleep=clock.sleep)
        for _ in range(3):
            await gate.acquire()
        assert clock.sleeps == []

    async def test_negative_interval_clamped(self):
        assert ThrottleGate(-1.0).interval_seconds == 0.0

    async def test_concurrent_acquires_are_spaced(self):
        clock = FakeClock()
        gate = ThrottleGate(1.0, clock=clock, sleep=clock.sleep)
        stamps: list[float] = []

        async def call():
            await gate.acquire()
            stamps.append(clock())

        await asyncio.gather(call(), call(), call())
        assert stamps == [100.0, 101.0, 102.0]

    def test_never_acquired(self):
        assert ThrottleGate(1.0).last_acquired is None
