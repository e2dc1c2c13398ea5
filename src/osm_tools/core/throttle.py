"""
Process-wide throttle shared by every upstream adapter.

Public OSM services ask clients for at most one request per second, so all
outbound calls pass through one gate regardless of which host they target.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class ThrottleGate:
    """Minimum-interval limiter serialized by an asyncio lock.

    Features:
    - One clock for all upstreams (no per-host limits)
    - Read-modify-write of the last acquisition under a lock
    - Injectable clock/sleep for tests
    """

    def __init__(
        self,
        interval_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._interval = max(0.0, interval_seconds)
        self._clock = clock
        self._sleep = sleep
        self._last_acquired: float | None = None
        self._lock = asyncio.Lock()

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def last_acquired(self) -> float | None:
        """Clock reading of the most recent acquisition, or None if never acquired."""
        return self._last_acquired

    async def acquire(self) -> None:
        """Wait until the interval since the previous acquisition has passed."""
        async with self._lock:
            if self._last_acquired is not None and self._interval > 0:
                elapsed = self._clock() - self._last_acquired
                if elapsed < self._interval:
                    delay = self._interval - elapsed
                    logger.debug("Throttling upstream request for %.3fs", delay)
                    await self._sleep(delay)
            self._last_acquired = self._clock()
