"""Rate gate enforcing a minimum spacing between Slack requests."""

import asyncio
import time
from collections.abc import Awaitable, Callable

from .logging import get_logger
from .metrics import DISPATCH_DELAY

log = get_logger(__name__)

DEFAULT_MIN_INTERVAL = 1.0  # Seconds between dispatch starts


class RateGate:
    """Admission control for the delivery queue's worker.

    Tracks when the last dispatch started and makes the next one wait
    until at least min_interval seconds have passed. Only the queue's
    single worker calls acquire(), so no locking is needed.
    """

    def __init__(
        self,
        min_interval: float = DEFAULT_MIN_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self.min_interval = min_interval
        self.last_dispatch: float | None = None
        self._clock = clock
        self._sleep = sleep

    def time_until_dispatch(self) -> float:
        """Seconds to wait before the next dispatch may start (0 if none)."""
        if self.last_dispatch is None:
            return 0.0
        elapsed = self._clock() - self.last_dispatch
        return max(0.0, self.min_interval - elapsed)

    async def acquire(self) -> None:
        """Wait for the gate to open, then record the dispatch start."""
        wait = self.time_until_dispatch()
        DISPATCH_DELAY.observe(wait)
        if wait > 0:
            log.debug("Rate gate waiting", seconds=round(wait, 3))
            await self._sleep(wait)
        self.last_dispatch = self._clock()
