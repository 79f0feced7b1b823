import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Minimum-interval gate shared by every request sent to EDGAR.

    SEC EDGAR allows 10 requests per second per client. Each call to
    ``acquire`` returns only once at least ``min_interval`` seconds have passed
    since the previous caller was let through. Checking the elapsed time,
    waiting out the remainder and recording the new dispatch time all happen
    under one lock, so concurrent callers can never both act on a stale
    timestamp. Waiters are not promised FIFO order.
    """

    def __init__(
        self,
        min_interval: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if min_interval < 0:
            raise ValueError("min_interval must not be negative")
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_dispatch: Optional[float] = None

    @property
    def last_dispatch(self) -> Optional[float]:
        return self._last_dispatch

    async def acquire(self) -> float:
        """Wait for this caller's dispatch slot and claim it. Returns seconds waited."""
        async with self._lock:
            waited = 0.0
            if self._last_dispatch is not None:
                # Timers may fire early, so re-check until the full interval has passed
                while True:
                    remaining = self.min_interval - (self._clock() - self._last_dispatch)
                    if remaining <= 0:
                        break
                    logger.debug("Rate limit: waiting %.3fs before next EDGAR request", remaining)
                    await self._sleep(remaining)
                    waited += remaining
            self._last_dispatch = self._clock()
            return waited
