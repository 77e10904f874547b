"""Sliding-window admission control for outbound model calls."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleeper = Callable[[float], Awaitable[None]]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


@dataclass(frozen=True, slots=True)
class RateLimiterStats:
    active: int
    max: int
    remaining: int
    window_ms: int


class RateLimiter:
    """Bound the number of calls admitted within any trailing window.

    Admission timestamps live in a deque guarded by an ``asyncio.Lock``. The
    lock is held only while evicting and appending, never while a caller is
    sleeping, so every wake-up re-evaluates the window from the current state.

    Suspended callers are not served first-come-first-served: whichever one
    wakes and takes the lock first after a slot frees up is admitted.

    Args:
        max_requests: Calls admitted per window.
        window_ms: Window length in milliseconds.
        buffer_ms: Extra delay added to each computed wait.
        clock: Returns the current time in milliseconds.
        sleep: Coroutine that suspends for the given number of seconds.
    """

    def __init__(
        self,
        max_requests: int = 5,
        window_ms: int = 60_000,
        *,
        buffer_ms: int = 100,
        clock: Clock | None = None,
        sleep: Sleeper | None = None,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_ms <= 0:
            raise ValueError("window_ms must be positive")
        if buffer_ms < 0:
            raise ValueError("buffer_ms must not be negative")

        self.max_requests = max_requests
        self.window_ms = window_ms
        self.buffer_ms = buffer_ms
        self._clock = clock or _monotonic_ms
        self._sleep = sleep or asyncio.sleep
        self._timestamps: deque[float] = deque()
        self._lock = asyncio.Lock()

        logger.info(
            "Rate limiter initialized",
            extra={"max_requests": max_requests, "window_ms": window_ms},
        )

    async def acquire_slot(self) -> None:
        """Suspend until the caller may issue one outbound call."""
        while True:
            async with self._lock:
                now = self._clock()
                self._evict(now)
                active = len(self._timestamps)

                logger.debug(
                    "Rate limit check",
                    extra={"event": "CHECK", "active": active, "max": self.max_requests},
                )

                if active < self.max_requests:
                    self._timestamps.append(now)
                    logger.debug(
                        "Rate limit slot acquired",
                        extra={
                            "event": "PROCEED",
                            "active": active + 1,
                            "remaining": self.max_requests - active - 1,
                        },
                    )
                    return

                oldest = self._timestamps[0]
                wait_ms = self.window_ms - (now - oldest) + self.buffer_ms

            logger.info(
                "Rate limit reached, waiting",
                extra={"event": "WAIT", "active": active, "wait_ms": round(wait_ms)},
            )
            await self._sleep(wait_ms / 1000)

    def stats(self) -> RateLimiterStats:
        """Admission state as of now. Does not evict."""
        now = self._clock()
        active = sum(1 for ts in self._timestamps if now - ts < self.window_ms)
        return RateLimiterStats(
            active=active,
            max=self.max_requests,
            remaining=self.max_requests - active,
            window_ms=self.window_ms,
        )

    def _evict(self, now: float) -> None:
        while self._timestamps and now - self._timestamps[0] >= self.window_ms:
            self._timestamps.popleft()
