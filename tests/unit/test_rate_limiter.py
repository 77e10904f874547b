"""Unit tests for the sliding-window rate limiter."""

from __future__ import annotations

import asyncio
import time

import pytest

from agent_workflow.llm.rate_limiter import RateLimiter, RateLimiterStats
from tests.support import FakeClock


def _max_in_any_window(admitted: list[float], window_ms: int) -> int:
    times = sorted(admitted)
    return max(sum(1 for t in times if start <= t < start + window_ms) for start in times)


@pytest.mark.asyncio
async def test_sixth_call_waits_for_the_window(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(5, 60_000, clock=fake_clock, sleep=fake_clock.sleep)
    admitted: list[float] = []

    async def acquire() -> None:
        await limiter.acquire_slot()
        admitted.append(fake_clock())

    await asyncio.gather(*(acquire() for _ in range(6)))

    assert admitted[:5] == [0, 0, 0, 0, 0]
    assert admitted[5] >= 60_000
    assert admitted[5] == 60_100


@pytest.mark.asyncio
async def test_never_more_than_max_in_any_trailing_window(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(5, 60_000, clock=fake_clock, sleep=fake_clock.sleep)
    admitted: list[float] = []

    async def acquire() -> None:
        await limiter.acquire_slot()
        admitted.append(fake_clock())

    await asyncio.gather(*(acquire() for _ in range(17)))

    assert len(admitted) == 17
    assert _max_in_any_window(admitted, 60_000) <= 5


@pytest.mark.asyncio
async def test_wait_is_recomputed_after_each_wake(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(2, 1_000, buffer_ms=0, clock=fake_clock, sleep=fake_clock.sleep)

    await limiter.acquire_slot()
    fake_clock.now_ms = 400
    await limiter.acquire_slot()

    fake_clock.now_ms = 500
    await limiter.acquire_slot()

    # Oldest admission at 0 expires at 1000: one wait of 500ms.
    assert fake_clock.sleeps == [0.5]
    assert fake_clock() == 1_000


@pytest.mark.asyncio
async def test_stats_reports_window_state_without_mutating(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(5, 60_000, clock=fake_clock, sleep=fake_clock.sleep)
    await limiter.acquire_slot()
    await limiter.acquire_slot()

    assert limiter.stats() == RateLimiterStats(active=2, max=5, remaining=3, window_ms=60_000)

    fake_clock.now_ms = 60_000
    assert limiter.stats().active == 0
    # Stats did not evict: a later clock rewind would see both again.
    fake_clock.now_ms = 10
    assert limiter.stats().active == 2


@pytest.mark.asyncio
async def test_real_clock_delays_the_call_over_the_limit() -> None:
    limiter = RateLimiter(2, 200, buffer_ms=10)

    started = time.monotonic()
    await limiter.acquire_slot()
    await limiter.acquire_slot()
    await limiter.acquire_slot()
    elapsed = time.monotonic() - started

    assert elapsed >= 0.19


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_requests": 0},
        {"window_ms": 0},
        {"buffer_ms": -1},
    ],
)
def test_rejects_invalid_settings(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        RateLimiter(**kwargs)
