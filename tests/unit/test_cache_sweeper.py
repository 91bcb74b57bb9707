"""CacheSweeper: periodic clear_expired_cache with explicit start/stop."""

import asyncio

import pytest

from teamlogos.infrastructure.cache import CacheSweeper


class _CountingCache:
    def __init__(self, fail_first: bool = False) -> None:
        self.calls = 0
        self.fail_first = fail_first

    def clear_expired_cache(self) -> int:
        self.calls += 1
        if self.fail_first and self.calls == 1:
            raise RuntimeError("boom")
        return 1


async def test_sweeper_runs_until_stopped() -> None:
    cache = _CountingCache()
    sweeper = CacheSweeper(cache, interval_seconds=0.01)
    sweeper.start()
    assert sweeper.running
    await asyncio.sleep(0.05)
    await sweeper.stop()
    assert not sweeper.running
    calls = cache.calls
    assert calls >= 1
    await asyncio.sleep(0.03)
    assert cache.calls == calls


async def test_sweeper_survives_a_failing_sweep() -> None:
    cache = _CountingCache(fail_first=True)
    sweeper = CacheSweeper(cache, interval_seconds=0.01)
    sweeper.start()
    await asyncio.sleep(0.05)
    await sweeper.stop()
    assert cache.calls >= 2
    assert sweeper.sweeps == cache.calls - 1


async def test_start_twice_keeps_one_task_and_stop_is_idempotent() -> None:
    sweeper = CacheSweeper(_CountingCache(), interval_seconds=10)
    sweeper.start()
    task = sweeper._task
    sweeper.start()
    assert sweeper._task is task
    await sweeper.stop()
    await sweeper.stop()
    assert task.cancelled()


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        CacheSweeper(_CountingCache(), interval_seconds=0)
