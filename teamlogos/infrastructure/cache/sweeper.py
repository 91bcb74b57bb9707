"""Periodic sweep of expired logo cache entries.

Owned by the application lifespan: start() on startup, stop() on
shutdown. Nothing runs at import time.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 60.0


class _Sweepable(Protocol):
    def clear_expired_cache(self) -> int:
        ...


class CacheSweeper:
    """Background task that calls clear_expired_cache() every interval."""

    def __init__(
        self,
        cache: _Sweepable,
        interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
    ) -> None:
        """Initialize sweeper.

        Args:
            cache: Anything with clear_expired_cache() (LogoCacheService).
            interval_seconds: Delay between sweeps.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._cache = cache
        self._interval = interval_seconds
        self._task: asyncio.Task | None = None
        self.sweeps = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the sweep loop on the running event loop. No-op if running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Logo cache sweeper started (every %ss)", self._interval)

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to exit."""
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Logo cache sweeper stopped after %d sweep(s)", self.sweeps)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                removed = self._cache.clear_expired_cache()
            except Exception:
                logger.exception("Logo cache sweep failed")
                continue
            self.sweeps += 1
            if removed:
                logger.debug("Logo cache sweep removed %d expired entries", removed)
