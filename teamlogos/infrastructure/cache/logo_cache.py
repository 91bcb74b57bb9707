"""In-memory team logo cache with failure cool-down and background preload.

Mediates every logo lookup so repeated requests for the same team/size
do not hit the upstream API again, and failures do not turn into request
storms. State is process-local and relies on the event loop for
serialization: all mutations happen between awaits.

Per key: Unknown -> Cached -> (expired) -> Unknown, or
Unknown -> Failed -> (cool-down elapsed) -> Unknown. A cached logo is
never replaced by a failure; it only leaves through expiry or a clear.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from teamlogos.application.dtos.logo import CacheStats
from teamlogos.application.interfaces.services import ILogoSource
from teamlogos.domain.entities import TeamLogo
from teamlogos.domain.enums import ImageFormat, LogoSize
from teamlogos.domain.value_objects import LogoCacheKey
from teamlogos.infrastructure.exceptions import LogoClientError, LogoFetchError
from teamlogos.shared.telemetry.tracing import add_span_event

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60
DEFAULT_FAILURE_COOLDOWN_SECONDS = 2 * 60
DEFAULT_PRELOAD_CONCURRENCY = 4


@dataclass(frozen=True)
class _CacheEntry:
    logo: TeamLogo
    stored_at: float


class LogoCacheService:
    """Caches logo lookups per (team, size, format).

    Construct once in the application lifespan and share the instance;
    tests build their own with a fake source and clock.

    Args:
        source: Logo metadata source (LogoApiClient in production).
        supports_webp: Whether consumers can render WebP. Decided once at
            startup; a WebP preference is ignored when this is False.
        ttl_seconds: How long a fetched logo stays valid.
        failure_cooldown_seconds: How long a failed key is not retried.
        preload_concurrency: Lookups per preload batch.
        cooldown_on_client_error: Whether 4xx responses start a cool-down.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        source: ILogoSource,
        *,
        supports_webp: bool = True,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        failure_cooldown_seconds: float = DEFAULT_FAILURE_COOLDOWN_SECONDS,
        preload_concurrency: int = DEFAULT_PRELOAD_CONCURRENCY,
        cooldown_on_client_error: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if preload_concurrency < 1:
            raise ValueError("preload_concurrency must be at least 1")
        self._source = source
        self._supports_webp = supports_webp
        self._ttl = ttl_seconds
        self._cooldown = failure_cooldown_seconds
        self._preload_concurrency = preload_concurrency
        self._cooldown_on_client_error = cooldown_on_client_error
        self._clock = clock

        self._entries: dict[LogoCacheKey, _CacheEntry] = {}
        self._failures: dict[LogoCacheKey, float] = {}
        # Insertion-ordered set of pending keys (values unused).
        self._preload_queue: dict[LogoCacheKey, None] = {}
        self._preload_task: asyncio.Task | None = None
        self._in_flight: dict[LogoCacheKey, asyncio.Task] = {}
        # Bumped by clear_cache so fetches started before it are not stored.
        self._generation = 0

    @property
    def supports_webp(self) -> bool:
        return self._supports_webp

    @property
    def is_preloading(self) -> bool:
        return self._preload_task is not None and not self._preload_task.done()

    def make_key(
        self, team_id: str, size: LogoSize | str = LogoSize.MEDIUM, prefer_webp: bool = True
    ) -> LogoCacheKey:
        """Composite key for a lookup, with the concrete format substituted."""
        return LogoCacheKey(
            team_id=team_id,
            size=LogoSize.coerce(size),
            image_format=ImageFormat.resolve(prefer_webp, self._supports_webp),
        )

    # ---- Lookups ----

    async def get_logo(
        self,
        team_id: str | None,
        size: LogoSize | str = LogoSize.MEDIUM,
        prefer_webp: bool = True,
    ) -> TeamLogo | None:
        """Return the logo for a team, or None when none is available.

        Never raises for fetch failures, expected or not: they are logged,
        possibly put on cool-down, and reported as None.

        Args:
            team_id: Team identifier; falsy values return None without a call.
            size: small, medium (default) or large; unknown values mean medium.
            prefer_webp: Ask for WebP when the runtime supports it.

        Returns:
            TeamLogo or None.
        """
        if not team_id:
            return None
        return await self._lookup(self.make_key(team_id, size, prefer_webp))

    async def get_logo_url(
        self, team_id: str | None, size: LogoSize | str = LogoSize.MEDIUM
    ) -> str | None:
        """Primary url only (older consumers that just need an img src)."""
        logo = await self.get_logo(team_id, size)
        return logo.url if logo else None

    async def _lookup(self, key: LogoCacheKey) -> TeamLogo | None:
        if self._is_failed(key):
            logger.debug("Logo cache FAILED (cool-down): %s", key)
            return None

        entry = self._entries.get(key)
        if entry is not None:
            if self._is_fresh(entry):
                logger.debug("Logo cache HIT: %s", key)
                return entry.logo
            del self._entries[key]
            logger.debug("Logo cache EXPIRED: %s", key)

        task = self._in_flight.get(key)
        if task is None:
            logger.debug("Logo cache MISS: %s", key)
            task = asyncio.get_running_loop().create_task(
                self._fetch(key, self._generation)
            )
            self._in_flight[key] = task
            task.add_done_callback(lambda _t, k=key: self._in_flight.pop(k, None))
        # Shielded: a caller that gives up must not cancel a fetch others share.
        return await asyncio.shield(task)

    async def _fetch(self, key: LogoCacheKey, generation: int) -> TeamLogo | None:
        try:
            logo = await self._source.fetch_logo(key.team_id, key.size, key.image_format)
        except LogoClientError as e:
            logger.warning("Failed to load logo for team %s: %s", key.team_id, e.message)
            if self._cooldown_on_client_error:
                self._mark_failed(key, generation)
            return None
        except LogoFetchError as e:
            logger.warning("Failed to load logo for team %s: %s", key.team_id, e.message)
            self._mark_failed(key, generation)
            return None
        except Exception:
            logger.exception("Unexpected error loading logo for team %s", key.team_id)
            self._mark_failed(key, generation)
            return None

        if logo is None or not logo.url:
            logger.info("No logo available for %s", key)
            self._mark_failed(key, generation)
            return None

        if generation == self._generation:
            self._entries[key] = _CacheEntry(logo=logo, stored_at=self._clock())
            self._failures.pop(key, None)
        return logo

    # ---- Preload ----

    def preload_logos(
        self,
        team_ids: Iterable[str | None] | None,
        size: LogoSize | str = LogoSize.MEDIUM,
        prefer_webp: bool = True,
    ) -> asyncio.Task | None:
        """Queue logos for background lookup and start a pass if none runs.

        Fire-and-forget: returns immediately. Must be called from a running
        event loop. Empty ids and keys already cached or cooling down are
        skipped. While a pass is active, new keys are only queued; the
        running pass picks them up.

        Returns:
            The active preload task (await it to wait for the queue to
            drain), or None when nothing is pending.
        """
        if team_ids:
            for team_id in team_ids:
                if not team_id:
                    continue
                key = self.make_key(team_id, size, prefer_webp)
                if not self._is_resolved(key):
                    self._preload_queue[key] = None

        if self._preload_queue and not self.is_preloading:
            self._preload_task = asyncio.get_running_loop().create_task(
                self._drain_preload_queue()
            )
            logger.debug("Logo preload started: %d queued", len(self._preload_queue))
        return self._preload_task if self.is_preloading else None

    async def _drain_preload_queue(self) -> None:
        """Process the queue in batches of at most preload_concurrency lookups.

        Each batch settles completely (no short-circuit on failure) before
        the next one starts, which bounds concurrent upstream calls.
        """
        batches = 0
        while self._preload_queue:
            batch: list[LogoCacheKey] = []
            for key in list(self._preload_queue):
                if self._is_resolved(key):
                    self._preload_queue.pop(key, None)
                    continue
                batch.append(key)
                if len(batch) >= self._preload_concurrency:
                    break
            if not batch:
                continue
            batches += 1
            results = await asyncio.gather(
                *(self._preload_one(key) for key in batch), return_exceptions=True
            )
            for key, result in zip(batch, results):
                if isinstance(result, Exception):
                    logger.warning("Logo preload failed for %s: %s", key, result)
        add_span_event("logo_preload_drained", {"batches": batches})
        logger.debug("Logo preload finished after %d batch(es)", batches)

    async def _preload_one(self, key: LogoCacheKey) -> None:
        try:
            await self._lookup(key)
        finally:
            self._preload_queue.pop(key, None)

    async def stop_preload(self) -> None:
        """Cancel the active preload pass (process shutdown only)."""
        task = self._preload_task
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Logo preload stopped with %d key(s) pending", len(self._preload_queue))

    # ---- Maintenance ----

    def clear_cache(self) -> None:
        """Drop all entries, failure markers and queued preloads."""
        self._entries.clear()
        self._failures.clear()
        self._preload_queue.clear()
        self._generation += 1
        logger.info("Logo cache CLEARED")

    def clear_expired_cache(self) -> int:
        """Remove expired entries and elapsed failure markers.

        Returns:
            Number of cache entries removed.
        """
        expired = [key for key, entry in self._entries.items() if not self._is_fresh(entry)]
        for key in expired:
            del self._entries[key]
        now = self._clock()
        elapsed = [
            key for key, marked_at in self._failures.items() if now - marked_at >= self._cooldown
        ]
        for key in elapsed:
            del self._failures[key]
        if expired or elapsed:
            logger.debug(
                "Logo cache sweep: %d expired, %d cool-downs elapsed",
                len(expired),
                len(elapsed),
            )
        return len(expired)

    def get_cache_stats(self) -> CacheStats:
        """Snapshot of cache sizes; no side effects."""
        now = self._clock()
        return CacheStats(
            cache_size=len(self._entries),
            failed_cache_size=sum(
                1 for marked_at in self._failures.values() if now - marked_at < self._cooldown
            ),
            preload_queue_size=len(self._preload_queue),
            is_preloading=self.is_preloading,
            in_flight=len(self._in_flight),
        )

    # ---- Internals ----

    def _is_fresh(self, entry: _CacheEntry) -> bool:
        return self._clock() - entry.stored_at < self._ttl

    def _is_failed(self, key: LogoCacheKey) -> bool:
        marked_at = self._failures.get(key)
        if marked_at is None:
            return False
        if self._clock() - marked_at >= self._cooldown:
            del self._failures[key]
            return False
        return True

    def _is_resolved(self, key: LogoCacheKey) -> bool:
        if self._is_failed(key):
            return True
        entry = self._entries.get(key)
        return entry is not None and self._is_fresh(entry)

    def _mark_failed(self, key: LogoCacheKey, generation: int) -> None:
        if generation != self._generation:
            return
        entry = self._entries.get(key)
        if entry is not None and self._is_fresh(entry):
            return
        self._entries.pop(key, None)
        self._failures[key] = self._clock()
        logger.debug("Logo cache cool-down for %.0fs: %s", self._cooldown, key)
