"""
Two-tier leaderboard cache with proactive background refresh.
"""
import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from streamerpulse.core.exceptions import CacheWriteFailure
from streamerpulse.core.leaderboard_config import current_period
from streamerpulse.models.leaderboard_cache import LeaderboardCache
from streamerpulse.services.leaderboard_types import (
    CacheEntry, CacheState, LeaderboardEntry, LeaderboardSource
)

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "leaderboard_"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LeaderboardSnapshotStore:
    """Persists the latest cycle per period in the leaderboard_cache table."""

    def __init__(self, session_factory: Callable):
        self.session_factory = session_factory

    def load(self, period: str) -> Optional[CacheEntry]:
        """Get the persisted entry for a period, if any."""
        try:
            with self.session_factory() as db:
                row = db.query(LeaderboardCache).filter(
                    LeaderboardCache.cache_key == CACHE_KEY_PREFIX + period
                ).first()
                if not row:
                    return None
                return CacheEntry(
                    data=[LeaderboardEntry.from_dict(item) for item in json.loads(row.data)],
                    fetched_at=row.fetched_at.replace(tzinfo=timezone.utc),
                    source=LeaderboardSource(row.source),
                )
        except (SQLAlchemyError, ValueError, KeyError) as e:
            logger.error(f"Error reading persisted leaderboard for {period}: {e}")
            return None

    def save(self, period: str, entry: CacheEntry, ttl_seconds: int) -> None:
        """Upsert the entry for a period."""
        fetched_at = entry.fetched_at.astimezone(timezone.utc).replace(tzinfo=None)
        try:
            with self.session_factory() as db:
                try:
                    cache_key = CACHE_KEY_PREFIX + period
                    row = db.query(LeaderboardCache).filter(
                        LeaderboardCache.cache_key == cache_key
                    ).first()
                    if row is None:
                        row = LeaderboardCache(cache_key=cache_key)
                        db.add(row)
                    row.source = entry.source.value
                    row.data = json.dumps([item.to_dict() for item in entry.data])
                    row.fetched_at = fetched_at
                    row.expires_at = fetched_at + timedelta(seconds=ttl_seconds)
                    db.commit()
                except SQLAlchemyError:
                    db.rollback()
                    raise
        except SQLAlchemyError as e:
            raise CacheWriteFailure(f"Error storing leaderboard for {period}: {e}") from e

    def delete(self, period: Optional[str] = None) -> None:
        """Delete one period, or every persisted leaderboard."""
        try:
            with self.session_factory() as db:
                query = db.query(LeaderboardCache)
                if period:
                    query = query.filter(LeaderboardCache.cache_key == CACHE_KEY_PREFIX + period)
                else:
                    query = query.filter(LeaderboardCache.cache_key.like(f"{CACHE_KEY_PREFIX}%"))
                query.delete(synchronize_session=False)
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error clearing persisted leaderboard: {e}")

    def delete_expired(self, now: Optional[datetime] = None) -> int:
        """Delete rows past their expiry. Returns the number removed."""
        now = (now or utcnow()).astimezone(timezone.utc).replace(tzinfo=None)
        with self.session_factory() as db:
            deleted = db.query(LeaderboardCache).filter(
                LeaderboardCache.expires_at < now
            ).delete(synchronize_session=False)
            db.commit()
        return deleted


class LeaderboardCacheManager:
    """
    Per-period cache over the aggregator:
    L1: in-memory entries owned by this object
    L2: persisted snapshot table (survives restarts)
    L3: a full aggregation cycle

    States per period are COLD (nothing cached), WARM (age < TTL) and
    STALE (age >= TTL). Reads of COLD or STALE periods refresh
    synchronously; refreshes are serialized by a lock so concurrent
    readers share one upstream cycle.
    """

    def __init__(
        self,
        aggregator,
        ttl_seconds: int = 300,
        refresh_interval_seconds: int = 300,
        store: Optional[LeaderboardSnapshotStore] = None,
        default_period: Optional[str] = None,
        max_cached_periods: int = 12,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.aggregator = aggregator
        self.ttl_seconds = ttl_seconds
        self.refresh_interval_seconds = refresh_interval_seconds
        self.store = store
        self._default_period = default_period
        self.max_cached_periods = max_cached_periods
        self._clock = clock

        self._entries: Dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._refreshing: Optional[str] = None
        self._refresh_task: Optional[asyncio.Task] = None
        self._generation = 0
        self.cycles = 0

    @property
    def default_period(self) -> str:
        return self._default_period or current_period(self._clock())

    def state(self, period: Optional[str] = None) -> CacheState:
        entry = self._entries.get(period or self.default_period)
        if entry is None:
            return CacheState.COLD
        if entry.age_seconds(self._clock()) >= self.ttl_seconds:
            return CacheState.STALE
        return CacheState.WARM

    def is_refreshing(self) -> bool:
        return self._refreshing is not None

    async def get(self, period: Optional[str] = None) -> CacheEntry:
        """Serve a period from cache, refreshing it if cold or stale."""
        period = period or self.default_period

        entry = self._entries.get(period)
        if entry is not None and self.state(period) == CacheState.WARM:
            logger.debug(f"L1 cache hit for {period}")
            return entry

        return await self._refresh(period, force=False)

    async def refresh(self, period: Optional[str] = None) -> CacheEntry:
        """Run a new cycle unless one finished after this call was made."""
        return await self._refresh(period or self.default_period, force=True)

    def clear(self, period: Optional[str] = None) -> None:
        """
        Drop cached data so the next read performs a fresh cycle.
        A cycle still running when this is called is not installed.
        """
        self._generation += 1
        if period:
            self._entries.pop(period, None)
        else:
            self._entries.clear()
        if self.store is not None:
            self.store.delete(period)
        logger.info(f"Leaderboard cache cleared for: {period or 'all periods'}")

    async def _refresh(self, period: str, force: bool) -> CacheEntry:
        requested_at = self._clock()

        async with self._lock:
            entry = self._entries.get(period)
            if entry is not None:
                if force and entry.fetched_at >= requested_at:
                    return entry
                if not force and self.state(period) == CacheState.WARM:
                    return entry

            generation = self._generation

            if entry is None and not force and self.store is not None:
                persisted = await run_in_threadpool(self.store.load, period)
                if (persisted is not None and generation == self._generation
                        and persisted.age_seconds(self._clock()) < self.ttl_seconds):
                    logger.debug(f"L2 cache hit for {period}")
                    self._install(period, persisted)
                    return persisted

            self._refreshing = period
            try:
                logger.debug(f"Cache miss for {period} - running aggregation")
                result = await self.aggregator.run(period)
                self.cycles += 1
            finally:
                self._refreshing = None

            entry = CacheEntry(data=result.entries, fetched_at=self._clock(), source=result.source)

            saved = False
            if self.store is not None and generation == self._generation:
                try:
                    await run_in_threadpool(self.store.save, period, entry, self.ttl_seconds)
                    saved = True
                except CacheWriteFailure as e:
                    logger.error(f"{e}; serving from memory only")

            if generation != self._generation:
                logger.info(f"Cache cleared during the {period} cycle; result not kept")
                if saved:
                    await run_in_threadpool(self.store.delete, period)
                return entry

            self._install(period, entry)
            return entry

    def _install(self, period: str, entry: CacheEntry) -> None:
        """Hold an entry in memory, evicting the oldest extra periods past the cap."""
        self._entries[period] = entry

        default_period = self.default_period
        extra = [p for p in self._entries if p != default_period]
        while len(extra) > self.max_cached_periods:
            oldest = min(extra, key=lambda p: self._entries[p].fetched_at)
            del self._entries[oldest]
            extra.remove(oldest)
            logger.debug(f"Evicted leaderboard for {oldest} from memory")

    def start(self) -> None:
        """Start the background refresh loop if it is not running."""
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.create_task(self._refresh_loop())
            logger.info(f"Leaderboard refresh loop started (every {self.refresh_interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the background refresh loop and wait for it to exit."""
        task = self._refresh_task
        self._refresh_task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _refresh_loop(self) -> None:
        """Refresh the default period on a fixed interval regardless of reads."""
        try:
            while True:
                try:
                    await self.refresh()
                except Exception as e:
                    logger.error(f"Error in background leaderboard refresh: {e}", exc_info=True)
                await asyncio.sleep(self.refresh_interval_seconds)
        except asyncio.CancelledError:
            logger.info("Leaderboard refresh loop cancelled")
            raise

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache state for every period held in memory."""
        now = self._clock()
        return {
            "default_period": self.default_period,
            "ttl_seconds": self.ttl_seconds,
            "refresh_interval_seconds": self.refresh_interval_seconds,
            "refreshing": self._refreshing,
            "background_refresh": self._refresh_task is not None and not self._refresh_task.done(),
            "cycles": self.cycles,
            "periods": {
                period: {
                    "state": self.state(period).value,
                    "source": entry.source.value,
                    "entries": len(entry.data),
                    "fetched_at": entry.fetched_at.isoformat(),
                    "age_seconds": round(entry.age_seconds(now), 1),
                }
                for period, entry in self._entries.items()
            },
        }
