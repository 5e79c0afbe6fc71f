"""
One aggregation cycle: collect every account, merge, rank and pick a tier.
"""
import asyncio
import logging
from typing import Callable, List, Mapping, Optional, Sequence

import httpx

from streamerpulse.core.config import AccountCredential, Settings
from streamerpulse.core.leaderboard_config import period_bounds
from streamerpulse.services.leaderboard_sources import embedded_snapshot, select_source
from streamerpulse.services.leaderboard_types import (
    AggregationResult, LeaderboardEntry, WagerRecord
)
from streamerpulse.services.ranking import merge_and_rank
from streamerpulse.services.wager_collector import WagerCollector

logger = logging.getLogger(__name__)


class LeaderboardAggregator:

    def __init__(
        self,
        collector: WagerCollector,
        accounts: Sequence[AccountCredential],
        max_entries: int,
        reward_tiers: Mapping[int, float],
        image_url: str,
        snapshot: Optional[List[LeaderboardEntry]] = None,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    ):
        self.collector = collector
        self.accounts = list(accounts)
        self.max_entries = max_entries
        self.reward_tiers = dict(reward_tiers)
        self.image_url = image_url
        self.snapshot = embedded_snapshot(image_url) if snapshot is None else snapshot
        self.client_factory = client_factory or httpx.AsyncClient

    @classmethod
    def from_settings(cls, settings: Settings) -> "LeaderboardAggregator":
        collector = WagerCollector(
            api_url=settings.WAGER_API_URL,
            origin=settings.WAGER_API_ORIGIN,
            page_size=settings.WAGER_PAGE_SIZE,
            max_pages=settings.WAGER_MAX_PAGES,
            max_attempts=settings.FETCH_MAX_ATTEMPTS,
            backoff=settings.FETCH_BACKOFF_SECONDS,
            backoff_multiplier=settings.FETCH_BACKOFF_MULTIPLIER,
            jitter=settings.FETCH_JITTER_SECONDS,
            timeout=settings.FETCH_TIMEOUT_SECONDS,
        )
        return cls(
            collector=collector,
            accounts=settings.WAGER_ACCOUNTS,
            max_entries=settings.LEADERBOARD_MAX_ENTRIES,
            reward_tiers=settings.REWARD_TIERS,
            image_url=settings.LEADERBOARD_IMAGE_URL,
        )

    async def collect_all(self, period: str) -> List[WagerRecord]:
        """Collect all accounts in parallel and concatenate in account order."""
        if not self.accounts:
            return []

        period_start, period_end = period_bounds(period)
        async with self.client_factory() as client:
            results = await asyncio.gather(*[
                self.collector.collect_account(client, account, period_start, period_end)
                for account in self.accounts
            ])

        records: List[WagerRecord] = []
        for account_records in results:
            records.extend(account_records)
        return records

    async def run(self, period: str) -> AggregationResult:
        """
        Run a full cycle for a period. Always returns at least one entry:
        a tier that raises is treated as empty.
        """
        live: List[LeaderboardEntry] = []
        try:
            records = await self.collect_all(period)
            live = merge_and_rank(records, self.max_entries, self.reward_tiers, self.image_url)
        except Exception as e:
            logger.error(f"Live aggregation for {period} failed: {e}", exc_info=True)

        source, entries = select_source(live, self.snapshot, self.image_url)
        logger.info(f"Aggregated {len(entries)} leaderboard entries for {period} from {source.value}")
        return AggregationResult(source=source, entries=entries)
