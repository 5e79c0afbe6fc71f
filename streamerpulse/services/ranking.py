"""
Merge wager records across accounts and rank them.
"""
from typing import Dict, List, Mapping

from streamerpulse.core.leaderboard_config import reward_for_rank
from streamerpulse.services.leaderboard_types import LeaderboardEntry, WagerRecord


def merge_and_rank(
    records: List[WagerRecord],
    max_entries: int,
    tiers: Mapping[int, float],
    image_url: str,
) -> List[LeaderboardEntry]:
    """
    Sum wagers per username and assign dense ranks by total wager.

    Ties keep the order in which usernames were first seen, so the
    same input always yields the same ranking.
    """
    totals: Dict[str, float] = {}
    for record in records:
        totals[record.username] = totals.get(record.username, 0.0) + record.wager

    ordered = sorted(totals.items(), key=lambda item: -item[1])[:max_entries]

    return [
        LeaderboardEntry(
            rank=rank,
            username=username,
            totalWager=total,
            reward=reward_for_rank(rank, tiers),
            imageUrl=image_url,
        )
        for rank, (username, total) in enumerate(ordered, 1)
    ]
